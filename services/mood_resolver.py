# services/mood_resolver.py
from __future__ import annotations

import logging
from typing import Dict, Tuple

from services.settings import MOOD_THRESHOLDS, MoodThresholds

logger = logging.getLogger(__name__)

# Words that make an "excited" reading read as tone-deaf.
ADVERSARIAL_CONTEXT = ("competitor", "funding", "challenge", "threat")


def normalize_sentiment(label: str, score: float) -> Tuple[str, float]:
    """
    Map whatever the sentiment model calls its classes onto positive/negative/neutral.
    Covers the siebert labels, the legacy cardiffnlp LABEL_n ids, and loose variants.
    """
    lower = label.lower()
    if lower in ("positive", "negative", "neutral"):
        return lower, score
    if label == "LABEL_2":
        return "positive", score
    if label == "LABEL_0":
        return "negative", score
    if label == "LABEL_1":
        return "neutral", score
    if "pos" in lower:
        return "positive", score
    if "neg" in lower:
        return "negative", score
    if "neutral" in lower:
        return "neutral", score
    logger.warning("Unknown sentiment label %r, treating as neutral", label)
    return "neutral", 0.5


def _emotion_table(score: float, t: MoodThresholds) -> Dict[str, Tuple[str, str]]:
    return {
        "joy": ("excited", "high"),
        "anger": ("frustrated", "high" if score > t.frustrated else "medium"),
        "sadness": ("reflective", "low"),
        "fear": ("uncertain", "low"),
        "surprise": ("curious", "medium"),
        "disgust": ("critical", "medium"),
    }


def resolve_mood(
    sentiment_label: str,
    sentiment_score: float,
    emotion_label: str,
    emotion_score: float,
    text: str,
    thresholds: MoodThresholds = MOOD_THRESHOLDS,
) -> Tuple[str, str]:
    """Return (primary_mood, energy)."""
    polarity, confidence = normalize_sentiment(sentiment_label, sentiment_score)

    if polarity == "positive":
        mood, energy = ("excited", "high") if confidence > thresholds.excited else ("optimistic", "medium")
    elif polarity == "negative":
        mood, energy = ("frustrated", "low") if confidence > thresholds.frustrated else ("concerned", "medium")
    else:
        mood, energy = "focused", "medium"

    emotion = emotion_label.lower()
    if emotion_score > thresholds.emotion_override:
        override = _emotion_table(emotion_score, thresholds).get(emotion)
        if override:
            mood, energy = override

    lower = text.lower()
    if mood == "excited" and any(w in lower for w in ADVERSARIAL_CONTEXT):
        logger.debug("Adversarial business context, toning excited down to focused")
        mood, energy = "focused", "high"

    return mood, energy
