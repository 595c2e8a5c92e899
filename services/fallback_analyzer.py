# services/fallback_analyzer.py
"""
Keyword-only analysis used whenever the remote models can't be used.
No I/O and no exceptions, so it is safe to call from any error path.
"""
from __future__ import annotations

import logging
from typing import List, Tuple

from models.analyze_model import AnalysisResult

logger = logging.getLogger(__name__)

FALLBACK_CONFIDENCE = 60
FALLBACK_SOURCE = "fallback-system"

POSITIVE_WORDS = ("success", "great", "amazing", "excellent", "achieved", "progress", "breakthrough", "excited", "confident")
NEGATIVE_WORDS = ("problem", "issue", "struggle", "difficult", "failed", "stress", "worried", "frustrated", "challenging")
NEUTRAL_WORDS = ("planning", "research", "analysis", "meeting", "discussion", "review", "considering")

HEADINGS: Tuple[Tuple[Tuple[str, ...], str], ...] = (
    (("funding", "investment"), "Funding update"),
    (("revenue", "sales"), "Revenue discussion"),
    (("team", "hiring"), "Team development"),
    (("product", "launch"), "Product progress"),
    (("client", "customer"), "Customer insights"),
    (("strategy", "plan"), "Strategic thinking"),
    (("challenge", "problem"), "Business challenges"),
    (("success", "achievement"), "Business achievement"),
    (("goal", "milestone"), "Goal tracking"),
)
DEFAULT_HEADING = "Business reflection"


def _hits(lower: str, words: Tuple[str, ...]) -> int:
    return sum(1 for w in words if w in lower)


def fallback_heading(text: str) -> str:
    lower = text.lower()
    for words, heading in HEADINGS:
        if any(w in lower for w in words):
            return heading
    return DEFAULT_HEADING


def fallback_insights(text: str, mood: str, category: str) -> List[str]:
    lower = text.lower()
    insights: List[str] = []

    if category == "achievement":
        insights.append("Your positive momentum shows strong business execution. Consider documenting what worked well for future reference.")
    elif category == "challenge":
        insights.append("Challenges are growth opportunities. Consider breaking this down into actionable steps.")
    elif category == "planning":
        insights.append("Strategic thinking is key to business success. Consider setting measurable milestones for your plans.")

    if mood == "optimistic":
        insights.append("Your positive outlook is a valuable asset. Channel this energy into your next business initiative.")
    elif mood == "concerned" and "success" not in lower:
        insights.append("It's natural to have concerns in business. Consider discussing these with a mentor or advisor.")

    if "team" in lower or "hiring" in lower:
        insights.append("Team building is crucial for scaling. Focus on clear communication and shared goals.")
    elif "revenue" in lower or "sales" in lower:
        insights.append("Financial performance tracking helps guide strategic decisions. Consider regular revenue reviews.")
    elif "customer" in lower or "client" in lower:
        insights.append("Customer feedback is invaluable. Consider implementing a systematic feedback collection process.")

    return insights[:2]


def analyze_fallback(text: str) -> AnalysisResult:
    lower = (text or "").lower()
    pos = _hits(lower, POSITIVE_WORDS)
    neg = _hits(lower, NEGATIVE_WORDS)
    neu = _hits(lower, NEUTRAL_WORDS)

    if pos > neg and pos > neu:
        mood, energy, category = "optimistic", "high", "achievement"
    elif neg > pos and neg > neu:
        mood, energy, category = "concerned", "low", "challenge"
    else:
        mood, energy, category = "neutral", "medium", "planning"
    logger.debug("Fallback scores pos=%d neg=%d neu=%d -> %s", pos, neg, neu, category)

    return AnalysisResult(
        primary_mood=mood,
        confidence=FALLBACK_CONFIDENCE,
        energy=energy,
        emotions=[mood],
        business_category=category,
        insights=fallback_insights(lower, mood, category),
        ai_heading=fallback_heading(lower),
        analysis_source=FALLBACK_SOURCE,
    )
