# services/analyze_service.py
from __future__ import annotations

import logging
import math
from typing import Union

from models.analyze_model import AnalysisResult, StatusResponse
from services.category_classifier import classify_category
from services.errors import QuotaExceeded, RemoteFailure
from services.fallback_analyzer import analyze_fallback
from services.heading_generator import generate_heading
from services.inference_client import HuggingFaceClient, RemoteScores
from services.insight_generator import generate_insights
from services.mood_resolver import resolve_mood
from services.settings import MOOD_THRESHOLDS, MoodThresholds
from services.usage_tracker import UsageTracker, iso_from_ms

logger = logging.getLogger(__name__)

REMOTE_SOURCE = "hugging-face-server"


# =============================================================================
# Remote step
# =============================================================================
async def _attempt_remote(
    text: str, tracker: UsageTracker, client: HuggingFaceClient
) -> Union[RemoteScores, RemoteFailure]:
    """
    Failures come back as values, so the caller has to branch on them.
    Anything that isn't a RemoteFailure is a bug and still propagates.
    """
    if not tracker.should_attempt_remote():
        logger.warning("Hugging Face quota exceeded - skipping remote call")
        return QuotaExceeded("QUOTA_EXCEEDED (breaker open)")
    try:
        return await client.classify_both(text)
    except RemoteFailure as e:
        return e


def remote_confidence(scores: RemoteScores) -> int:
    raw = max(scores.top_sentiment.score, scores.top_emotion.score) * 100
    return int(math.floor(min(95.0, max(75.0, raw)) + 0.5))


def enrich(text: str, scores: RemoteScores, thresholds: MoodThresholds = MOOD_THRESHOLDS) -> AnalysisResult:
    sentiment, emotion = scores.top_sentiment, scores.top_emotion
    mood, energy = resolve_mood(
        sentiment.label, sentiment.score, emotion.label, emotion.score, text, thresholds
    )
    category = classify_category(text, mood, energy)
    logger.debug("Resolved mood=%s energy=%s category=%s", mood, energy, category)

    return AnalysisResult(
        primary_mood=mood,
        confidence=remote_confidence(scores),
        energy=energy,
        emotions=[mood],
        business_category=category,
        insights=generate_insights(text, category, mood),
        ai_heading=generate_heading(text, category, mood, energy),
        analysis_source=REMOTE_SOURCE,
    )


# =============================================================================
# Public service API (imported by the router)
# =============================================================================
async def analyze_entry(
    text: str,
    tracker: UsageTracker,
    client: HuggingFaceClient,
    thresholds: MoodThresholds = MOOD_THRESHOLDS,
) -> AnalysisResult:
    """
    Always returns a well-formed AnalysisResult. Remote failures and anything
    unexpected during enrichment end in the keyword fallback.
    """
    logger.info("Analysis starting for: %s...", text[:50])
    try:
        outcome = await _attempt_remote(text, tracker, client)
        if isinstance(outcome, RemoteFailure):
            logger.warning("Hugging Face unavailable (%s: %s), using fallback analysis", outcome.kind, outcome)
            return analyze_fallback(text)

        result = enrich(text, outcome, thresholds)
        logger.info("Remote analysis complete: %s / %s", result.primary_mood, result.business_category)
        return result
    except Exception:
        logger.exception("Unexpected analysis error, using fallback analysis")
        return analyze_fallback(text)


def usage_status(tracker: UsageTracker) -> StatusResponse:
    stats = tracker.snapshot()
    return StatusResponse(
        usage_stats=stats,
        api_health="quota_exceeded" if stats.quota_exceeded else "healthy",
        fallback_active=stats.fallback_mode,
        last_request=iso_from_ms(stats.last_request_time),
        requests_today=stats.requests_today,
        errors_today=stats.errors_today,
    )
