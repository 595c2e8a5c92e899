# services/inference_client.py
"""
Hugging Face text-classification client.

Both target models answer `{"inputs": text}` with a list of `{label, score}`
objects, sometimes wrapped in one extra list. `parse_scores` flattens that
into a sorted list before anything downstream looks at it.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

from services import settings
from services.errors import (
    MalformedResponse,
    QuotaExceeded,
    RateLimited,
    RemoteError,
    RemoteFailure,
    RemoteTimeout,
)
from services.usage_tracker import UsageTracker

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LabelScore:
    label: str
    score: float


@dataclass(frozen=True)
class RemoteScores:
    """Sorted (best first) distributions from both models for one text."""

    sentiment: List[LabelScore]
    emotion: List[LabelScore]

    @property
    def top_sentiment(self) -> LabelScore:
        return self.sentiment[0]

    @property
    def top_emotion(self) -> LabelScore:
        return self.emotion[0]


def parse_scores(payload: Any) -> List[LabelScore]:
    if isinstance(payload, list) and payload and isinstance(payload[0], list):
        payload = payload[0]
    if not isinstance(payload, list) or not payload:
        raise MalformedResponse(f"expected a non-empty list, got {type(payload).__name__}")

    out: List[LabelScore] = []
    for item in payload:
        if not isinstance(item, dict):
            raise MalformedResponse(f"expected label/score object, got {type(item).__name__}")
        label, score = item.get("label"), item.get("score")
        if not isinstance(label, str) or isinstance(score, bool) or not isinstance(score, (int, float)):
            raise MalformedResponse(f"bad label/score entry: {item!r}")
        out.append(LabelScore(label=label, score=float(score)))
    return sorted(out, key=lambda ls: ls.score, reverse=True)


class HuggingFaceClient:
    def __init__(
        self,
        tracker: UsageTracker,
        api_key: str = settings.HUGGING_FACE_API_KEY,
        base_url: str = settings.HF_API_BASE_URL,
        sentiment_model: str = settings.HF_SENTIMENT_MODEL,
        emotion_model: str = settings.HF_EMOTION_MODEL,
        timeout: float = settings.HF_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.tracker = tracker
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.sentiment_model = sentiment_model
        self.emotion_model = emotion_model
        self.timeout = timeout
        self._transport = transport

    async def classify(self, text: str, model_id: str) -> List[LabelScore]:
        """
        One classification call. Raises a RemoteFailure subclass on any problem;
        every failure after the request goes out is counted as an error.
        """
        if not self.api_key:
            raise RemoteError(None, "Hugging Face API key not configured")

        url = f"{self.base_url}/{model_id}"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }

        self.tracker.record_attempt()
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                try:
                    resp = await client.post(url, headers=headers, json={"inputs": text})
                except httpx.TimeoutException as exc:
                    logger.error("Hugging Face timeout after %ss (%s)", self.timeout, model_id)
                    raise RemoteTimeout(self.timeout) from exc
                except httpx.RequestError as exc:
                    logger.error("Hugging Face network error (%s): %s", model_id, exc)
                    raise RemoteError(None, str(exc)) from exc

            if resp.status_code == 429:
                logger.error("Hugging Face rate limit exceeded (%s)", model_id)
                self.tracker.record_rate_limited()
                raise RateLimited("RATE_LIMIT_EXCEEDED")
            if resp.status_code == 403:
                logger.error("Hugging Face quota exceeded (%s)", model_id)
                self.tracker.record_quota_exceeded()
                raise QuotaExceeded("QUOTA_EXCEEDED")
            if not resp.is_success:
                logger.error("Hugging Face API error %s on %s: %s", resp.status_code, model_id, resp.text[:200])
                raise RemoteError(resp.status_code, resp.reason_phrase)

            try:
                data = resp.json()
            except ValueError as exc:
                raise MalformedResponse(f"non-JSON body from {model_id}") from exc
            return parse_scores(data)
        except RemoteFailure:
            self.tracker.record_error()
            raise

    async def classify_both(self, text: str) -> RemoteScores:
        """Sentiment and emotion calls run side by side; first failure wins."""
        results = await asyncio.gather(
            self.classify(text, self.sentiment_model),
            self.classify(text, self.emotion_model),
            return_exceptions=True,
        )
        for r in results:
            if isinstance(r, BaseException):
                raise r
        sentiment, emotion = results
        return RemoteScores(sentiment=sentiment, emotion=emotion)
