# services/usage_tracker.py
from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Callable

from models.analyze_model import UsageStats
from services.settings import QUOTA_COOLDOWN_SECONDS

logger = logging.getLogger(__name__)


def iso_from_ms(ms: int) -> str:
    dt = datetime.fromtimestamp(ms / 1000, tz=timezone.utc)
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class UsageTracker:
    """
    Counters and quota breaker for the remote inference dependency.

    One instance is shared by every request (see dependencies.py), so every
    read-modify-write goes through the lock. Counters run "since process start";
    only the quota breaker heals itself, once `cooldown_seconds` have passed
    since the last remote attempt.
    """

    def __init__(
        self,
        cooldown_seconds: float = QUOTA_COOLDOWN_SECONDS,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._lock = threading.Lock()
        self._clock = clock
        self._cooldown_ms = int(cooldown_seconds * 1000)
        self._requests_today = 0
        self._errors_today = 0
        self._last_request_ms = 0
        self._quota_exceeded = False
        self._fallback_mode = False

    def _now_ms(self) -> int:
        return int(self._clock() * 1000)

    def should_attempt_remote(self) -> bool:
        with self._lock:
            if not self._quota_exceeded:
                return True
            if self._now_ms() - self._last_request_ms > self._cooldown_ms:
                self._quota_exceeded = False
                self._fallback_mode = False
                logger.info("Quota cool-down elapsed, re-enabling remote inference")
                return True
            return False

    def record_attempt(self) -> None:
        with self._lock:
            self._requests_today += 1
            self._last_request_ms = self._now_ms()

    def _trip(self) -> None:
        with self._lock:
            self._quota_exceeded = True
            self._fallback_mode = True

    def record_rate_limited(self) -> None:
        self._trip()

    def record_quota_exceeded(self) -> None:
        self._trip()

    def record_error(self) -> None:
        with self._lock:
            self._errors_today += 1

    def snapshot(self) -> UsageStats:
        with self._lock:
            return UsageStats(
                requests_today=self._requests_today,
                errors_today=self._errors_today,
                last_request_time=self._last_request_ms,
                quota_exceeded=self._quota_exceeded,
                fallback_mode=self._fallback_mode,
            )
