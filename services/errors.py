# services/errors.py
from typing import Optional


class TextRequiredError(ValueError):
    """Request body had no usable `text`. The only error surfaced to callers."""

    message = "Text is required"

    def __init__(self) -> None:
        super().__init__(self.message)


class RemoteFailure(Exception):
    """Base class for everything that can go wrong on the remote inference path."""

    kind = "remote_failure"


class RateLimited(RemoteFailure):
    kind = "rate_limited"


class QuotaExceeded(RemoteFailure):
    kind = "quota_exceeded"


class RemoteError(RemoteFailure):
    kind = "remote_error"

    def __init__(self, status: Optional[int], detail: str = "") -> None:
        self.status = status
        msg = f"HF_API_ERROR_{status}" if status is not None else "HF_API_ERROR"
        super().__init__(f"{msg}: {detail}" if detail else msg)


class RemoteTimeout(RemoteError):
    kind = "timeout"

    def __init__(self, timeout: float) -> None:
        super().__init__(None, f"timed out after {timeout:g}s")


class MalformedResponse(RemoteFailure):
    kind = "malformed_response"
