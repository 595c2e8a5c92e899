# dependencies.py
from functools import lru_cache

from services.inference_client import HuggingFaceClient
from services.usage_tracker import UsageTracker


@lru_cache(maxsize=1)
def get_usage_tracker() -> UsageTracker:
    # one tracker per process; the breaker must be shared by every request
    return UsageTracker()


def get_inference_client() -> HuggingFaceClient:
    return HuggingFaceClient(tracker=get_usage_tracker())
