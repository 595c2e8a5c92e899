import httpx
import pytest

from services.inference_client import HuggingFaceClient
from services.usage_tracker import UsageTracker

SENTIMENT_MODEL = "test-org/sentiment"
EMOTION_MODEL = "test-org/emotion"
BASE_URL = "https://hf.test/models"
START = 1_700_000_000.0  # 2023-11-14T22:13:20Z

# Both shapes the inference API is known to return.
POSITIVE_STRONG = [[{"label": "POSITIVE", "score": 0.98}, {"label": "NEGATIVE", "score": 0.02}]]
NEGATIVE_STRONG = [{"label": "NEGATIVE", "score": 0.95}, {"label": "POSITIVE", "score": 0.05}]
JOY = [[{"label": "joy", "score": 0.9}, {"label": "surprise", "score": 0.06}, {"label": "neutral", "score": 0.04}]]
SADNESS = [{"label": "neutral", "score": 0.15}, {"label": "sadness", "score": 0.8}, {"label": "fear", "score": 0.05}]


class FakeClock:
    def __init__(self, now: float = START):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeHF:
    """Stands in for the inference endpoint; records every request it sees."""

    def __init__(self, sentiment=POSITIVE_STRONG, emotion=JOY, status=200, exc=None, status_for=None):
        self.sentiment = sentiment
        self.emotion = emotion
        self.status = status
        self.exc = exc
        self.status_for = status_for or {}
        self.calls = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        if self.exc is not None:
            raise self.exc
        is_sentiment = request.url.path.endswith(SENTIMENT_MODEL)
        status = self.status_for.get("sentiment" if is_sentiment else "emotion", self.status)
        if status != 200:
            return httpx.Response(status, json={"error": "upstream says no"})
        return httpx.Response(200, json=self.sentiment if is_sentiment else self.emotion)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def tracker(clock):
    return UsageTracker(cooldown_seconds=3600, clock=clock)


@pytest.fixture
def make_client(tracker):
    def _make(handler, api_key="test-key"):
        return HuggingFaceClient(
            tracker=tracker,
            api_key=api_key,
            base_url=BASE_URL,
            sentiment_model=SENTIMENT_MODEL,
            emotion_model=EMOTION_MODEL,
            timeout=1.0,
            transport=httpx.MockTransport(handler),
        )

    return _make


@pytest.fixture
def api_app(tracker, make_client):
    """The real app with the tracker and a fake-upstream client injected."""
    from dependencies import get_inference_client, get_usage_tracker
    from main import app

    def _apply(fake):
        app.dependency_overrides[get_usage_tracker] = lambda: tracker
        app.dependency_overrides[get_inference_client] = lambda: make_client(fake)
        return app

    yield _apply
    app.dependency_overrides.clear()
