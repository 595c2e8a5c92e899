# services/settings.py
import os
from dataclasses import dataclass


def _float_env(name: str, default: float) -> float:
    try:
        return float(os.getenv(name, str(default)))
    except ValueError:
        return default


# ---- Hugging Face ------------------------------------------------------------
HUGGING_FACE_API_KEY = os.getenv("HUGGING_FACE_API_KEY", "")
HF_API_BASE_URL = os.getenv("HF_API_BASE_URL", "https://api-inference.huggingface.co/models")
HF_SENTIMENT_MODEL = os.getenv("HF_SENTIMENT_MODEL", "siebert/sentiment-roberta-large-english")
HF_EMOTION_MODEL = os.getenv("HF_EMOTION_MODEL", "j-hartmann/emotion-english-distilroberta-base")
HF_TIMEOUT_SECONDS = _float_env("HF_TIMEOUT_SECONDS", 10.0)

# ---- Usage / breaker ---------------------------------------------------------
QUOTA_COOLDOWN_SECONDS = _float_env("QUOTA_COOLDOWN_SECONDS", 3600.0)

# ---- HTTP ---------------------------------------------------------------------
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class MoodThresholds:
    """Score cut-offs used when turning model scores into mood/energy."""

    excited: float = 0.8
    frustrated: float = 0.7
    emotion_override: float = 0.4


def load_mood_thresholds() -> MoodThresholds:
    return MoodThresholds(
        excited=_float_env("MOOD_EXCITED_THRESHOLD", 0.8),
        frustrated=_float_env("MOOD_FRUSTRATED_THRESHOLD", 0.7),
        emotion_override=_float_env("EMOTION_OVERRIDE_THRESHOLD", 0.4),
    )


MOOD_THRESHOLDS = load_mood_thresholds()
