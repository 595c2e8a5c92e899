import pytest

from services.mood_resolver import normalize_sentiment, resolve_mood
from services.settings import MoodThresholds


class TestNormalizeSentiment:
    @pytest.mark.parametrize(
        "label, expected",
        [
            ("POSITIVE", "positive"),
            ("negative", "negative"),
            ("LABEL_2", "positive"),
            ("LABEL_0", "negative"),
            ("LABEL_1", "neutral"),
            ("very_pos", "positive"),
            ("NEG-ish", "negative"),
        ],
    )
    def test_known_labels(self, label, expected):
        assert normalize_sentiment(label, 0.9) == (expected, 0.9)

    def test_unknown_label_is_neutral_half_confidence(self):
        assert normalize_sentiment("mystery", 0.99) == ("neutral", 0.5)


class TestBaseMapping:
    # low emotion scores keep the sentiment-only reading
    def test_strong_positive_is_excited(self):
        assert resolve_mood("POSITIVE", 0.95, "neutral", 0.1, "good day") == ("excited", "high")

    def test_mild_positive_is_optimistic(self):
        assert resolve_mood("POSITIVE", 0.8, "neutral", 0.1, "good day") == ("optimistic", "medium")

    def test_strong_negative_is_frustrated(self):
        assert resolve_mood("NEGATIVE", 0.9, "neutral", 0.1, "bad day") == ("frustrated", "low")

    def test_mild_negative_is_concerned(self):
        assert resolve_mood("NEGATIVE", 0.7, "neutral", 0.1, "bad day") == ("concerned", "medium")

    def test_neutral_is_focused(self):
        assert resolve_mood("LABEL_1", 0.99, "neutral", 0.1, "a day") == ("focused", "medium")


class TestEmotionOverride:
    @pytest.mark.parametrize(
        "emotion, score, expected",
        [
            ("joy", 0.5, ("excited", "high")),
            ("anger", 0.9, ("frustrated", "high")),
            ("anger", 0.6, ("frustrated", "medium")),
            ("sadness", 0.8, ("reflective", "low")),
            ("fear", 0.5, ("uncertain", "low")),
            ("surprise", 0.7, ("curious", "medium")),
            ("Disgust", 0.6, ("critical", "medium")),
        ],
    )
    def test_table(self, emotion, score, expected):
        assert resolve_mood("NEGATIVE", 0.6, emotion, score, "some text") == expected

    def test_score_at_threshold_does_not_override(self):
        assert resolve_mood("NEGATIVE", 0.9, "joy", 0.4, "some text") == ("frustrated", "low")

    def test_unlisted_emotion_does_not_override(self):
        assert resolve_mood("NEGATIVE", 0.9, "neutral", 0.95, "some text") == ("frustrated", "low")


class TestBusinessContextGuard:
    def test_competitor_news_is_never_excited(self):
        text = "A well-funded competitor just raised a Series B"
        assert resolve_mood("POSITIVE", 0.97, "joy", 0.85, text) == ("focused", "high")

    @pytest.mark.parametrize("word", ["funding", "Challenge", "threat"])
    def test_other_guard_words(self, word):
        assert resolve_mood("POSITIVE", 0.95, "neutral", 0.1, f"New {word} today") == ("focused", "high")

    def test_guard_only_touches_excited(self):
        text = "The competitor threat is growing"
        assert resolve_mood("NEGATIVE", 0.9, "fear", 0.8, text) == ("uncertain", "low")


def test_thresholds_are_tunable():
    strict = MoodThresholds(excited=0.99, frustrated=0.99, emotion_override=0.95)
    assert resolve_mood("POSITIVE", 0.95, "joy", 0.9, "good day", strict) == ("optimistic", "medium")
    assert resolve_mood("NEGATIVE", 0.95, "anger", 0.9, "bad day", strict) == ("concerned", "medium")
