import pytest

from services.heading_generator import DEFAULT_HEADING, generate_heading
from services.insight_generator import (
    CATEGORY_GENERIC,
    GENERIC_INSIGHT,
    MAX_INSIGHTS,
    generate_insights,
)


# =============================================================================
# Headings
# =============================================================================
class TestHeadings:
    @pytest.mark.parametrize(
        "text, category, expected",
        [
            ("I'm working 70-hour weeks and feeling burnt out", "challenge", "Managing founder burnout"),
            ("70-hour weeks again, I need to delegate more", "challenge", "Addressing burnout through delegation"),
            ("Our database went down for three hours", "challenge", "Technical challenges resolved"),
            ("We signed a major contract today, revenue is up 40% this quarter", "achievement", "Outstanding quarterly performance"),
            ("Closed our biggest deal ever", "achievement", "Major deal closed successfully"),
            ("A well-funded competitor just raised a Series B", "growth", "Competitive advantage emerging"),
            ("Considering a pivot to a freemium model", "planning", "Strategic business model evaluation"),
            ("Customer feedback showed users prefer a simpler onboarding", "learning", "Customer insights driving improvement"),
        ],
    )
    def test_category_keywords(self, text, category, expected):
        assert generate_heading(text, category, "focused", "medium") == expected

    def test_first_group_wins(self):
        # quarter beats the deal group even though both match
        heading = generate_heading("Signed the deal that made our quarter", "achievement", "excited", "high")
        assert heading == "Outstanding quarterly performance"

    def test_mood_fallback_when_no_keyword_matches(self):
        assert generate_heading("Quiet day at the office", "reflection", "focused", "medium") == "Focused business execution"
        assert generate_heading("Quiet day at the office", "growth", "excited", "high") == "High-energy business momentum"

    def test_mood_energy_must_match_when_pinned(self):
        assert generate_heading("Quiet day at the office", "reflection", "excited", "medium") == DEFAULT_HEADING

    def test_unknown_category_uses_mood(self):
        assert generate_heading("anything", "mystery", "curious", "medium") == "Exploring new possibilities"

    def test_default_heading(self):
        assert generate_heading("Quiet day", "reflection", "neutral", "medium") == "Business journal entry"


# =============================================================================
# Insights
# =============================================================================
class TestInsights:
    def test_challenge_with_competitor_mentions_competitor(self):
        insights = generate_insights("A well-funded competitor just raised a Series B", "challenge", "frustrated")
        assert len(insights) == 2
        assert "competitor" in insights[0]

    def test_capped_at_two(self):
        text = "We launched and signed a contract, revenue up this quarter"
        insights = generate_insights(text, "achievement", "excited")
        assert len(insights) == MAX_INSIGHTS

    def test_category_generic_when_nothing_matches(self):
        assert generate_insights("Quiet day", "growth", "focused") == [CATEGORY_GENERIC["growth"]]

    def test_mood_condition(self):
        insights = generate_insights("Quiet day", "reflection", "reflective")
        assert len(insights) == 1
        assert insights[0] != CATEGORY_GENERIC["reflection"]

    def test_unknown_category_gets_generic_insight(self):
        assert generate_insights("anything", "mystery", "focused") == [GENERIC_INSIGHT]

    @pytest.mark.parametrize("category", list(CATEGORY_GENERIC))
    @pytest.mark.parametrize(
        "text, mood",
        [
            ("", "focused"),
            ("Burnout, outage, competitor funding and a resignation in one week", "frustrated"),
            ("Revenue up, deal signed, beta launched, new clients", "excited"),
        ],
    )
    def test_always_one_or_two(self, category, text, mood):
        insights = generate_insights(text, category, mood)
        assert 1 <= len(insights) <= MAX_INSIGHTS
        assert all(insights)
