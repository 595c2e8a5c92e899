# services/category_classifier.py
"""
Business category for a journal entry.

The keyword families overlap a lot ("pivot" is both planning and trouble,
"funding" is both growth and pressure), so the outcome depends on the order of
RULES. The first rule whose predicate holds and whose suppressor does not wins;
nothing matching means "reflection".
"""
from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Pattern

logger = logging.getLogger(__name__)

DEFAULT_CATEGORY = "reflection"


def _words(words: Iterable[str]) -> Pattern[str]:
    # Keywords match at a word start, so "plan" hits "plans" but not "explanation".
    return re.compile(r"\b(?:" + "|".join(words) + ")")


PLANNING = _words([
    "considering", "debating", "thinking about", "pivot", "freemium",
    "subscription model", "pricing", "business model", "plan", "strategy",
    "roadmap", "timeline", "future", "prepar", "government", "bid",
])
DELIBERATION = _words(["considering", "debating", "thinking about"])

CHALLENGE = _words([
    "problem", "difficult", "outage", "failed", "resignation", "resigned",
    "burnout", "setback", "risk", "struggling", "overwhelmed", "70-hour",
    "cancelled", "handed in her", "handed in his", "departing", "major setback",
    "crashed", "crisis", "accident", "injured", "lawsuit",
])
STRESS = _words(["pressure", "stress"])
LAUNCH_WIN = _words(["success", "download", "positive", "response", "already"])

ACHIEVEMENT = _words([
    "contract", "deal", "signed", "closed", r"won\b", "achieved", "completed",
    "milestone", "breakthrough", "success", "record", "incredible",
])
REVENUE_UP = re.compile(r"\b(?:hit|up)\b|\bgrowth|\bmillion|\d+(?:\.\d+)?\s*%")
QUARTER = re.compile(r"\bq[1-4]\b|\bquarter")
QUARTER_WIN = re.compile(r"\bexceeded|\bbeat\b|\brecord|\bgrowth|\bup\b|\d+(?:\.\d+)?\s*%")

GROWTH = _words([
    "revenue", "growth", "expand", "expansion", "scaling", "clients",
    "customers", "funding", "investment", "series", "competitor", "raised",
    "million",
])
STRAIN = _words(["struggling", "pressure", "overwhelm"])

LEARNING = _words([
    "learned", "feedback", "insight", "understand", "realize", "suggestion",
    "customer feedback", "prefer",
])


@dataclass(frozen=True)
class EntryContext:
    text: str  # lower-cased
    mood: str
    energy: str

    @classmethod
    def build(cls, text: str, mood: str = "", energy: str = "") -> "EntryContext":
        return cls(text=text.lower(), mood=mood, energy=energy)


# ---- predicates --------------------------------------------------------------
def has_planning(ctx: EntryContext) -> bool:
    return bool(PLANNING.search(ctx.text))


def has_challenge(ctx: EntryContext) -> bool:
    if CHALLENGE.search(ctx.text):
        return True
    # pressure/stress around investor expectations is the job, not a crisis
    return bool(STRESS.search(ctx.text)) and "investor expectations" not in ctx.text


def is_launch_win(ctx: EntryContext) -> bool:
    return "launched" in ctx.text and bool(LAUNCH_WIN.search(ctx.text))


def has_achievement(ctx: EntryContext) -> bool:
    t = ctx.text
    if ACHIEVEMENT.search(t):
        return True
    if "revenue" in t and REVENUE_UP.search(t):
        return True
    return bool(QUARTER.search(t)) and bool(QUARTER_WIN.search(t))


def is_deliberating(ctx: EntryContext) -> bool:
    return bool(DELIBERATION.search(ctx.text))


def has_growth(ctx: EntryContext) -> bool:
    return bool(GROWTH.search(ctx.text))


def is_growth_under_strain(ctx: EntryContext) -> bool:
    return ctx.mood == "reflective" and ctx.energy == "low" and bool(STRAIN.search(ctx.text))


def has_learning(ctx: EntryContext) -> bool:
    return bool(LEARNING.search(ctx.text))


# ---- rule table --------------------------------------------------------------
@dataclass(frozen=True)
class CategoryRule:
    name: str
    category: str
    predicate: Callable[[EntryContext], bool]
    suppressed_by: Optional[Callable[[EntryContext], bool]] = None

    def matches(self, ctx: EntryContext) -> bool:
        if not self.predicate(ctx):
            return False
        return self.suppressed_by is None or not self.suppressed_by(ctx)


RULES = (
    # Early planning yields to any trouble word; the late re-check picks it back
    # up if challenge/achievement/growth all pass on the entry.
    CategoryRule("planning-early", "planning", has_planning, suppressed_by=has_challenge),
    CategoryRule("challenge", "challenge", has_challenge, suppressed_by=is_launch_win),
    CategoryRule("achievement", "achievement", has_achievement, suppressed_by=is_deliberating),
    CategoryRule("growth", "growth", has_growth, suppressed_by=is_growth_under_strain),
    CategoryRule(
        "growth-under-strain",
        "challenge",
        lambda ctx: has_growth(ctx) and is_growth_under_strain(ctx),
    ),
    CategoryRule("planning-late", "planning", has_planning),
    CategoryRule("learning", "learning", has_learning),
)


def first_matching_rule(ctx: EntryContext) -> Optional[CategoryRule]:
    for rule in RULES:
        if rule.matches(ctx):
            return rule
    return None


def classify_category(text: str, mood: str = "", energy: str = "") -> str:
    rule = first_matching_rule(EntryContext.build(text, mood, energy))
    if rule is None:
        logger.debug("No category rule matched, defaulting to %s", DEFAULT_CATEGORY)
        return DEFAULT_CATEGORY
    logger.debug("Category rule %s -> %s", rule.name, rule.category)
    return rule.category
