# services/insight_generator.py
"""
Templated business advice for an analyzed entry.

Each category owns an ordered list of sub-conditions. Every sub-condition that
holds contributes its one template, up to MAX_INSIGHTS; a category with no hit
falls back to its generic template, and an unknown category to GENERIC_INSIGHT.
"""
from __future__ import annotations

import re
from typing import Callable, Dict, List, Tuple

MAX_INSIGHTS = 2

GENERIC_INSIGHT = (
    "Every business experience contains patterns that compound into better decisions over time. "
    "Note what this moment reveals about your model's strengths and vulnerabilities, and which "
    "assumptions deserve a quick test before they shape your next resource decision."
)

Condition = Callable[[str, str], bool]  # (lower-cased text, mood) -> bool


def _kw(*words: str) -> Condition:
    pattern = re.compile(r"\b(?:" + "|".join(words) + ")")
    return lambda text, mood: bool(pattern.search(text))


def _mood(*moods: str) -> Condition:
    return lambda text, mood: mood in moods


INSIGHT_BANK: Dict[str, List[Tuple[Condition, str]]] = {
    "challenge": [
        (_kw("competitor", "competition", "funding", "raised"),
         "A well-funded competitor is market validation as much as a threat: it proves the problem is worth "
         "solving. Compete on focus rather than spend, double down on the customer segment you serve best, "
         "and let their burn rate fund the category education you benefit from."),
        (_kw("burnout", "70-hour", "overwhelm", "exhaust"),
         "Founder burnout is a capacity problem, not a willpower problem. List the decisions only you can make, "
         "then delegate or drop the rest; a COO, an operations hire, or even a strict weekly review can return "
         "hours that are currently disappearing into firefighting."),
        (_kw("resign", "handed in", "departing", "quit\\b"),
         "Personnel transitions are a chance to redesign the role, document the knowledge that is walking out "
         "the door, and spread responsibilities so no single departure stalls the roadmap again."),
        (_kw("outage", "crash", "database", "technical", "bug"),
         "Treat this technical failure as a systems signal: run a blameless post-mortem, fix the root cause "
         "rather than the symptom, and tell affected customers what changed. Transparent recovery often builds "
         "more trust than the incident cost."),
        (_mood("frustrated", "uncertain", "concerned"),
         "Frustration and doubt are normal under pressure. Separate what you control from what you don't, and "
         "pick the single next action that reduces the most risk this week."),
    ],
    "achievement": [
        (_kw("revenue", r"q[1-4]\b", "quarter", "million"),
         "Strong numbers are the moment to understand what drove them. Break the result down by channel and "
         "customer segment, then reinvest in the few levers that clearly moved revenue before momentum fades."),
        (_kw("deal", "contract", "signed", "client"),
         "A landmark deal is leverage: document how it was won, turn the client into a reference account, and "
         "use the win to open conversations with similar buyers while the story is fresh."),
        (_kw("launch", "download", "beta"),
         "A strong launch creates a short window of attention. Capture user feedback now, fix the first "
         "friction points quickly, and convert early enthusiasm into retention before novelty wears off."),
    ],
    "growth": [
        (_kw("competitor", "competition"),
         "Competitive activity confirms the market is real. Sharpen what makes you different, and invest in the "
         "customer relationships a bigger budget can't simply buy."),
        (_kw("funding", "investment", "series", "raised", "investor"),
         "Fundraising rewards a coherent story more than perfect numbers. Connect current traction to the size "
         "of the opportunity, and show the unit economics that make growth sustainable."),
        (_kw("scaling", "hired", "hiring", "infrastructure", "team"),
         "Scaling exposes processes that worked at a smaller size. Write down how key work gets done now, so new "
         "hires and new infrastructure strengthen the system instead of adding coordination overhead."),
        (_kw("customers", "clients", "revenue"),
         "Growth in customers is most valuable when it's repeatable. Track which acquisition channels bring the "
         "customers who stay, and shift spend toward them."),
    ],
    "planning": [
        (_kw("pivot", "freemium", "subscription", "pricing", "business model"),
         "Business model changes are easiest to get right as experiments. Test the new pricing or tier with a "
         "segment of users first, define what success looks like up front, and keep the decision reversible."),
        (_kw("roadmap", "timeline", "future"),
         "An ambitious roadmap needs explicit trade-offs. Rank initiatives by impact and effort, commit to the "
         "top few per quarter, and say clearly what you are choosing not to do."),
        (_kw("government", "bid"),
         "Public-sector bids reward preparation: confirm eligibility early, map the evaluation criteria to "
         "concrete evidence, and budget for long procurement cycles in your cash planning."),
    ],
    "learning": [
        (_kw("customer feedback", "feedback", "users", "prefer"),
         "Customer feedback is most valuable when it changes the product. Turn the top recurring theme into a "
         "small, measurable change and close the loop with the customers who raised it."),
        (_kw("learned", "realize", "insight", "understand"),
         "Capture this lesson while it's fresh. A short written note on what you learned and what you'll do "
         "differently turns one experience into a reusable playbook for the team."),
    ],
    "reflection": [
        (_kw("doubt", "uncertain", "confus"),
         "Uncertainty means you're at the edge of what you know. Turn the open question into a small experiment "
         "with a clear signal, rather than more analysis."),
        (_mood("reflective", "uncertain"),
         "Reflection is part of the work. Write down the one decision this thinking should inform, and set a date "
         "to revisit it with fresh data."),
    ],
}

CATEGORY_GENERIC: Dict[str, str] = {
    "challenge": (
        "Business challenges often hide the next competitive advantage. Break this one into parts: which "
        "assumptions are being tested, which resources could be reallocated, and which options remain unexplored."
    ),
    "achievement": (
        "Achievements should be leveraged while momentum is high. Record which decisions and behaviours "
        "contributed, so you can repeat them deliberately rather than by luck."
    ),
    "growth": (
        "Growth is a good problem that still needs structure. Pick the two or three metrics that matter most at "
        "this stage and review them weekly as you scale."
    ),
    "planning": (
        "Strategic thinking pays off when it becomes concrete. Translate this plan into measurable milestones "
        "with owners and dates."
    ),
    "learning": (
        "Learning compounds when it's shared. Pass what you discovered on to your team and decide on one change "
        "it should trigger."
    ),
    "reflection": (
        "Regular reflection builds pattern recognition. Note what surprised you today and what you'd repeat."
    ),
}


def generate_insights(text: str, category: str, mood: str) -> List[str]:
    if category not in INSIGHT_BANK:
        return [GENERIC_INSIGHT]

    lower = text.lower()
    insights = [tpl for cond, tpl in INSIGHT_BANK[category] if cond(lower, mood)][:MAX_INSIGHTS]
    if not insights:
        insights = [CATEGORY_GENERIC.get(category, GENERIC_INSIGHT)]
    return insights
