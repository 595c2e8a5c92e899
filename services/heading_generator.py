# services/heading_generator.py
from __future__ import annotations

import re
from typing import Dict, List, Optional, Tuple

DEFAULT_HEADING = "Business journal entry"


def _any(*words: str) -> re.Pattern:
    return re.compile(r"\b(?:" + "|".join(words) + ")")


# (keywords, heading, (refining keywords, refined heading) or None), first hit wins
HeadingGroup = Tuple[re.Pattern, str, Optional[Tuple[re.Pattern, str]]]

CATEGORY_HEADINGS: Dict[str, List[HeadingGroup]] = {
    "challenge": [
        (_any("burnout", "70-hour", "overwhelm"), "Managing founder burnout",
         (_any("delegat", "hire", "hiring", r"coo\b"), "Addressing burnout through delegation")),
        (_any("accident", "injur"), "Workplace safety incident", None),
        (_any("resign", "handed in", "departing", "quit\\b", "leaving"), "Team management challenges", None),
        (_any("outage", "crash", "database", "technical", "server", "bug"), "Technical challenges resolved", None),
        (_any("cash flow", "runway", "revenue", "financial", "funding"), "Financial pressure response", None),
        (_any("competitor", "competition"), "Competitive pressure response", None),
    ],
    "achievement": [
        (_any(r"q[1-4]\b", "quarter"), "Outstanding quarterly performance", None),
        (_any("revenue", "million"), "Revenue breakthrough success", None),
        (_any("deal", "contract", "signed"), "Major deal closed successfully", None),
        (_any("beta"), "Beta launch overwhelming success", None),
        (_any("launch", "product"), "Product launch success story", None),
        (_any("milestone", "completed", "achieved"), "Business success milestone", None),
    ],
    "growth": [
        (_any("competitor", "competition"), "Competitive advantage emerging", None),
        (_any("scaling", "hired", "hiring", "infrastructure"), "Scaling operations successfully", None),
        (_any("funding", "investment", "series", "raised"), "Funding momentum building", None),
        (_any("expand", "expansion", "market"), "Market expansion progress", None),
        (_any("clients", "customers"), "Customer base growing", None),
    ],
    "planning": [
        (_any("pivot", "freemium", "subscription", "pricing", "business model"), "Strategic business model evaluation", None),
        (_any("roadmap", "timeline"), "Strategic roadmap development", None),
        (_any("government", "bid"), "Government bid preparation", None),
        (_any("mvp", "build", "integrate", "feature"), "Product development decisions", None),
    ],
    "learning": [
        (_any("customer feedback", "users", "onboarding"), "Customer insights driving improvement", None),
        (_any("conference", "culture", "management", "mentor"), "Management insights applied", None),
        (_any("mixed", "lessons"), "Mixed outcomes, valuable insights", None),
    ],
    "reflection": [
        (_any("burn rate", "financial", "cash"), "Financial health assessment", None),
        (_any("doubt", "uncertain", "confus"), "Processing market uncertainty", None),
        (_any("progress", "goals", "momentum"), "Steady progress on key initiatives", None),
    ],
}

# (mood, energy or None for any) -> heading
MOOD_HEADINGS: List[Tuple[str, Optional[str], str]] = [
    ("excited", "high", "High-energy business momentum"),
    ("optimistic", None, "Optimistic business outlook"),
    ("focused", None, "Focused business execution"),
    ("frustrated", None, "Working through frustration"),
    ("concerned", None, "Addressing business concerns"),
    ("reflective", "low", "Reflecting on business direction"),
    ("uncertain", None, "Navigating uncertainty"),
    ("curious", None, "Exploring new possibilities"),
    ("critical", None, "Critical business review"),
]


def generate_heading(text: str, category: str, mood: str, energy: str) -> str:
    lower = text.lower()
    for pattern, heading, refine in CATEGORY_HEADINGS.get(category, []):
        if pattern.search(lower):
            if refine and refine[0].search(lower):
                return refine[1]
            return heading

    for m, e, heading in MOOD_HEADINGS:
        if m == mood and (e is None or e == energy):
            return heading

    return DEFAULT_HEADING
