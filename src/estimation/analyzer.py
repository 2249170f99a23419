"""Message analyzer — keyword and regex extraction from inquiry text.

Everything here is pure: no I/O, no exceptions, same input gives the same
MessageAnalysis. Keyword groups are ordered and the first group with a
substring hit wins, so "bridal gala" is a wedding, not an evening project.
"""

from __future__ import annotations

import re

from src.schemas.estimation import MessageAnalysis, ProjectType, UrgencyLevel

PROJECT_TYPE_KEYWORDS: tuple[tuple[ProjectType, tuple[str, ...]], ...] = (
    (ProjectType.WEDDING, ("wedding", "bride", "bridal", "groom", "ceremony")),
    (ProjectType.EVENING, ("evening", "gala", "formal", "black tie", "cocktail")),
    (ProjectType.RED_CARPET, ("red carpet", "premiere", "awards", "celebrity")),
    (ProjectType.CORPORATE, ("corporate", "business", "office", "professional")),
    (ProjectType.CASUAL, ("casual", "everyday", "weekend", "comfortable")),
    (ProjectType.CUSTOM, ("custom", "bespoke", "tailored", "made to measure")),
    (ProjectType.ALTERATION, ("alteration", "adjustment", "fitting", "resize")),
    (ProjectType.CONSULTATION, ("consultation", "advice", "styling", "wardrobe")),
)

URGENCY_KEYWORDS: tuple[tuple[UrgencyLevel, tuple[str, ...]], ...] = (
    (UrgencyLevel.URGENT, ("urgent", "asap", "rush", "emergency")),
    (UrgencyLevel.HIGH, ("next week", "this month", "soon")),
    (UrgencyLevel.NORMAL, ("next month", "few months", "planning")),
    (UrgencyLevel.LOW, ("next year", "future", "eventually")),
)

DETAIL_KEYWORDS = ("fabric", "color", "style")

QUANTITY_PATTERN = re.compile(r"(\d+)\s*(piece|item|dress|suit|outfit|garment)", re.IGNORECASE)

# Tried in order against the raw message; first pattern that yields digits wins.
BUDGET_PATTERNS = (
    re.compile(r"\$[\d,]+"),
    re.compile(r"£[\d,]+"),
    re.compile(r"€[\d,]+"),
    re.compile(r"budget.*?(\d+)", re.IGNORECASE),
    re.compile(r"spend.*?(\d+)", re.IGNORECASE),
)

_CURRENCY_CHARS = re.compile(r"[$£€,]")
_DIGITS = re.compile(r"\d+")


def _first_keyword_match(text: str, groups, default):
    for label, keywords in groups:
        if any(keyword in text for keyword in keywords):
            return label
    return default


def detect_project_type(message: str) -> ProjectType:
    return _first_keyword_match(message.lower(), PROJECT_TYPE_KEYWORDS, ProjectType.GENERAL)


def detect_urgency(message: str) -> UrgencyLevel:
    return _first_keyword_match(message.lower(), URGENCY_KEYWORDS, UrgencyLevel.NORMAL)


def extract_quantity(message: str) -> int:
    """Number of pieces asked for ("3 dresses" -> 3). Defaults to 1."""
    match = QUANTITY_PATTERN.search(message.lower())
    if not match:
        return 1
    # quantity is always >= 1
    return max(int(match.group(1)), 1)


def extract_budget(message: str) -> int:
    """Budget mentioned in the message ("$5,000", "budget is 3000"). 0 if none."""
    for pattern in BUDGET_PATTERNS:
        match = pattern.search(message)
        if not match:
            continue
        digits = _DIGITS.search(_CURRENCY_CHARS.sub("", match.group(0)))
        if digits:
            return int(digits.group(0))
    return 0


def analyze_message(message: str, inquiry_type: str = "") -> MessageAnalysis:
    """Extract project type, quantity, budget, urgency and detail signals."""
    message = message or ""
    lower_message = message.lower()

    return MessageAnalysis(
        project_type=detect_project_type(message),
        quantity=extract_quantity(message),
        mentioned_budget=extract_budget(message),
        urgency_level=detect_urgency(message),
        message_length=len(message),
        has_specific_details=any(keyword in lower_message for keyword in DETAIL_KEYWORDS),
    )
