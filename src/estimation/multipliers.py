"""Multipliers derived from inquiry wording and customer details."""

from __future__ import annotations

from typing import Optional

from src.estimation.analyzer import extract_quantity
from src.schemas.estimation import CustomerDetails, Multipliers

COMPLEXITY_KEYWORDS = ("complex", "detailed")
LUXURY_KEYWORDS = ("luxury", "premium", "high-end", "exclusive", "designer")

MAX_QUANTITY_MULTIPLIER = 5.0
EXTRA_PIECE_FACTOR = 0.8


def quantity_multiplier(quantity: int) -> float:
    """Each extra piece adds 0.8x, capped at 5x."""
    if quantity <= 1:
        return 1.0
    return min(1 + (quantity - 1) * EXTRA_PIECE_FACTOR, MAX_QUANTITY_MULTIPLIER)


def urgency_multiplier(lower_message: str) -> float:
    if "urgent" in lower_message or "asap" in lower_message:
        return 1.4
    if "rush" in lower_message:
        return 1.2
    return 1.0


def compute_multipliers(
    message: str,
    inquiry_type: str = "",
    customer_details: Optional[CustomerDetails] = None,
    quantity: Optional[int] = None,
) -> Multipliers:
    """Compute the five independent multipliers.

    Args:
        message: Raw inquiry text
        inquiry_type: Inquiry type from the contact form (not used by the rules)
        customer_details: Optional customer metadata
        quantity: Piece count already extracted by the analyzer; re-extracted if None

    Returns:
        Multipliers, each >= 1.0
    """
    lower_message = (message or "").lower()
    if quantity is None:
        quantity = extract_quantity(lower_message)

    company_name = customer_details.company_name if customer_details else None

    return Multipliers(
        project=1.3 if any(k in lower_message for k in COMPLEXITY_KEYWORDS) else 1.0,
        quantity=quantity_multiplier(quantity),
        urgency=urgency_multiplier(lower_message),
        luxury=1.5 if any(k in lower_message for k in LUXURY_KEYWORDS) else 1.0,
        corporate=1.2 if company_name else 1.0,
    )


def apply_multipliers(base_value: float, multipliers: Multipliers) -> float:
    return base_value * multipliers.total
