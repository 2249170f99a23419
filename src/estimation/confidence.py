"""Confidence score — how much real data backs an estimate."""

from src.schemas.estimation import BrandPricingSnapshot, MessageAnalysis, Multipliers

BASE_CONFIDENCE = 50
MIN_CONFIDENCE = 20
MAX_CONFIDENCE = 95
EXTREME_MULTIPLIER = 3.0


def score_confidence(
    pricing: BrandPricingSnapshot,
    analysis: MessageAnalysis,
    multipliers: Multipliers,
) -> int:
    confidence = BASE_CONFIDENCE

    if pricing.has_pricing_data:
        confidence += 30
    if analysis.has_specific_details:
        confidence += 15
    if analysis.mentioned_budget > 0:
        confidence += 20

    # Heavily stacked multipliers make the number less trustworthy
    if multipliers.total > EXTREME_MULTIPLIER:
        confidence -= 15

    return min(max(confidence, MIN_CONFIDENCE), MAX_CONFIDENCE)
