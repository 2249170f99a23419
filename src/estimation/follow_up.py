"""Follow-up recommendation for the brand owner."""

from src.schemas.estimation import BrandPricingSnapshot, MessageAnalysis, UrgencyLevel

HIGH_VALUE_FOLLOW_UP = "High-value lead - Schedule consultation within 24 hours"
SIGNIFICANT_FOLLOW_UP = "Significant opportunity - Send detailed portfolio and pricing guide"
URGENT_FOLLOW_UP = "Urgent inquiry - Respond immediately with availability"
MISSING_PRICING_FOLLOW_UP = "Add product pricing data to improve lead estimation accuracy"
STANDARD_FOLLOW_UP = "Standard follow-up - Respond within business hours with consultation offer"
FALLBACK_FOLLOW_UP = "Standard follow-up recommended"

HIGH_VALUE_THRESHOLD = 10000
SIGNIFICANT_THRESHOLD = 5000


def recommend_follow_up(
    estimated_value: float,
    analysis: MessageAnalysis,
    pricing: BrandPricingSnapshot,
) -> str:
    """First matching rule wins: value, then urgency, then missing data."""
    if estimated_value > HIGH_VALUE_THRESHOLD:
        return HIGH_VALUE_FOLLOW_UP
    if estimated_value > SIGNIFICANT_THRESHOLD:
        return SIGNIFICANT_FOLLOW_UP
    if analysis.urgency_level == UrgencyLevel.URGENT:
        return URGENT_FOLLOW_UP
    if not pricing.has_pricing_data:
        return MISSING_PRICING_FOLLOW_UP
    return STANDARD_FOLLOW_UP
