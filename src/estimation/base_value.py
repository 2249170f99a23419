"""Base value resolution — the lead's price point before multipliers."""

from __future__ import annotations

import structlog

from src.schemas.estimation import (
    BrandInfo,
    BrandPricingSnapshot,
    MessageAnalysis,
    PricingSource,
    ProjectType,
)

logger = structlog.get_logger()

DEFAULT_CATEGORY_BASE = 2000.0

# Typical order value by brand directory category (lower-cased keys)
CATEGORY_BASE_VALUES: dict[str, float] = {
    "luxury": 5000,
    "haute couture": 8000,
    "bridal": 4000,
    "evening wear": 3000,
    "formal": 2500,
    "ready-to-wear": 2000,
    "contemporary": 1800,
    "accessories": 800,
    "sustainable": 2200,
    "streetwear": 1200,
}

# Only applied on the category fallback path
PROJECT_TYPE_MULTIPLIERS: dict[ProjectType, float] = {
    ProjectType.WEDDING: 2.5,
    ProjectType.RED_CARPET: 3.0,
    ProjectType.EVENING: 1.8,
    ProjectType.CORPORATE: 1.4,
    ProjectType.CUSTOM: 2.0,
    ProjectType.CONSULTATION: 0.3,
    ProjectType.ALTERATION: 0.4,
}


def category_base_value(brand_category: str | None, project_type: ProjectType) -> float:
    """Industry estimate from the brand's category and the project type."""
    base = CATEGORY_BASE_VALUES.get((brand_category or "").strip().lower(), DEFAULT_CATEGORY_BASE)
    return base * PROJECT_TYPE_MULTIPLIERS.get(project_type, 1.0)


def resolve_base_value(
    pricing: BrandPricingSnapshot,
    brand: BrandInfo,
    analysis: MessageAnalysis,
) -> tuple[float, PricingSource]:
    """Pick the base value and report which data it came from.

    Resolution order:
    1. Brand has priced products:
       a. average of products in the inquiry's project category
       b. custom-work average for custom inquiries
       c. overall catalogue average
    2. Category table for the brand x project-type multiplier
    """
    if pricing.has_pricing_data and pricing.price_range.average > 0:
        category_avg = pricing.category_averages.get(analysis.project_type.value, 0)
        if category_avg > 0:
            return category_avg, PricingSource.BRAND_PRODUCTS

        if analysis.project_type == ProjectType.CUSTOM and pricing.custom_vs_ready.custom_avg > 0:
            return pricing.custom_vs_ready.custom_avg, PricingSource.BRAND_PRODUCTS

        return pricing.price_range.average, PricingSource.BRAND_PRODUCTS

    base = category_base_value(brand.category, analysis.project_type)
    logger.debug(
        "base_value_from_category",
        category=brand.category,
        project_type=analysis.project_type.value,
        base_value=base,
    )
    return base, PricingSource.CATEGORY_AVERAGE
