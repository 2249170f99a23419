"""Revenue estimator — turns an inquiry into a lead value estimate.

Pipeline per call:
    1. pricing snapshot + brand info (fetched concurrently; either one
       degrades to an empty default on failure, both failing is fatal)
    2. message analysis
    3. base value (brand products, else category table)
    4. multipliers
    5. confidence + follow-up recommendation

Any unexpected error switches to a message-only fallback estimate, so
callers always get a LeadAnalysisResult back.
"""

from __future__ import annotations

import asyncio
import math
from dataclasses import dataclass
from typing import Any, Awaitable, Generic, Optional, TypeVar

import structlog

from src.estimation.analyzer import analyze_message
from src.estimation.base_value import resolve_base_value
from src.estimation.confidence import score_confidence
from src.estimation.follow_up import FALLBACK_FOLLOW_UP, recommend_follow_up
from src.estimation.multipliers import apply_multipliers, compute_multipliers
from src.estimation.providers import (
    BrandInfoProvider,
    BrandPricingProvider,
    SqlBrandInfoProvider,
    SqlBrandPricingProvider,
)
from src.schemas.estimation import (
    BrandInfo,
    BrandPricingSnapshot,
    CustomerDetails,
    EstimateBreakdown,
    LeadAnalysisResult,
    PricingSource,
)

logger = structlog.get_logger()

T = TypeVar("T")


class BrandDataUnavailableError(RuntimeError):
    """Neither pricing nor brand info could be loaded."""


FALLBACK_BASE_VALUE = 2000
FALLBACK_CONFIDENCE = 40
# Checked in order, first keyword present wins
FALLBACK_MULTIPLIERS = (
    ("wedding", 2.5),
    ("luxury", 2.0),
    ("urgent", 1.3),
)


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """Outcome of a provider read: either a value or the error it raised."""

    value: Optional[T] = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


async def _fetch(call: Awaitable[T]) -> FetchResult[T]:
    try:
        return FetchResult(value=await call)
    except Exception as e:
        return FetchResult(error=e)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def fallback_estimation(message: str, inquiry_type: str = "") -> LeadAnalysisResult:
    """Message-only estimate used when the normal pipeline fails."""
    lower_message = (message or "").lower()

    multiplier = 1.0
    for keyword, value in FALLBACK_MULTIPLIERS:
        if keyword in lower_message:
            multiplier = value
            break

    final_value = round_half_up(FALLBACK_BASE_VALUE * multiplier)

    return LeadAnalysisResult(
        estimated_value=final_value,
        confidence_score=FALLBACK_CONFIDENCE,
        pricing_source=PricingSource.INDUSTRY_FALLBACK,
        breakdown=EstimateBreakdown(
            base_value=FALLBACK_BASE_VALUE,
            project_multiplier=multiplier,
            quantity_multiplier=1.0,
            urgency_multiplier=1.0,
            luxury_multiplier=1.0,
            final_value=final_value,
        ),
        recommended_follow_up=FALLBACK_FOLLOW_UP,
    )


class RevenueEstimator:
    """Estimates lead value from brand pricing data and the inquiry text."""

    def __init__(
        self,
        pricing_provider: BrandPricingProvider,
        brand_info_provider: BrandInfoProvider,
    ):
        self.pricing_provider = pricing_provider
        self.brand_info_provider = brand_info_provider

    async def estimate_lead_revenue(
        self,
        brand_id: str,
        message: str,
        inquiry_type: str,
        customer_details: Optional[CustomerDetails | dict[str, Any]] = None,
    ) -> LeadAnalysisResult:
        """Estimate the revenue potential of a lead. Never raises.

        Args:
            brand_id: Brand the inquiry is addressed to
            message: Free-text inquiry from the customer
            inquiry_type: Contact form inquiry type
            customer_details: Optional company_name / location / referral_source

        Returns:
            LeadAnalysisResult; pricing_source is "industry_fallback" when the
            pipeline failed and the message-only estimate was used
        """
        try:
            return await self._estimate(brand_id, message, inquiry_type, customer_details)
        except Exception:
            logger.exception("revenue_estimation_failed", brand_id=brand_id)
            return fallback_estimation(message, inquiry_type)

    async def _load_brand_data(self, brand_id: str) -> tuple[BrandPricingSnapshot, BrandInfo]:
        pricing_result, info_result = await asyncio.gather(
            _fetch(self.pricing_provider.get_pricing(brand_id)),
            _fetch(self.brand_info_provider.get_brand_info(brand_id)),
        )

        if not pricing_result.ok and not info_result.ok:
            raise BrandDataUnavailableError(brand_id) from pricing_result.error

        if pricing_result.ok:
            pricing = pricing_result.value
        else:
            logger.warning("brand_pricing_fetch_failed", brand_id=brand_id, error=str(pricing_result.error))
            pricing = BrandPricingSnapshot.empty()

        if info_result.ok:
            brand_info = info_result.value
        else:
            logger.warning("brand_info_fetch_failed", brand_id=brand_id, error=str(info_result.error))
            brand_info = BrandInfo.empty()

        return pricing, brand_info

    async def _estimate(
        self,
        brand_id: str,
        message: str,
        inquiry_type: str,
        customer_details: Optional[CustomerDetails | dict[str, Any]],
    ) -> LeadAnalysisResult:
        if isinstance(customer_details, dict):
            customer_details = CustomerDetails(**customer_details)

        pricing, brand_info = await self._load_brand_data(brand_id)

        analysis = analyze_message(message, inquiry_type)
        base_value, pricing_source = resolve_base_value(pricing, brand_info, analysis)
        multipliers = compute_multipliers(
            message,
            inquiry_type,
            customer_details,
            quantity=analysis.quantity,
        )

        final_value = apply_multipliers(base_value, multipliers)
        confidence = score_confidence(pricing, analysis, multipliers)
        follow_up = recommend_follow_up(final_value, analysis, pricing)

        estimated_value = round_half_up(final_value)

        logger.info(
            "lead_revenue_estimated",
            brand_id=brand_id,
            project_type=analysis.project_type.value,
            pricing_source=pricing_source.value,
            base_value=base_value,
            estimated_value=estimated_value,
            confidence=confidence,
        )

        return LeadAnalysisResult(
            estimated_value=estimated_value,
            confidence_score=confidence,
            pricing_source=pricing_source,
            breakdown=EstimateBreakdown(
                base_value=round_half_up(base_value),
                project_multiplier=multipliers.project,
                quantity_multiplier=multipliers.quantity,
                urgency_multiplier=multipliers.urgency,
                luxury_multiplier=multipliers.luxury,
                final_value=estimated_value,
            ),
            recommended_follow_up=follow_up,
        )


def build_estimator(session_factory=None) -> RevenueEstimator:
    """Estimator wired to the database providers."""
    if session_factory is None:
        from src.database import async_session_factory

        session_factory = async_session_factory

    return RevenueEstimator(
        pricing_provider=SqlBrandPricingProvider(session_factory),
        brand_info_provider=SqlBrandInfoProvider(session_factory),
    )


async def estimate_lead_revenue(
    brand_id: str,
    message: str,
    inquiry_type: str,
    customer_details: Optional[CustomerDetails | dict[str, Any]] = None,
) -> LeadAnalysisResult:
    """Convenience wrapper using the default database session factory."""
    estimator = build_estimator()
    return await estimator.estimate_lead_revenue(brand_id, message, inquiry_type, customer_details)
