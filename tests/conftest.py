"""Test fixtures and configuration."""

import pytest

from src.estimation.engine import RevenueEstimator
from src.schemas.estimation import BrandInfo, BrandPricingSnapshot, CustomVsReady, PriceRange


class FakePricingProvider:
    """In-memory pricing provider; raises `error` when set."""

    def __init__(self, snapshot=None, error=None):
        self.snapshot = snapshot or BrandPricingSnapshot.empty()
        self.error = error
        self.calls = []

    async def get_pricing(self, brand_id):
        self.calls.append(brand_id)
        if self.error:
            raise self.error
        return self.snapshot


class FakeBrandInfoProvider:
    """In-memory brand info provider; raises `error` when set."""

    def __init__(self, info=None, error=None):
        self.info = info or BrandInfo.empty()
        self.error = error
        self.calls = []

    async def get_brand_info(self, brand_id):
        self.calls.append(brand_id)
        if self.error:
            raise self.error
        return self.info


@pytest.fixture
def no_pricing():
    """Brand without any priced products."""
    return BrandPricingSnapshot.empty()


@pytest.fixture
def catalogue_pricing():
    """Brand with products averaging 650 and no per-project categories."""
    return BrandPricingSnapshot(
        total_products=4,
        price_range=PriceRange(min=200, max=1200, average=650),
        category_averages={"tops": 300, "dresses": 1000},
        custom_vs_ready=CustomVsReady(custom_avg=0, ready_avg=650),
        has_pricing_data=True,
    )


@pytest.fixture
def bridal_brand():
    return BrandInfo(name="Adire Atelier", category="Bridal", price_range="$$$", location="Lagos")


@pytest.fixture
def make_estimator():
    """Build an estimator from fake provider data or errors."""

    def _make(pricing=None, info=None, pricing_error=None, info_error=None):
        return RevenueEstimator(
            pricing_provider=FakePricingProvider(pricing, pricing_error),
            brand_info_provider=FakeBrandInfoProvider(info, info_error),
        )

    return _make
