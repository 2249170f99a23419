"""Tests for base value resolution."""

import pytest

from src.estimation.analyzer import analyze_message
from src.estimation.base_value import category_base_value, resolve_base_value
from src.schemas.estimation import (
    BrandInfo,
    BrandPricingSnapshot,
    CustomVsReady,
    PriceRange,
    PricingSource,
    ProjectType,
)


def _pricing(average=1000, categories=None, custom_avg=0, has_data=True):
    return BrandPricingSnapshot(
        total_products=5,
        price_range=PriceRange(min=100, max=5000, average=average),
        category_averages=categories or {},
        custom_vs_ready=CustomVsReady(custom_avg=custom_avg, ready_avg=average),
        has_pricing_data=has_data,
    )


class TestBrandProducts:
    def test_category_average_preferred(self):
        pricing = _pricing(categories={"wedding": 3200})
        base, source = resolve_base_value(pricing, BrandInfo(), analyze_message("wedding gown", ""))
        assert base == 3200
        assert source == PricingSource.BRAND_PRODUCTS

    def test_zero_category_average_skipped(self):
        pricing = _pricing(average=900, categories={"wedding": 0})
        base, _ = resolve_base_value(pricing, BrandInfo(), analyze_message("wedding gown", ""))
        assert base == 900

    def test_custom_average_for_custom_projects(self):
        pricing = _pricing(average=900, custom_avg=2400)
        base, source = resolve_base_value(pricing, BrandInfo(), analyze_message("bespoke coat", ""))
        assert base == 2400
        assert source == PricingSource.BRAND_PRODUCTS

    def test_custom_average_ignored_for_other_projects(self):
        pricing = _pricing(average=900, custom_avg=2400)
        base, _ = resolve_base_value(pricing, BrandInfo(), analyze_message("office suit", ""))
        assert base == 900

    def test_overall_average(self):
        base, source = resolve_base_value(
            _pricing(average=650), BrandInfo(), analyze_message("Looking for a casual blouse", "")
        )
        assert base == 650
        assert source == PricingSource.BRAND_PRODUCTS


class TestCategoryFallback:
    def test_no_pricing_data(self, bridal_brand):
        base, source = resolve_base_value(
            BrandPricingSnapshot.empty(), bridal_brand, analyze_message("wedding dress", "")
        )
        assert base == 4000 * 2.5
        assert source == PricingSource.CATEGORY_AVERAGE

    def test_zero_average_uses_category_table(self, bridal_brand):
        # has_pricing_data without a usable average still falls back
        pricing = _pricing(average=0, categories={"wedding": 5000})
        base, source = resolve_base_value(pricing, bridal_brand, analyze_message("wedding", ""))
        assert base == 10000
        assert source == PricingSource.CATEGORY_AVERAGE

    @pytest.mark.parametrize(
        "category, project_type, expected",
        [
            ("Haute Couture", ProjectType.GENERAL, 8000),
            ("luxury", ProjectType.RED_CARPET, 15000),
            ("Evening Wear", ProjectType.EVENING, 3000 * 1.8),
            ("accessories", ProjectType.CONSULTATION, 800 * 0.3),
            ("Streetwear", ProjectType.ALTERATION, 1200 * 0.4),
            ("Knitwear", ProjectType.CORPORATE, 2000 * 1.4),
            ("", ProjectType.CASUAL, 2000),
            (None, ProjectType.CUSTOM, 4000),
        ],
    )
    def test_category_table(self, category, project_type, expected):
        assert category_base_value(category, project_type) == pytest.approx(expected)
