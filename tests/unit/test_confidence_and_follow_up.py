"""Tests for confidence scoring and follow-up recommendations."""

from src.estimation.analyzer import analyze_message
from src.estimation.confidence import score_confidence
from src.estimation.follow_up import (
    HIGH_VALUE_FOLLOW_UP,
    MISSING_PRICING_FOLLOW_UP,
    SIGNIFICANT_FOLLOW_UP,
    STANDARD_FOLLOW_UP,
    URGENT_FOLLOW_UP,
    recommend_follow_up,
)
from src.schemas.estimation import Multipliers


class TestConfidence:
    def test_base(self, no_pricing):
        assert score_confidence(no_pricing, analyze_message("hi", ""), Multipliers()) == 50

    def test_pricing_data(self, catalogue_pricing):
        assert score_confidence(catalogue_pricing, analyze_message("hi", ""), Multipliers()) == 80

    def test_details_and_budget(self, no_pricing):
        analysis = analyze_message("Silk fabric, budget $900", "")
        assert score_confidence(no_pricing, analysis, Multipliers()) == 85

    def test_clamped_to_max(self, catalogue_pricing):
        analysis = analyze_message("Silk fabric, budget $900", "")
        assert score_confidence(catalogue_pricing, analysis, Multipliers()) == 95

    def test_extreme_multipliers_penalised(self, no_pricing):
        multipliers = Multipliers(quantity=2.6, luxury=1.5)
        assert score_confidence(no_pricing, analyze_message("hi", ""), multipliers) == 35

    def test_exactly_three_not_penalised(self, no_pricing):
        multipliers = Multipliers(quantity=2.0, luxury=1.5)
        assert score_confidence(no_pricing, analyze_message("hi", ""), multipliers) == 50

    def test_corporate_counts_towards_total(self, no_pricing):
        multipliers = Multipliers(quantity=1.8, luxury=1.5, corporate=1.2)
        assert score_confidence(no_pricing, analyze_message("hi", ""), multipliers) == 35


class TestFollowUp:
    def test_high_value(self, no_pricing):
        assert recommend_follow_up(10001, analyze_message("", ""), no_pricing) == HIGH_VALUE_FOLLOW_UP

    def test_significant(self, no_pricing):
        assert recommend_follow_up(10000, analyze_message("urgent", ""), no_pricing) == SIGNIFICANT_FOLLOW_UP

    def test_urgent(self, no_pricing):
        assert recommend_follow_up(5000, analyze_message("urgent", ""), no_pricing) == URGENT_FOLLOW_UP

    def test_missing_pricing(self, no_pricing):
        assert recommend_follow_up(800, analyze_message("hi", ""), no_pricing) == MISSING_PRICING_FOLLOW_UP

    def test_standard(self, catalogue_pricing):
        assert recommend_follow_up(800, analyze_message("hi", ""), catalogue_pricing) == STANDARD_FOLLOW_UP

    def test_strings(self):
        assert HIGH_VALUE_FOLLOW_UP == "High-value lead - Schedule consultation within 24 hours"
        assert STANDARD_FOLLOW_UP == "Standard follow-up - Respond within business hours with consultation offer"
