"""Heuristic lead revenue estimation."""

from src.estimation.engine import RevenueEstimator, build_estimator, estimate_lead_revenue

__all__ = ["RevenueEstimator", "build_estimator", "estimate_lead_revenue"]
