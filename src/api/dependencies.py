"""Shared FastAPI dependencies."""

from src.estimation.engine import RevenueEstimator, build_estimator


def get_estimator() -> RevenueEstimator:
    """Estimator backed by the database providers."""
    return build_estimator()
