"""Brand data providers consumed by the revenue estimator.

The estimator only depends on the two protocols below. The SQL-backed
implementations read the brands and products tables; tests swap in
in-memory fakes.
"""

from __future__ import annotations

import uuid
from collections import defaultdict
from typing import Iterable, Optional, Protocol

import structlog
from sqlalchemy import and_, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from src.models.brand import Brand
from src.models.product import Product
from src.schemas.estimation import BrandInfo, BrandPricingSnapshot, CustomVsReady, PriceRange

logger = structlog.get_logger()


class BrandNotFoundError(LookupError):
    """No brand row for the requested id."""


class BrandPricingProvider(Protocol):
    async def get_pricing(self, brand_id: str) -> BrandPricingSnapshot: ...


class BrandInfoProvider(Protocol):
    async def get_brand_info(self, brand_id: str) -> BrandInfo: ...


# ---------------------------------------------------------------------------
# Pricing statistics
# ---------------------------------------------------------------------------


def effective_price(product) -> float:
    """Sale price when set, otherwise list price. 0 when neither is usable."""
    price = product.sale_price or product.price
    if price is None:
        return 0.0
    return float(price)


def _average(values: list[float]) -> float:
    return sum(values) / len(values) if values else 0.0


def calculate_pricing_stats(products: Iterable) -> BrandPricingSnapshot:
    """Aggregate a brand's products into a pricing snapshot.

    Products without a positive effective price are counted in
    total_products but ignored by every statistic.
    """
    products = list(products)
    if not products:
        return BrandPricingSnapshot.empty()

    priced = [(p, effective_price(p)) for p in products]
    priced = [(p, price) for p, price in priced if price > 0]
    if not priced:
        return BrandPricingSnapshot.empty(total_products=len(products))

    prices = sorted(price for _, price in priced)

    by_category: dict[str, list[float]] = defaultdict(list)
    for product, price in priced:
        # uncategorised products only feed the overall price range
        if product.category:
            by_category[product.category].append(price)

    custom_prices = [price for p, price in priced if p.is_custom]
    ready_prices = [price for p, price in priced if not p.is_custom]

    return BrandPricingSnapshot(
        total_products=len(products),
        price_range=PriceRange(min=prices[0], max=prices[-1], average=_average(prices)),
        category_averages={category: _average(values) for category, values in by_category.items()},
        custom_vs_ready=CustomVsReady(
            custom_avg=_average(custom_prices),
            ready_avg=_average(ready_prices),
        ),
        has_pricing_data=True,
    )


# ---------------------------------------------------------------------------
# SQL-backed providers
# ---------------------------------------------------------------------------


async def fetch_public_products(db: AsyncSession, brand_id: str) -> list[Product]:
    """In-stock catalogue products of a brand, newest first. Portfolio items excluded."""
    stmt = (
        select(Product)
        .where(
            and_(
                Product.brand_id == uuid.UUID(str(brand_id)),
                Product.in_stock == True,  # noqa: E712
                Product.service_type != "portfolio",
            )
        )
        .order_by(Product.created_at.desc())
    )
    result = await db.execute(stmt)
    return list(result.scalars().all())


async def fetch_brand(db: AsyncSession, brand_id: str) -> Optional[Brand]:
    result = await db.execute(select(Brand).where(Brand.id == uuid.UUID(str(brand_id))))
    return result.scalar_one_or_none()


class SqlBrandPricingProvider:
    """Pricing snapshot computed from the products table.

    Opens its own session per call so it can run alongside other reads.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_pricing(self, brand_id: str) -> BrandPricingSnapshot:
        async with self.session_factory() as db:
            products = await fetch_public_products(db, brand_id)

        snapshot = calculate_pricing_stats(products)
        logger.debug(
            "brand_pricing_loaded",
            brand_id=brand_id,
            products=snapshot.total_products,
            has_pricing_data=snapshot.has_pricing_data,
        )
        return snapshot


class SqlBrandInfoProvider:
    """Brand directory metadata from the brands table."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self.session_factory = session_factory

    async def get_brand_info(self, brand_id: str) -> BrandInfo:
        async with self.session_factory() as db:
            brand = await fetch_brand(db, brand_id)

        if brand is None:
            raise BrandNotFoundError(brand_id)

        return BrandInfo(
            name=brand.name or "",
            category=brand.category or "",
            price_range=brand.price_range or "",
            location=brand.location or "",
        )
