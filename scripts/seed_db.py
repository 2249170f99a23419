"""Seed database with demo brands and catalogue products."""

import asyncio
from decimal import Decimal

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker

from src.config import settings
from src.models.base import Base
from src.models.brand import Brand
from src.models.product import Product


BRANDS = [
    {"name": "Adire Atelier", "category": "Bridal", "price_range": "$1,500 - $12,000", "location": "Lagos"},
    {"name": "Kente & Co", "category": "Evening Wear", "price_range": "$400 - $3,500", "location": "Accra"},
    {"name": "Nairobi Street", "category": "Streetwear", "price_range": "$60 - $450", "location": "Nairobi"},
    # No products: estimates fall back to the category table
    {"name": "Maison Dakar", "category": "Haute Couture", "price_range": "On request", "location": "Dakar"},
]

PRODUCTS = {
    "Adire Atelier": [
        {"title": "Hand-beaded bridal gown", "price": "6500", "category": "wedding", "is_custom": True},
        {"title": "Reception jumpsuit", "price": "1800", "sale_price": "1500", "category": "wedding"},
        {"title": "Bespoke agbada", "price": "3200", "category": "custom", "is_custom": True},
        {"title": "Lookbook 2024", "price": "0", "category": "wedding", "service_type": "portfolio"},
    ],
    "Kente & Co": [
        {"title": "Kente gala gown", "price": "2400", "category": "evening"},
        {"title": "Cocktail wrap dress", "price": "650", "category": "evening"},
        {"title": "Tailored blazer", "price": "900", "category": "corporate"},
    ],
    "Nairobi Street": [
        {"title": "Printed hoodie", "price": "120", "category": "casual"},
        {"title": "Cargo trousers", "price": "95", "category": "casual"},
    ],
}


async def seed():
    """Seed the database with demo data."""
    engine = create_async_engine(settings.database_url)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession)

    async with session_factory() as session:
        for brand_data in BRANDS:
            brand = Brand(**brand_data)
            session.add(brand)
            await session.flush()
            print(f"  + Brand: {brand.name} ({brand.id})")

            for product_data in PRODUCTS.get(brand.name, []):
                product_data = dict(product_data)
                product = Product(
                    brand_id=brand.id,
                    title=product_data.pop("title"),
                    price=Decimal(product_data.pop("price")),
                    sale_price=Decimal(product_data.pop("sale_price")) if "sale_price" in product_data else None,
                    **product_data,
                )
                session.add(product)
                print(f"      + Product: {product.title}")

        await session.commit()

    await engine.dispose()
    print("\nSeed completed!")


if __name__ == "__main__":
    asyncio.run(seed())
