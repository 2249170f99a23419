"""Brand catalogue API — public products with pricing statistics."""

import uuid

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from src.database import get_db
from src.estimation.providers import calculate_pricing_stats, effective_price, fetch_brand, fetch_public_products

router = APIRouter(prefix="/api/v1/brands", tags=["brands"])


@router.get("/{brand_id}/products")
async def brand_products(
    brand_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
) -> dict:
    """In-stock products of a brand plus the pricing stats the estimator uses."""
    brand = await fetch_brand(db, str(brand_id))
    if brand is None:
        raise HTTPException(status_code=404, detail="Brand not found")

    products = await fetch_public_products(db, str(brand_id))

    return {
        "products": [
            {
                "id": str(p.id),
                "title": p.title,
                "description": p.description,
                "price": float(p.price) if p.price is not None else None,
                "sale_price": float(p.sale_price) if p.sale_price is not None else None,
                "effective_price": effective_price(p),
                "category": p.category,
                "in_stock": p.in_stock,
                "is_custom": p.is_custom,
                "lead_time": p.lead_time,
                "created_at": p.created_at.isoformat() if p.created_at else None,
            }
            for p in products
        ],
        "pricing_stats": calculate_pricing_stats(products).model_dump(),
    }
