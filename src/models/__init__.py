"""SQLAlchemy ORM models."""

from src.models.base import Base
from src.models.brand import Brand
from src.models.product import Product
from src.models.lead import Lead

__all__ = [
    "Base",
    "Brand",
    "Product",
    "Lead",
]
