"""Brand model — one designer label on the marketplace (the tenant)."""

from typing import Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, TimestampMixin, UUIDMixin


class Brand(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "brands"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Directory metadata
    category: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)  # e.g. "Bridal", "Luxury"
    price_range: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)  # display only, e.g. "$500 - $5,000"
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)

    contact_email: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True)

    # Relationships
    products = relationship("Product", back_populates="brand", lazy="selectin")
    leads = relationship("Lead", back_populates="brand")
