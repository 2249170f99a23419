"""Lead model — a customer inquiry directed at a brand."""

import uuid
from typing import Optional

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.models.base import Base, UUIDMixin, TimestampMixin


class Lead(Base, UUIDMixin, TimestampMixin):
    __tablename__ = "leads"

    brand_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("brands.id"), nullable=False
    )

    # Customer info
    customer_name: Mapped[str] = mapped_column(String(200), nullable=False)
    contact_email: Mapped[str] = mapped_column(String(255), nullable=False)
    contact_phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    company_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    location: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    referral_source: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)

    # Inquiry
    source: Mapped[str] = mapped_column(String(50), nullable=False)  # contact_form | whatsapp | instagram | ...
    lead_type: Mapped[str] = mapped_column(String(50), nullable=False)  # inquiry type
    message: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    priority: Mapped[str] = mapped_column(String(20), default="normal")  # low|normal|high|urgent

    # Estimate
    estimated_value: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    confidence_score: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    pricing_source: Mapped[Optional[str]] = mapped_column(String(30), nullable=True)
    recommended_follow_up: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    # Processing status
    status: Mapped[str] = mapped_column(String(30), default="new")  # new|contacted|qualified|converted|lost

    # Relationships
    brand = relationship("Brand", back_populates="leads")
