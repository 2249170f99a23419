"""Lead repository — creates and lists leads."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

import structlog
from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.lead import Lead
from src.schemas.estimation import LeadAnalysisResult
from src.schemas.lead import LeadCreate, LeadResponse

logger = structlog.get_logger()


def lead_to_response(lead: Lead) -> LeadResponse:
    return LeadResponse(
        id=str(lead.id),
        brand_id=str(lead.brand_id),
        customer_name=lead.customer_name,
        contact_email=lead.contact_email,
        source=lead.source,
        lead_type=lead.lead_type,
        priority=lead.priority,
        status=lead.status,
        estimated_value=lead.estimated_value,
        confidence_score=lead.confidence_score,
        pricing_source=lead.pricing_source,
        recommended_follow_up=lead.recommended_follow_up,
        created_at=lead.created_at.isoformat() if lead.created_at else None,
    )


class LeadRepository:
    """Manages lead creation, listing and status updates."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, data: LeadCreate, analysis: LeadAnalysisResult) -> Lead:
        """Store a new lead together with its revenue estimate.

        Args:
            data: Validated inquiry from the contact form
            analysis: Estimator output for the inquiry

        Returns:
            Created Lead object
        """
        lead = Lead(
            brand_id=data.brand_id,
            customer_name=data.name,
            contact_email=data.email,
            contact_phone=data.phone,
            company_name=data.company_name,
            location=data.location,
            referral_source=data.referral_source,
            source=data.source,
            lead_type=data.lead_type,
            message=data.message,
            notes=data.notes,
            priority=data.priority,
            estimated_value=analysis.estimated_value,
            confidence_score=analysis.confidence_score,
            pricing_source=analysis.pricing_source.value,
            recommended_follow_up=analysis.recommended_follow_up,
            status="new",
        )

        self.db.add(lead)
        await self.db.flush()

        logger.info(
            "lead_created",
            lead_id=str(lead.id),
            brand_id=str(data.brand_id),
            source=data.source,
            estimated_value=analysis.estimated_value,
            pricing_source=analysis.pricing_source.value,
        )

        return lead

    async def list_for_brand(
        self,
        brand_id: uuid.UUID,
        status: Optional[str] = None,
        limit: int = 20,
        offset: int = 0,
    ) -> tuple[list[Lead], int, int]:
        """Page of a brand's leads, newest first.

        Returns:
            (leads, total count, total estimated value over all matching leads)
        """
        conditions = [Lead.brand_id == brand_id]
        if status:
            conditions.append(Lead.status == status)

        totals_stmt = select(
            func.count(Lead.id),
            func.coalesce(func.sum(Lead.estimated_value), 0),
        ).where(*conditions)
        total, total_value = (await self.db.execute(totals_stmt)).one()

        stmt = (
            select(Lead)
            .where(*conditions)
            .order_by(Lead.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all()), int(total), int(total_value)

    async def update_status(self, lead_id: str, status: str) -> int:
        """Set a lead's status. Returns the number of rows updated (0 if no such lead)."""
        stmt = (
            update(Lead)
            .where(Lead.id == uuid.UUID(lead_id))
            .values(status=status, updated_at=datetime.now(timezone.utc))
        )
        result = await self.db.execute(stmt)
        return result.rowcount
