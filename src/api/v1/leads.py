"""Leads API — intake from contact forms and the brand studio dashboard."""

import uuid
from typing import Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.dependencies import get_estimator
from src.database import get_db
from src.estimation.engine import RevenueEstimator
from src.estimation.providers import fetch_brand
from src.repositories.lead import LeadRepository, lead_to_response
from src.schemas.estimation import LeadAnalysisResult
from src.schemas.lead import EstimateRequest, LeadCreate, LeadCreated

logger = structlog.get_logger()

router = APIRouter(prefix="/api/v1", tags=["leads"])

LEAD_STATUSES = ("new", "contacted", "qualified", "converted", "lost")


class StatusUpdate(BaseModel):
    status: str


@router.post("/estimates", response_model=LeadAnalysisResult)
async def estimate_lead(
    data: EstimateRequest,
    estimator: RevenueEstimator = Depends(get_estimator),
) -> LeadAnalysisResult:
    """Estimate an inquiry's revenue potential without storing a lead."""
    return await estimator.estimate_lead_revenue(
        str(data.brand_id),
        data.message,
        data.inquiry_type,
        data.customer_details,
    )


@router.post("/leads", response_model=LeadCreated)
async def create_lead(
    data: LeadCreate,
    db: AsyncSession = Depends(get_db),
    estimator: RevenueEstimator = Depends(get_estimator),
) -> LeadCreated:
    """Create a lead for an existing brand and attach a revenue estimate.

    Raises 400 if the brand does not exist.
    """
    brand = await fetch_brand(db, str(data.brand_id))
    if brand is None:
        logger.warning("lead_rejected_unknown_brand", brand_id=str(data.brand_id))
        raise HTTPException(
            status_code=400,
            detail=f"Invalid brand ID. Brand '{data.brand_id}' does not exist.",
        )

    analysis = await estimator.estimate_lead_revenue(
        str(data.brand_id),
        data.message,
        data.lead_type,
        data.customer_details(),
    )

    lead = await LeadRepository(db).create(data, analysis)
    return LeadCreated(lead=lead_to_response(lead), analysis=analysis)


@router.get("/leads")
async def list_leads(
    brand_id: uuid.UUID,
    status: Optional[str] = Query(None, description="Filter by status"),
    limit: int = Query(20, ge=1, le=100),
    offset: int = Query(0, ge=0),
    db: AsyncSession = Depends(get_db),
) -> dict:
    """List a brand's leads.

    Returns:
        {"leads": [...], "total": int, "total_estimated_value": int}
    """
    leads, total, total_value = await LeadRepository(db).list_for_brand(
        brand_id, status=status, limit=limit, offset=offset
    )
    return {
        "leads": [lead_to_response(lead).model_dump() for lead in leads],
        "total": total,
        "total_estimated_value": total_value,
    }


@router.patch("/leads/{lead_id}/status")
async def update_lead_status(
    lead_id: uuid.UUID,
    data: StatusUpdate,
    db: AsyncSession = Depends(get_db),
) -> dict:
    if data.status not in LEAD_STATUSES:
        raise HTTPException(status_code=400, detail=f"Unknown status '{data.status}'")

    updated = await LeadRepository(db).update_status(str(lead_id), data.status)
    if updated == 0:
        raise HTTPException(status_code=404, detail="Lead not found")

    logger.info("lead_status_updated", lead_id=str(lead_id), status=data.status)
    return {"id": str(lead_id), "status": data.status}
