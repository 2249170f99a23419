"""Lead schemas for the intake and listing API."""

import uuid
from typing import Optional

from pydantic import BaseModel, Field

from src.schemas.estimation import CustomerDetails, LeadAnalysisResult


class EstimateRequest(BaseModel):
    """Estimate a lead without storing it."""

    brand_id: uuid.UUID
    message: str = ""
    inquiry_type: str = "general"
    customer_details: Optional[CustomerDetails] = None


class LeadCreate(BaseModel):
    """Inquiry submitted through a brand's contact form."""

    brand_id: uuid.UUID
    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    phone: Optional[str] = None
    source: str = Field(min_length=1)  # contact_form | whatsapp | instagram | ...
    lead_type: str = Field(min_length=1)
    message: str = ""
    notes: Optional[str] = None
    priority: str = "normal"
    company_name: Optional[str] = None
    location: Optional[str] = None
    referral_source: Optional[str] = None

    def customer_details(self) -> CustomerDetails:
        return CustomerDetails(
            company_name=self.company_name,
            location=self.location,
            referral_source=self.referral_source,
        )


class LeadResponse(BaseModel):
    id: str
    brand_id: str
    customer_name: str
    contact_email: str
    source: str
    lead_type: str
    priority: str
    status: str
    estimated_value: Optional[int] = None
    confidence_score: Optional[int] = None
    pricing_source: Optional[str] = None
    recommended_follow_up: Optional[str] = None
    created_at: Optional[str] = None


class LeadCreated(BaseModel):
    success: bool = True
    lead: LeadResponse
    analysis: LeadAnalysisResult
