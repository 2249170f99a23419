"""Value objects for lead revenue estimation."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field


class ProjectType(str, Enum):
    """Kind of work an inquiry asks for. GENERAL when nothing matched."""

    WEDDING = "wedding"
    EVENING = "evening"
    RED_CARPET = "red_carpet"
    CORPORATE = "corporate"
    CASUAL = "casual"
    CUSTOM = "custom"
    ALTERATION = "alteration"
    CONSULTATION = "consultation"
    GENERAL = "general"


class UrgencyLevel(str, Enum):
    URGENT = "urgent"
    HIGH = "high"
    NORMAL = "normal"
    LOW = "low"


class PricingSource(str, Enum):
    """Where the base value of an estimate came from."""

    BRAND_PRODUCTS = "brand_products"
    CATEGORY_AVERAGE = "category_average"
    INDUSTRY_FALLBACK = "industry_fallback"


# --- Provider inputs ---


class PriceRange(BaseModel):
    min: float = Field(0, ge=0)
    max: float = Field(0, ge=0)
    average: float = Field(0, ge=0)


class CustomVsReady(BaseModel):
    custom_avg: float = Field(0, ge=0)
    ready_avg: float = Field(0, ge=0)


class BrandPricingSnapshot(BaseModel):
    """Aggregate pricing of a brand's current catalogue."""

    model_config = {"frozen": True}

    total_products: int = Field(0, ge=0)
    price_range: PriceRange = PriceRange()
    category_averages: dict[str, float] = {}
    custom_vs_ready: CustomVsReady = CustomVsReady()
    has_pricing_data: bool = False

    @classmethod
    def empty(cls, total_products: int = 0) -> "BrandPricingSnapshot":
        return cls(total_products=total_products)


class BrandInfo(BaseModel):
    model_config = {"frozen": True}

    name: str = ""
    category: str = ""
    price_range: str = ""
    location: str = ""

    @classmethod
    def empty(cls) -> "BrandInfo":
        return cls()


class CustomerDetails(BaseModel):
    company_name: Optional[str] = None
    location: Optional[str] = None
    referral_source: Optional[str] = None


# --- Derived ---


class MessageAnalysis(BaseModel):
    """Signals extracted from the raw inquiry text."""

    model_config = {"frozen": True}

    project_type: ProjectType = ProjectType.GENERAL
    quantity: int = Field(1, ge=1)
    mentioned_budget: int = Field(0, ge=0)
    urgency_level: UrgencyLevel = UrgencyLevel.NORMAL
    message_length: int = 0
    has_specific_details: bool = False


class Multipliers(BaseModel):
    model_config = {"frozen": True}

    project: float = 1.0
    quantity: float = 1.0
    urgency: float = 1.0
    luxury: float = 1.0
    corporate: float = 1.0

    @property
    def total(self) -> float:
        """Product of all five multipliers."""
        return self.project * self.quantity * self.urgency * self.luxury * self.corporate


# --- Output ---


class EstimateBreakdown(BaseModel):
    """Displayed breakdown. The corporate multiplier is applied but not shown."""

    model_config = {"frozen": True}

    base_value: int
    project_multiplier: float
    quantity_multiplier: float
    urgency_multiplier: float
    luxury_multiplier: float
    final_value: int


class LeadAnalysisResult(BaseModel):
    model_config = {"frozen": True}

    estimated_value: int = Field(ge=0)
    confidence_score: int = Field(ge=20, le=95)
    pricing_source: PricingSource
    breakdown: EstimateBreakdown
    recommended_follow_up: str
