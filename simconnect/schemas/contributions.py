from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from simconnect.schemas.catalog import Operator, Plan, Review, SimType, UNLIMITED_DATA_GB
from simconnect.schemas.user import UserProfile


class ReviewCreate(BaseModel):
    rating: int = Field(default=5, ge=1, le=5)
    comment: str = ""


class OperatorSubmission(BaseModel):
    country_id: str
    name: str = ""
    technologies: list[str] = Field(default_factory=lambda: ["4G"])
    website: str = ""
    coverage: str = "Unknown"


class PlanSubmission(BaseModel):
    country_id: str
    operator_id: Optional[str] = None
    # Set to create the operator together with the plan.
    new_operator_name: Optional[str] = None
    name: str = ""
    price: Decimal = Field(default=Decimal("0"), ge=0)
    currency: str = "USD"
    data_gb: int = Field(default=1, ge=UNLIMITED_DATA_GB)
    validity_days: int = Field(default=30, ge=1)
    sim_type: SimType = SimType.PHYSICAL
    speed_5g: bool = False
    features: list[str] = Field(default_factory=list)


class ContributionOut(BaseModel):
    operator: Optional[Operator] = None
    plan: Optional[Plan] = None
    review: Optional[Review] = None
    profile: UserProfile
