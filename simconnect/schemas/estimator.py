from typing import Optional

from pydantic import BaseModel, Field

from simconnect.schemas.catalog import Plan


MAX_TRIP_DAYS = 90
MAX_DAILY_HOURS = 24


class TripEstimateRequest(BaseModel):
    country_id: str
    duration_days: int = Field(default=7, ge=1, le=MAX_TRIP_DAYS)
    video_hours: float = Field(default=1, ge=0, le=MAX_DAILY_HOURS, allow_inf_nan=False)
    maps_hours: float = Field(default=1, ge=0, le=MAX_DAILY_HOURS, allow_inf_nan=False)
    social_hours: float = Field(default=2, ge=0, le=MAX_DAILY_HOURS, allow_inf_nan=False)
    browsing_hours: float = Field(default=2, ge=0, le=MAX_DAILY_HOURS, allow_inf_nan=False)


class TripEstimate(BaseModel):
    country_id: str
    duration_days: int
    daily_gb: float
    total_gb_needed: int
    recommended_plan: Optional[Plan] = None
    suitable_plans: list[Plan] = Field(default_factory=list)
