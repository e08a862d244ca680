from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


class CompareRequest(BaseModel):
    plan_ids: list[str] = Field(min_length=1)


class ComparisonRow(BaseModel):
    plan_id: str
    name: str
    operator_id: str
    price: Decimal
    currency: str
    data_label: str
    validity_days: int
    price_per_gb: Optional[Decimal] = None
    sim_type: str
    speed_5g: bool
    features: list[str]


class ChartPoint(BaseModel):
    plan_id: str
    name: str
    x: int
    y: Decimal
    currency: str
    data_label: str


class ComparisonOut(BaseModel):
    rows: list[ComparisonRow]
    chart: list[ChartPoint]
    missing_plan_ids: list[str] = Field(default_factory=list)
