import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field


UNLIMITED_DATA_GB = -1


@dataclass(frozen=True)
class DataAllowance:
    """Data volume of a plan: a finite number of GB, or unlimited.

    Stored plans keep the interchange encoding (``data_gb == -1`` for
    unlimited); everything that compares volumes goes through this type.
    """

    gb: Optional[int]

    @classmethod
    def finite(cls, gb: int) -> "DataAllowance":
        if gb < 0:
            raise ValueError("finite data allowance must be non-negative")
        return cls(gb=gb)

    @classmethod
    def unlimited(cls) -> "DataAllowance":
        return cls(gb=None)

    @classmethod
    def from_data_gb(cls, data_gb: int) -> "DataAllowance":
        if data_gb == UNLIMITED_DATA_GB:
            return cls.unlimited()
        return cls.finite(data_gb)

    @property
    def is_unlimited(self) -> bool:
        return self.gb is None

    def covers(self, needed_gb: float) -> bool:
        if self.is_unlimited:
            return True
        return self.gb >= needed_gb

    def to_data_gb(self) -> int:
        return UNLIMITED_DATA_GB if self.is_unlimited else self.gb

    def label(self) -> str:
        return "Unlimited" if self.is_unlimited else f"{self.gb} GB"


class SimType(str, enum.Enum):
    PHYSICAL = "Physical"
    ESIM = "eSIM"
    HYBRID = "Hybrid"


class DataTier(str, enum.Enum):
    ALL = "all"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    ULTRA = "ultra"


class Country(BaseModel):
    id: str
    name_en: str
    name_es: str
    continent: str
    currency: str
    flag: str


class Operator(BaseModel):
    id: str
    name: str
    country_id: str
    technologies: list[str] = Field(default_factory=list)
    website: str = ""
    coverage: str = ""


class Plan(BaseModel):
    id: str
    operator_id: str
    name: str
    data_gb: int = Field(ge=UNLIMITED_DATA_GB, description="GB included; -1 means unlimited")
    price: Decimal = Field(ge=0)
    currency: str
    validity_days: int = Field(ge=1)
    sim_type: SimType
    speed_5g: bool = False
    features: list[str] = Field(default_factory=list)

    @property
    def allowance(self) -> DataAllowance:
        return DataAllowance.from_data_gb(self.data_gb)


class Review(BaseModel):
    id: str
    plan_id: str
    author: str
    rating: int = Field(ge=1, le=5)
    comment: str
    date: str


class PlanListingOut(Plan):
    data_label: str
    price_per_gb: Optional[Decimal] = None
