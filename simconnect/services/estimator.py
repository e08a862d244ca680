import logging
import math
from typing import Protocol

from simconnect.schemas.catalog import Operator, Plan
from simconnect.schemas.estimator import TripEstimate, TripEstimateRequest
from simconnect.services.listing import sort_by_price


logger = logging.getLogger(__name__)

# Average consumption per hour of use, in GB.
VIDEO_GB_PER_HOUR = 1.0
MAPS_GB_PER_HOUR = 0.06
SOCIAL_GB_PER_HOUR = 0.15
BROWSING_GB_PER_HOUR = 0.05


class PlanSource(Protocol):
    def list_operators(self, country_id: str | None = None) -> list[Operator]: ...

    def list_plans(self, operator_id: str | None = None) -> list[Plan]: ...


def daily_usage_gb(*, video_hours: float, maps_hours: float, social_hours: float, browsing_hours: float) -> float:
    # Summation order is fixed so results match the published calculator exactly.
    return (
        (maps_hours * MAPS_GB_PER_HOUR)
        + (video_hours * VIDEO_GB_PER_HOUR)
        + (social_hours * SOCIAL_GB_PER_HOUR)
        + (browsing_hours * BROWSING_GB_PER_HOUR)
    )


def total_gb_needed(daily_gb: float, duration_days: int) -> int:
    return math.ceil(daily_gb * duration_days)


def suitable_plans(plans: list[Plan], *, duration_days: int, needed_gb: int) -> list[Plan]:
    valid = [plan for plan in plans if plan.validity_days >= duration_days]
    return sort_by_price([plan for plan in valid if plan.allowance.covers(needed_gb)])


def destination_plans(store: PlanSource, country_id: str) -> list[Plan]:
    plans: list[Plan] = []
    for operator in store.list_operators(country_id):
        plans.extend(store.list_plans(operator.id))
    return plans


def estimate_trip(store: PlanSource, request: TripEstimateRequest) -> TripEstimate:
    daily_gb = daily_usage_gb(
        video_hours=request.video_hours,
        maps_hours=request.maps_hours,
        social_hours=request.social_hours,
        browsing_hours=request.browsing_hours,
    )
    needed = total_gb_needed(daily_gb, request.duration_days)

    candidates = destination_plans(store, request.country_id) if request.country_id else []
    matches = suitable_plans(candidates, duration_days=request.duration_days, needed_gb=needed)
    logger.info(
        "Trip estimate country=%s days=%s needed=%sGB candidates=%s suitable=%s",
        request.country_id,
        request.duration_days,
        needed,
        len(candidates),
        len(matches),
    )
    return TripEstimate(
        country_id=request.country_id,
        duration_days=request.duration_days,
        daily_gb=round(daily_gb, 2),
        total_gb_needed=needed,
        recommended_plan=matches[0] if matches else None,
        suitable_plans=matches,
    )
