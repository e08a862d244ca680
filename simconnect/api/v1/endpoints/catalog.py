from fastapi import APIRouter, Depends, HTTPException, Query

from simconnect.dependencies import get_catalog_store
from simconnect.schemas.catalog import Country, DataTier, Operator, PlanListingOut, Review
from simconnect.schemas.contributions import ContributionOut, ReviewCreate
from simconnect.services.catalog import CatalogStore
from simconnect.services.contributions import ContributionError, submit_review
from simconnect.services.listing import (
    LISTING_UNLIMITED_REFERENCE_GB,
    filter_by_data_tier,
    price_per_gb,
    search_countries,
)

router = APIRouter()


@router.get("/countries", response_model=list[Country])
def list_countries(q: str | None = Query(default=None, max_length=100), store: CatalogStore = Depends(get_catalog_store)):
    return search_countries(store.list_countries(), q)


@router.get("/countries/{country_id}", response_model=Country)
def get_country(country_id: str, store: CatalogStore = Depends(get_catalog_store)):
    country = store.get_country(country_id)
    if not country:
        raise HTTPException(status_code=404, detail="Country not found")
    return country


@router.get("/operators", response_model=list[Operator])
def list_operators(country_id: str | None = None, store: CatalogStore = Depends(get_catalog_store)):
    return store.list_operators(country_id)


@router.get("/plans", response_model=list[PlanListingOut])
def list_plans(
    operator_id: str | None = None,
    tier: DataTier = DataTier.ALL,
    store: CatalogStore = Depends(get_catalog_store),
):
    plans = filter_by_data_tier(store.list_plans(operator_id), tier)
    return [
        PlanListingOut(
            **plan.model_dump(),
            data_label=plan.allowance.label(),
            price_per_gb=price_per_gb(plan, LISTING_UNLIMITED_REFERENCE_GB),
        )
        for plan in plans
    ]


@router.get("/plans/{plan_id}/reviews", response_model=list[Review])
def list_reviews(plan_id: str, store: CatalogStore = Depends(get_catalog_store)):
    return store.list_reviews(plan_id)


@router.post("/plans/{plan_id}/reviews", response_model=ContributionOut, status_code=201)
def create_review(plan_id: str, payload: ReviewCreate, store: CatalogStore = Depends(get_catalog_store)):
    if not store.get_plan(plan_id):
        raise HTTPException(status_code=404, detail="Plan not found")
    try:
        return submit_review(store, plan_id, payload)
    except ContributionError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message)
