from fastapi import APIRouter, Depends

from simconnect.dependencies import get_catalog_store
from simconnect.schemas.estimator import TripEstimate, TripEstimateRequest
from simconnect.services.catalog import CatalogStore
from simconnect.services.estimator import estimate_trip

router = APIRouter()


@router.post("/trip", response_model=TripEstimate)
def estimate(payload: TripEstimateRequest, store: CatalogStore = Depends(get_catalog_store)):
    return estimate_trip(store, payload)
