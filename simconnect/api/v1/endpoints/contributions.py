from fastapi import APIRouter, Depends, HTTPException

from simconnect.dependencies import get_catalog_store
from simconnect.schemas.contributions import ContributionOut, OperatorSubmission, PlanSubmission
from simconnect.services.catalog import CatalogStore
from simconnect.services.contributions import ContributionError, submit_operator, submit_plan

router = APIRouter()


@router.post("/plans", response_model=ContributionOut, status_code=201)
def contribute_plan(payload: PlanSubmission, store: CatalogStore = Depends(get_catalog_store)):
    try:
        return submit_plan(store, payload)
    except ContributionError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message)


@router.post("/operators", response_model=ContributionOut, status_code=201)
def contribute_operator(payload: OperatorSubmission, store: CatalogStore = Depends(get_catalog_store)):
    try:
        return submit_operator(store, payload)
    except ContributionError as exc:
        raise HTTPException(status_code=exc.status_code, detail=exc.message)
