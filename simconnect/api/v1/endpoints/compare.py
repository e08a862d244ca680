from fastapi import APIRouter, Depends
from fastapi.responses import Response

from simconnect.dependencies import get_catalog_store
from simconnect.schemas.catalog import Plan
from simconnect.schemas.compare import CompareRequest, ComparisonOut
from simconnect.services.catalog import CatalogStore
from simconnect.services.comparison import CSV_FILENAME, chart_points, comparison_rows, export_csv

router = APIRouter()


def _selected_plans(store: CatalogStore, plan_ids: list[str]) -> tuple[list[Plan], list[str]]:
    by_id = {plan.id: plan for plan in store.list_plans()}
    requested = list(dict.fromkeys(plan_ids))
    found = [by_id[plan_id] for plan_id in requested if plan_id in by_id]
    missing = [plan_id for plan_id in requested if plan_id not in by_id]
    return found, missing


@router.post("", response_model=ComparisonOut)
def compare_plans(payload: CompareRequest, store: CatalogStore = Depends(get_catalog_store)):
    plans, missing = _selected_plans(store, payload.plan_ids)
    return ComparisonOut(
        rows=comparison_rows(plans),
        chart=chart_points(plans),
        missing_plan_ids=missing,
    )


@router.post("/export")
def export_comparison(payload: CompareRequest, store: CatalogStore = Depends(get_catalog_store)):
    plans, _ = _selected_plans(store, payload.plan_ids)
    return Response(
        content=export_csv(plans),
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{CSV_FILENAME}"'},
    )
