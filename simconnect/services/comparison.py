import csv
import io
import math

from simconnect.schemas.catalog import Plan
from simconnect.schemas.compare import ChartPoint, ComparisonRow
from simconnect.services.listing import price_per_gb


CSV_HEADERS = ["Plan Name", "Operator ID", "Price", "Currency", "Data (GB)", "Validity (Days)", "Type", "5G"]
CSV_FILENAME = "global_sim_comparison.csv"
MIN_CHART_AXIS_GB = 10


def comparison_rows(plans: list[Plan]) -> list[ComparisonRow]:
    return [
        ComparisonRow(
            plan_id=plan.id,
            name=plan.name,
            operator_id=plan.operator_id,
            price=plan.price,
            currency=plan.currency,
            data_label=plan.allowance.label(),
            validity_days=plan.validity_days,
            price_per_gb=price_per_gb(plan),
            sim_type=plan.sim_type.value,
            speed_5g=plan.speed_5g,
            features=list(plan.features),
        )
        for plan in plans
    ]


def unlimited_chart_value(plans: list[Plan]) -> int:
    finite = [plan.allowance.gb for plan in plans if not plan.allowance.is_unlimited]
    return math.ceil(max(finite + [MIN_CHART_AXIS_GB]) * 1.2)


def chart_points(plans: list[Plan]) -> list[ChartPoint]:
    unlimited_x = unlimited_chart_value(plans)
    return [
        ChartPoint(
            plan_id=plan.id,
            name=plan.name,
            x=unlimited_x if plan.allowance.is_unlimited else plan.allowance.gb,
            y=plan.price,
            currency=plan.currency,
            data_label=plan.allowance.label(),
        )
        for plan in plans
    ]


def _quoted(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def export_csv(plans: list[Plan]) -> str:
    """CSV of the compared plans. The plan name is always quoted, other fields only when needed."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    for plan in plans:
        allowance = plan.allowance
        buffer.write(_quoted(plan.name) + ",")
        writer.writerow(
            [
                plan.operator_id,
                plan.price,
                plan.currency,
                "Unlimited" if allowance.is_unlimited else allowance.gb,
                plan.validity_days,
                plan.sim_type.value,
                "Yes" if plan.speed_5g else "No",
            ]
        )
    return buffer.getvalue()
