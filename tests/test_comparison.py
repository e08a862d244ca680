import csv
import io
from decimal import Decimal

from simconnect.schemas.catalog import Plan
from simconnect.services.comparison import CSV_HEADERS, chart_points, comparison_rows, export_csv, unlimited_chart_value


def _plan(plan_id, data_gb, price, **overrides):
    fields = {
        "id": plan_id,
        "operator_id": "es_movistar",
        "name": plan_id,
        "data_gb": data_gb,
        "price": Decimal(price),
        "currency": "EUR",
        "validity_days": 30,
        "sim_type": "Physical",
    }
    fields.update(overrides)
    return Plan(**fields)


def test_comparison_rows_describe_each_plan():
    rows = comparison_rows([_plan("a", 20, "15"), _plan("u", -1, "40", sim_type="eSIM", speed_5g=True)])
    assert rows[0].data_label == "20 GB"
    assert rows[0].price_per_gb == Decimal("0.75")
    assert rows[1].data_label == "Unlimited"
    assert rows[1].price_per_gb is None
    assert rows[1].sim_type == "eSIM"
    assert rows[1].speed_5g is True


def test_unlimited_plotted_past_largest_finite_plan():
    plans = [_plan("a", 20, "15"), _plan("u", -1, "40")]
    assert unlimited_chart_value(plans) == 24
    points = chart_points(plans)
    assert [p.x for p in points] == [20, 24]
    assert points[1].y == Decimal("40")


def test_unlimited_chart_value_has_a_floor():
    assert unlimited_chart_value([_plan("u", -1, "40")]) == 12
    assert unlimited_chart_value([_plan("a", 2, "5"), _plan("u", -1, "40")]) == 12


def test_export_csv():
    csv_text = export_csv([_plan("Holiday, Europe", 30, "39.99"), _plan("Unl", -1, "40", sim_type="Hybrid", speed_5g=True)])
    lines = csv_text.strip().split("\n")
    assert lines[0] == ",".join(CSV_HEADERS)
    assert lines[1] == '"Holiday, Europe",es_movistar,39.99,EUR,30,30,Physical,No'
    assert lines[2] == '"Unl",es_movistar,40,EUR,Unlimited,30,Hybrid,Yes'


def test_export_csv_escapes_quotes_in_plan_name():
    csv_text = export_csv([_plan('Say "Hola" 5GB', 5, "9")])
    row = csv_text.strip().split("\n")[1]
    assert row == '"Say ""Hola"" 5GB",es_movistar,9,EUR,5,30,Physical,No'
    assert next(csv.reader(io.StringIO(row)))[0] == 'Say "Hola" 5GB'


def test_export_csv_with_no_plans_has_only_header():
    assert export_csv([]) == ",".join(CSV_HEADERS) + "\n"
