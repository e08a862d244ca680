import logging
import secrets
from datetime import date

from simconnect.schemas.catalog import Operator, Plan, Review
from simconnect.schemas.contributions import ContributionOut, OperatorSubmission, PlanSubmission, ReviewCreate
from simconnect.services.catalog import CatalogStore


logger = logging.getLogger(__name__)

DEFAULT_TECHNOLOGIES = ["4G"]
DEFAULT_COVERAGE = "Unknown"


class ContributionError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def _require_country(store: CatalogStore, country_id: str) -> None:
    if store.get_country(country_id) is None:
        raise ContributionError("Country not found", status_code=404)


def _require_operator(store: CatalogStore, operator_id: str) -> None:
    if not any(op.id == operator_id for op in store.list_operators()):
        raise ContributionError("Operator not found", status_code=404)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{secrets.token_hex(6)}"


def _clean(value: str | None) -> str:
    return str(value or "").strip()


def submit_review(store: CatalogStore, plan_id: str, payload: ReviewCreate) -> ContributionOut:
    comment = _clean(payload.comment)
    if not comment:
        raise ContributionError("Please write a comment before submitting your review.")

    review = Review(
        id=_new_id("rev"),
        plan_id=plan_id,
        author=store.get_user().name,
        rating=payload.rating,
        comment=comment,
        date=date.today().isoformat(),
    )
    profile = store.add_review(review)
    logger.info("Review %s added for plan %s", review.id, plan_id)
    return ContributionOut(review=review, profile=profile)


def _build_operator(country_id: str, name: str, *, technologies=None, website: str = "", coverage: str = "") -> Operator:
    return Operator(
        id=_new_id("op"),
        name=name,
        country_id=country_id,
        technologies=list(technologies or DEFAULT_TECHNOLOGIES),
        website=website,
        coverage=coverage or DEFAULT_COVERAGE,
    )


def submit_operator(store: CatalogStore, payload: OperatorSubmission) -> ContributionOut:
    name = _clean(payload.name)
    if not name:
        raise ContributionError("Please enter the New Operator Name.")
    if not _clean(payload.country_id):
        raise ContributionError("Please select a Country.")
    _require_country(store, payload.country_id)

    operator = _build_operator(
        payload.country_id,
        name,
        technologies=payload.technologies,
        website=_clean(payload.website),
        coverage=_clean(payload.coverage),
    )
    profile = store.add_operator(operator)
    logger.info("Operator %s (%s) contributed for %s", operator.id, operator.name, operator.country_id)
    return ContributionOut(operator=operator, profile=profile)


def submit_plan(store: CatalogStore, payload: PlanSubmission) -> ContributionOut:
    """Validate a plan submission, then store it (creating its operator first if asked).

    Every check runs before the first write, so a rejected submission leaves
    the store untouched.
    """
    plan_name = _clean(payload.name)
    if not plan_name:
        raise ContributionError("Please enter a Plan Name.")

    creating_operator = payload.new_operator_name is not None
    new_operator_name = _clean(payload.new_operator_name)
    operator_id = _clean(payload.operator_id)
    if creating_operator:
        if not new_operator_name:
            raise ContributionError("Please enter the New Operator Name.")
        if not _clean(payload.country_id):
            raise ContributionError("Please select a Country.")
        _require_country(store, payload.country_id)
    elif not operator_id:
        raise ContributionError("Please select an Operator.")
    else:
        _require_operator(store, operator_id)

    operator = None
    if creating_operator:
        operator = _build_operator(payload.country_id, new_operator_name)
        store.add_operator(operator)
        operator_id = operator.id
        logger.info("Operator %s (%s) created with plan submission", operator.id, operator.name)

    plan = Plan(
        id=_new_id("plan"),
        operator_id=operator_id,
        name=plan_name,
        data_gb=payload.data_gb,
        price=payload.price,
        currency=_clean(payload.currency) or "USD",
        validity_days=payload.validity_days,
        sim_type=payload.sim_type,
        speed_5g=payload.speed_5g,
        features=[f.strip() for f in payload.features if f and f.strip()],
    )
    profile = store.add_plan(plan)
    logger.info("Plan %s contributed for operator %s", plan.id, operator_id)
    return ContributionOut(operator=operator, plan=plan, profile=profile)
