import logging
from typing import Callable, TypeVar

from pydantic import BaseModel, TypeAdapter
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from simconnect.schemas.catalog import Country, Operator, Plan, Review
from simconnect.schemas.user import UserProfile, level_for_points
from simconnect.services import seed_data
from simconnect.services.storage import KeyValueStore, locked_keys


logger = logging.getLogger(__name__)

COUNTRIES_KEY = "gsc_countries"
OPERATORS_KEY = "gsc_operators"
PLANS_KEY = "gsc_plans"
REVIEWS_KEY = "gsc_reviews"
USER_KEY = "gsc_user"
ALL_KEYS = (COUNTRIES_KEY, OPERATORS_KEY, PLANS_KEY, REVIEWS_KEY, USER_KEY)

# A countries collection smaller than this is treated as a stale or truncated seed.
MIN_SEED_COUNTRIES = 10

REVIEW_POINTS = 2
PLAN_POINTS = 5
OPERATOR_POINTS = 10

WORLD_EXPLORER_BADGE = "World Explorer"
WORLD_EXPLORER_COUNTRIES = 10
DEAL_HUNTER_BADGE = "Deal Hunter"
DEAL_HUNTER_PLANS = 50

T = TypeVar("T", bound=BaseModel)
ProfileListener = Callable[[UserProfile], None]


class StorageError(Exception):
    def __init__(self, message: str, *, key: str | None = None):
        super().__init__(message)
        self.message = message
        self.key = key


class CorruptCollectionError(ValueError):
    pass


class ProfileEvents:
    """Fan-out of profile changes so views do not have to poll the profile."""

    def __init__(self):
        self._listeners: list[ProfileListener] = []

    def subscribe(self, listener: ProfileListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def publish(self, profile: UserProfile) -> None:
        for listener in list(self._listeners):
            try:
                listener(profile)
            except Exception as exc:
                logger.warning("Profile listener %r failed: %s", listener, exc)


def award(
    profile: UserProfile,
    points: int,
    *,
    contributions: int = 0,
    country_id: str | None = None,
    plans: int = 0,
) -> UserProfile:
    """Return a copy of the profile with points, counters, level and badges updated."""
    total = profile.points + points
    countries = list(profile.contributed_countries)
    if country_id and country_id not in countries:
        countries.append(country_id)
    plan_count = profile.contributed_plans + plans

    badges = list(profile.badges)
    for badge, earned in (
        (WORLD_EXPLORER_BADGE, len(countries) >= WORLD_EXPLORER_COUNTRIES),
        (DEAL_HUNTER_BADGE, plan_count >= DEAL_HUNTER_PLANS),
    ):
        if earned and badge not in badges:
            badges.append(badge)
    return profile.model_copy(
        update={
            "points": total,
            "contributions": profile.contributions + contributions,
            "level": level_for_points(total),
            "badges": badges,
            "contributed_countries": countries,
            "contributed_plans": plan_count,
        }
    )


class CatalogStore:
    """Countries, operators, plans, reviews and the user profile.

    Collections are append-only. Every append also awards points, and the
    collection write and the profile write commit in one transaction.
    """

    def __init__(self, db: Session, events: ProfileEvents | None = None):
        self.kv = KeyValueStore(db)
        self.events = events or ProfileEvents()

    def _adapter(self, model: type[T]) -> TypeAdapter:
        return TypeAdapter(list[model])

    def _read_collection(self, key: str, model: type[T], *, strict: bool = False) -> list[T]:
        raw = self.kv.get(key, for_update=strict)
        if raw is None:
            return []
        try:
            return self._adapter(model).validate_json(raw)
        except ValueError as exc:
            if strict:
                raise CorruptCollectionError(f"Stored collection {key} is unreadable") from exc
            logger.warning("Ignoring unreadable collection %s: %s", key, exc)
            return []

    def _write_collection(self, key: str, model: type[T], items: list[T]) -> None:
        self.kv.set(key, self._adapter(model).dump_json(items).decode("utf-8"))

    def _read_user(self, *, strict: bool = False) -> UserProfile:
        raw = self.kv.get(USER_KEY, for_update=strict)
        if raw is None:
            return UserProfile()
        try:
            return UserProfile.model_validate_json(raw)
        except ValueError as exc:
            if strict:
                raise CorruptCollectionError("Stored user profile is unreadable") from exc
            logger.warning("Ignoring unreadable user profile: %s", exc)
            return UserProfile()

    def initialize(self) -> list[str]:
        """Write seed data for every key that is missing; return the seeded keys."""
        seeded: list[str] = []
        with locked_keys(*ALL_KEYS):
            try:
                if len(self._read_collection(COUNTRIES_KEY, Country)) < MIN_SEED_COUNTRIES:
                    countries = [Country.model_validate(item) for item in seed_data.INITIAL_COUNTRIES]
                    self._write_collection(COUNTRIES_KEY, Country, countries)
                    seeded.append(COUNTRIES_KEY)

                seeds = (
                    (OPERATORS_KEY, Operator, seed_data.INITIAL_OPERATORS),
                    (PLANS_KEY, Plan, seed_data.INITIAL_PLANS),
                    (REVIEWS_KEY, Review, seed_data.INITIAL_REVIEWS),
                )
                for key, model, rows in seeds:
                    if self.kv.get(key) is None:
                        self._write_collection(key, model, [model.model_validate(row) for row in rows])
                        seeded.append(key)

                if self.kv.get(USER_KEY) is None:
                    self.kv.set(USER_KEY, UserProfile.model_validate(seed_data.DEFAULT_USER).model_dump_json())
                    seeded.append(USER_KEY)

                self.kv.commit()
            except SQLAlchemyError as exc:
                self.kv.rollback()
                logger.warning("Catalog seeding failed: %s", exc)
                raise StorageError("Could not seed the catalog") from exc

        if seeded:
            logger.info("Seeded catalog keys %s (seed %s)", ", ".join(seeded), seed_data.SEED_VERSION)
        return seeded

    def list_countries(self) -> list[Country]:
        return self._read_collection(COUNTRIES_KEY, Country)

    def get_country(self, country_id: str) -> Country | None:
        return next((c for c in self.list_countries() if c.id == country_id), None)

    def list_operators(self, country_id: str | None = None) -> list[Operator]:
        operators = self._read_collection(OPERATORS_KEY, Operator)
        if country_id:
            return [op for op in operators if op.country_id == country_id]
        return operators

    def list_plans(self, operator_id: str | None = None) -> list[Plan]:
        plans = self._read_collection(PLANS_KEY, Plan)
        if operator_id:
            return [plan for plan in plans if plan.operator_id == operator_id]
        return plans

    def get_plan(self, plan_id: str) -> Plan | None:
        return next((p for p in self.list_plans() if p.id == plan_id), None)

    def list_reviews(self, plan_id: str) -> list[Review]:
        return [r for r in self._read_collection(REVIEWS_KEY, Review) if r.plan_id == plan_id]

    def get_user(self) -> UserProfile:
        return self._read_user()

    def _append(
        self,
        key: str,
        model: type[T],
        entity: T,
        *,
        points: int,
        contributions: int = 0,
        country_id: str | None = None,
        plans: int = 0,
    ) -> UserProfile:
        with locked_keys(key, USER_KEY):
            try:
                items = self._read_collection(key, model, strict=True)
                items.append(entity)
                self._write_collection(key, model, items)

                profile = award(
                    self._read_user(strict=True),
                    points,
                    contributions=contributions,
                    country_id=country_id,
                    plans=plans,
                )
                self.kv.set(USER_KEY, profile.model_dump_json())
                self.kv.commit()
            except (SQLAlchemyError, TypeError, ValueError) as exc:
                self.kv.rollback()
                logger.warning("Append to %s failed, nothing was saved: %s", key, exc)
                raise StorageError(f"Could not save to {key}", key=key) from exc

        self.events.publish(profile)
        return profile

    def add_review(self, review: Review) -> UserProfile:
        return self._append(REVIEWS_KEY, Review, review, points=REVIEW_POINTS)

    def add_operator(self, operator: Operator) -> UserProfile:
        return self._append(
            OPERATORS_KEY,
            Operator,
            operator,
            points=OPERATOR_POINTS,
            contributions=1,
            country_id=operator.country_id,
        )

    def add_plan(self, plan: Plan) -> UserProfile:
        operator_country = next(
            (op.country_id for op in self.list_operators() if op.id == plan.operator_id),
            None,
        )
        return self._append(
            PLANS_KEY,
            Plan,
            plan,
            points=PLAN_POINTS,
            contributions=1,
            country_id=operator_country,
            plans=1,
        )
