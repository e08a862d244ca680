from decimal import Decimal

import pytest
from sqlalchemy.exc import SQLAlchemyError

from simconnect.models import StorageEntry
from simconnect.schemas.catalog import Country, Operator, Plan, Review, SimType
from simconnect.schemas.user import UserLevel
from simconnect.services import seed_data
from simconnect.services.catalog import (
    COUNTRIES_KEY,
    OPERATORS_KEY,
    PLANS_KEY,
    USER_KEY,
    CatalogStore,
    ProfileEvents,
    StorageError,
)


def _plan(plan_id="plan_new", operator_id="es_movistar", **overrides):
    fields = {
        "id": plan_id,
        "operator_id": operator_id,
        "name": "Traveler 5GB",
        "data_gb": 5,
        "price": Decimal("12.50"),
        "currency": "EUR",
        "validity_days": 15,
        "sim_type": SimType.ESIM,
        "speed_5g": True,
        "features": ["Hotspot", "EU roaming"],
    }
    fields.update(overrides)
    return Plan(**fields)


def _snapshot(store: CatalogStore) -> dict:
    return {key: store.kv.get(key) for key in (COUNTRIES_KEY, OPERATORS_KEY, PLANS_KEY, USER_KEY)}


def test_initialize_seeds_every_collection(store):
    assert len(store.list_countries()) == len(seed_data.INITIAL_COUNTRIES)
    assert len(store.list_operators()) == len(seed_data.INITIAL_OPERATORS)
    assert len(store.list_plans()) == len(seed_data.INITIAL_PLANS)
    user = store.get_user()
    assert user.name == "Traveler"
    assert user.points == 0
    assert user.level == UserLevel.NOVICE


def test_initialize_is_idempotent(store):
    before = _snapshot(store)
    assert store.initialize() == []
    assert _snapshot(store) == before


def test_initialize_keeps_contributed_data(store):
    store.add_plan(_plan())
    store.initialize()
    assert store.get_plan("plan_new") is not None
    assert store.get_user().points == 5


def test_initialize_reseeds_truncated_countries(store):
    truncated = store.list_countries()[:3]
    store.kv.set(COUNTRIES_KEY, "[" + ",".join(c.model_dump_json() for c in truncated) + "]")
    store.kv.commit()

    assert store.initialize() == [COUNTRIES_KEY]
    assert len(store.list_countries()) == len(seed_data.INITIAL_COUNTRIES)


def test_initialize_reseeds_corrupt_countries(store):
    store.kv.set(COUNTRIES_KEY, "{not json")
    store.kv.commit()
    store.initialize()
    assert len(store.list_countries()) == len(seed_data.INITIAL_COUNTRIES)


def test_list_operators_filters_by_country(store):
    operators = store.list_operators("es")
    assert {op.id for op in operators} == {"es_movistar", "es_vodafone", "es_orange"}
    assert all(op.country_id == "es" for op in operators)


def test_list_plans_filters_by_operator(store):
    plans = store.list_plans("es_movistar")
    assert {p.id for p in plans} == {"es_mov_tourist", "es_mov_unl"}


def test_unknown_foreign_keys_return_empty_lists(store):
    assert store.list_operators("atlantis") == []
    assert store.list_plans("no-such-operator") == []
    assert store.list_reviews("no-such-plan") == []


def test_lookups_return_none_when_missing(store):
    assert store.get_country("es").name_es == "España"
    assert store.get_country("zz") is None
    assert store.get_plan("missing") is None


def test_add_review_awards_two_points(store):
    before = store.get_user()
    review = Review(id="rev_1", plan_id="es_mov_tourist", author="Ana", rating=4, comment="Fast in Madrid", date="2026-10-18")

    store.add_review(review)

    after = store.get_user()
    assert after.points == before.points + 2
    assert after.contributions == before.contributions
    reviews = store.list_reviews("es_mov_tourist")
    assert reviews == [review]


def test_add_operator_awards_ten_points_and_a_contribution(store):
    before = store.get_user()
    operator = Operator(id="op_x", name="Digi", country_id="es", technologies=["4G"], website="digimobil.es", coverage="Good")

    store.add_operator(operator)

    after = store.get_user()
    assert after.points == before.points + 10
    assert after.contributions == before.contributions + 1
    assert after.contributed_countries == ["es"]
    assert after.badges == []
    assert operator in store.list_operators("es")


def test_add_plan_awards_five_points_and_a_contribution(store):
    before = store.get_user()
    store.add_plan(_plan())
    after = store.get_user()
    assert after.points == before.points + 5
    assert after.contributions == before.contributions + 1
    assert after.contributed_plans == 1
    assert after.contributed_countries == ["es"]
    assert after.badges == []


def test_appended_plan_round_trips_unchanged(store):
    plan = _plan(data_gb=-1, price=Decimal("39.99"))
    store.add_plan(plan)
    stored = store.get_plan(plan.id)
    assert stored == plan
    assert stored.allowance.is_unlimited


def test_level_follows_points(store):
    for index in range(10):
        store.add_operator(Operator(id=f"op_{index}", name=f"Op {index}", country_id="fr"))
    profile = store.get_user()
    assert profile.points == 100
    assert profile.level == UserLevel.EXPLORER
    assert profile.contributed_countries == ["fr"]
    assert profile.badges == []


def test_world_explorer_needs_ten_countries(store):
    country_ids = [c.id for c in store.list_countries()][:10]
    for index, country_id in enumerate(country_ids[:9]):
        store.add_operator(Operator(id=f"op_{index}", name=f"Op {index}", country_id=country_id))
    assert store.get_user().badges == []

    store.add_operator(Operator(id="op_last", name="Op last", country_id=country_ids[9]))
    profile = store.get_user()
    assert len(profile.contributed_countries) == 10
    assert profile.badges == ["World Explorer"]


def test_plan_counts_toward_its_operator_country(store):
    profile = store.add_plan(_plan(operator_id="jp_docomo"))
    assert profile.contributed_countries == ["jp"]


def test_get_user_falls_back_to_zero_profile(db, store):
    db.query(StorageEntry).filter(StorageEntry.key == USER_KEY).delete()
    db.commit()
    user = store.get_user()
    assert user.points == 0
    assert user.contributions == 0
    assert user.badges == []


def test_corrupt_collection_reads_as_empty(store):
    store.kv.set(PLANS_KEY, "definitely not json")
    store.kv.commit()
    assert store.list_plans() == []


def test_append_to_corrupt_collection_raises_and_keeps_data(store):
    store.kv.set(PLANS_KEY, "definitely not json")
    store.kv.commit()
    points = store.get_user().points

    with pytest.raises(StorageError):
        store.add_plan(_plan())

    assert store.kv.get(PLANS_KEY) == "definitely not json"
    assert store.get_user().points == points


def test_failed_commit_leaves_no_partial_write(store, monkeypatch):
    before = _snapshot(store)

    def _boom():
        raise SQLAlchemyError("disk full")

    monkeypatch.setattr(store.kv, "commit", _boom)
    with pytest.raises(StorageError) as excinfo:
        store.add_plan(_plan())

    assert excinfo.value.key == PLANS_KEY
    assert _snapshot(store) == before
    assert store.get_plan("plan_new") is None


def test_profile_listeners_are_notified_after_commit(db):
    events = ProfileEvents()
    store = CatalogStore(db, events=events)
    store.initialize()
    seen = []
    unsubscribe = events.subscribe(seen.append)

    store.add_review(Review(id="rev_a", plan_id="es_mov_unl", author="A", rating=5, comment="ok", date="2026-10-18"))
    unsubscribe()
    store.add_review(Review(id="rev_b", plan_id="es_mov_unl", author="A", rating=5, comment="ok", date="2026-10-18"))

    assert [profile.points for profile in seen] == [2]


def test_failing_listener_does_not_undo_write(store):
    def _broken(profile):
        raise RuntimeError("listener crashed")

    store.events.subscribe(_broken)
    store.add_plan(_plan())
    assert store.get_plan("plan_new") is not None


def test_seed_countries_have_both_locales(store):
    countries: list[Country] = store.list_countries()
    assert all(c.name_en and c.name_es for c in countries)
    assert len({c.id for c in countries}) == len(countries)
