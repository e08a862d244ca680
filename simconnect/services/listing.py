from decimal import Decimal, ROUND_HALF_UP

from simconnect.schemas.catalog import Country, DataTier, Plan


CENT = Decimal("0.01")
# Per-GB price shown for unlimited plans in plan listings.
LISTING_UNLIMITED_REFERENCE_GB = 100


def search_countries(countries: list[Country], query: str | None) -> list[Country]:
    needle = str(query or "").strip().lower()
    if not needle:
        return list(countries)
    return [c for c in countries if needle in c.name_en.lower() or needle in c.name_es.lower()]


def in_data_tier(plan: Plan, tier: DataTier) -> bool:
    allowance = plan.allowance
    if tier == DataTier.ALL:
        return True
    if tier == DataTier.ULTRA:
        return allowance.is_unlimited or allowance.gb >= 100
    if allowance.is_unlimited:
        return False
    if tier == DataTier.LOW:
        return allowance.gb < 10
    if tier == DataTier.MEDIUM:
        return 10 <= allowance.gb < 50
    if tier == DataTier.HIGH:
        return 50 <= allowance.gb < 100
    return True


def filter_by_data_tier(plans: list[Plan], tier: DataTier | str) -> list[Plan]:
    tier = DataTier(tier)
    return [plan for plan in plans if in_data_tier(plan, tier)]


def price_per_gb(plan: Plan, unlimited_reference_gb: int | None = None) -> Decimal | None:
    allowance = plan.allowance
    volume = unlimited_reference_gb if allowance.is_unlimited else allowance.gb
    if not volume:
        return None
    return (Decimal(plan.price) / Decimal(volume)).quantize(CENT, rounding=ROUND_HALF_UP)


def sort_by_price(plans: list[Plan]) -> list[Plan]:
    # sorted() is stable, so equal prices keep catalog order.
    return sorted(plans, key=lambda plan: Decimal(plan.price))
