from fastapi import APIRouter
from simconnect.api.v1.endpoints import advisor, catalog, compare, contributions, estimator, profile

router = APIRouter()

router.include_router(catalog.router, prefix="/catalog", tags=["catalog"])
router.include_router(contributions.router, prefix="/contributions", tags=["contributions"])
router.include_router(profile.router, prefix="/profile", tags=["profile"])
router.include_router(estimator.router, prefix="/estimator", tags=["estimator"])
router.include_router(compare.router, prefix="/compare", tags=["compare"])
router.include_router(advisor.router, prefix="/advisor", tags=["advisor"])
