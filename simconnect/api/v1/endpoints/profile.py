from fastapi import APIRouter, Depends

from simconnect.dependencies import get_catalog_store
from simconnect.schemas.user import UserProfileOut
from simconnect.services.catalog import CatalogStore

router = APIRouter()


@router.get("", response_model=UserProfileOut)
def get_profile(store: CatalogStore = Depends(get_catalog_store)):
    return UserProfileOut.from_profile(store.get_user())
