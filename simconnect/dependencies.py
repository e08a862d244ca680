from fastapi import Depends, Request
from sqlalchemy.orm import Session

from simconnect.core.database import get_db
from simconnect.services.catalog import CatalogStore


def get_catalog_store(request: Request, db: Session = Depends(get_db)) -> CatalogStore:
    return CatalogStore(db, events=getattr(request.app.state, "profile_events", None))
