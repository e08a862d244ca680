import logging

from fastapi import APIRouter, Depends, HTTPException, Request

from simconnect.core.config import get_settings
from simconnect.dependencies import get_catalog_store
from simconnect.middlewares.rate_limit import limiter
from simconnect.schemas.advisor import AdvisorQuery, AdvisorReply
from simconnect.services.advisor import OFFLINE_REPLY, AdvisorApiError, AdvisorClient, build_context
from simconnect.services.catalog import CatalogStore

router = APIRouter()
settings = get_settings()
logger = logging.getLogger(__name__)


@router.post("/ask", response_model=AdvisorReply)
@limiter.limit(settings.advisor_rate_limit)
def ask_advisor(request: Request, payload: AdvisorQuery, store: CatalogStore = Depends(get_catalog_store)):
    query = payload.query.strip()
    if not query:
        raise HTTPException(status_code=400, detail="Please enter a question.")

    client = AdvisorClient()
    try:
        answer = client.ask(query, store.list_countries(), build_context(store))
    except AdvisorApiError as exc:
        logger.warning("Advisor request failed status=%s: %s", exc.status_code, exc.message)
        return AdvisorReply(answer=OFFLINE_REPLY, offline=True)
    return AdvisorReply(answer=answer)
