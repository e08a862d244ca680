from fastapi import FastAPI
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from sqlalchemy import text
from sqlalchemy.exc import TimeoutError as SQLAlchemyTimeoutError
from simconnect.api.v1.routes import router as api_router
from simconnect.core.config import get_settings, parse_cors_origins
import logging
import time
from simconnect.core.database import Base, engine, SessionLocal
from simconnect.core.logging import configure_logging
from simconnect.middlewares.rate_limit import limiter
from simconnect.schemas.user import UserProfile
from simconnect.services.catalog import CatalogStore, ProfileEvents, StorageError


settings = get_settings()

configure_logging()
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name)
app.state.limiter = limiter
app.state.profile_events = ProfileEvents()
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
_started_at = time.time()


@app.exception_handler(StorageError)
async def storage_error_handler(request, exc: StorageError):
    logger.warning("Storage failure on %s %s: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=503,
        content={"detail": "Your change could not be saved. Please submit it again."},
    )


@app.exception_handler(SQLAlchemyTimeoutError)
async def sqlalchemy_timeout_handler(request, exc):
    logger.warning("Database pool timeout on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "Service is busy. Please retry in a moment."},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=parse_cors_origins(settings.cors_origins or ""),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router, prefix=settings.api_v1_prefix)


def _log_profile_change(profile: UserProfile) -> None:
    logger.info(
        "Profile updated points=%s level=%s contributions=%s",
        profile.points,
        profile.level.value,
        profile.contributions,
    )


app.state.profile_events.subscribe(_log_profile_change)


def _seed_catalog() -> None:
    db = SessionLocal()
    try:
        CatalogStore(db, events=app.state.profile_events).initialize()
    except StorageError as exc:
        logger.warning("Catalog seeding skipped: %s", exc.message)
    finally:
        db.close()


@app.on_event("startup")
def ensure_tables():
    if settings.auto_create_tables:
        try:
            Base.metadata.create_all(bind=engine)
        except Exception as exc:
            logger.warning("DB unavailable on startup, skipping table creation: %s", exc)
    if settings.seed_on_startup:
        _seed_catalog()


@app.get("/")
def root():
    return {"status": "ok"}


@app.get("/healthz")
def healthz():
    # Liveness: process is up.
    return {
        "status": "ok",
        "uptime_seconds": int(max(0, time.time() - _started_at)),
        "service": settings.app_name,
    }


@app.get("/readyz")
def readyz():
    # Readiness: storage is reachable.
    db = SessionLocal()
    try:
        db.execute(text("SELECT 1"))
        return {
            "status": "ready",
            "uptime_seconds": int(max(0, time.time() - _started_at)),
        }
    except Exception as exc:
        logger.warning("Readiness DB check failed: %s", exc)
        return JSONResponse(
            status_code=503,
            content={"status": "not_ready", "detail": "database_unavailable"},
        )
    finally:
        db.close()
