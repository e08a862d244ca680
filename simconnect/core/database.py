import logging
from urllib.parse import urlparse

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase
from sqlalchemy.pool import StaticPool

from simconnect.core.config import Settings, get_settings


class Base(DeclarativeBase):
    pass


settings = get_settings()
logger = logging.getLogger(__name__)

MEMORY_SQLITE_URLS = ("sqlite://", "sqlite:///:memory:")


def normalize_database_url(url: str) -> str:
    """Point bare ``postgresql://`` URLs at the psycopg 3 driver from the postgres extra."""
    if url.startswith("postgres://"):
        url = "postgresql://" + url[len("postgres://"):]
    if url.startswith("postgresql://"):
        return "postgresql+psycopg://" + url[len("postgresql://"):]
    return url


def engine_options(url: str, config: Settings) -> dict:
    """Keyword arguments for ``create_engine`` depending on the backend."""
    backend = urlparse(url).scheme.split("+", 1)[0]
    if backend == "sqlite":
        # Sync endpoints run on the threadpool; a session is still used by one thread at a time.
        options = {"connect_args": {"check_same_thread": False}}
        if url in MEMORY_SQLITE_URLS:
            # The in-memory database only exists on its connection.
            options["poolclass"] = StaticPool
        return options

    if backend == "postgresql":
        host = urlparse(url).hostname
        connect_args = {"keepalives": 1, "keepalives_idle": 30}
        if host not in ("localhost", "127.0.0.1", "db"):
            connect_args["sslmode"] = "require"
        return {
            "connect_args": connect_args,
            "pool_pre_ping": config.db_pool_pre_ping,
            "pool_recycle": config.db_pool_recycle,
            "pool_size": config.db_pool_size,
            "max_overflow": config.db_max_overflow,
            "pool_timeout": config.db_pool_timeout,
        }

    logger.info("No engine tuning for database backend %s", backend)
    return {}


database_url = normalize_database_url(str(settings.database_url))
engine = create_engine(database_url, **engine_options(database_url, settings))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
