import os

import pytest


def _set_test_env() -> None:
    defaults = {
        "APP_NAME": "Global SIM Connect Test",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "WARNING",
        "DATABASE_URL": "sqlite://",
        "AUTO_CREATE_TABLES": "true",
        "SEED_ON_STARTUP": "true",
        "GEMINI_API_KEY": "",
        "GEMINI_RETRY_COUNT": "1",
        "ADVISOR_RATE_LIMIT": "100/minute",
        "CORS_ORIGINS": "http://localhost:5173,http://localhost:3000",
    }
    for key, value in defaults.items():
        os.environ.setdefault(key, value)


_set_test_env()


def _reset_schema():
    from simconnect.core.database import Base, engine
    import simconnect.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture
def db():
    from simconnect.core.database import SessionLocal

    _reset_schema()
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def store(db):
    from simconnect.services.catalog import CatalogStore

    catalog = CatalogStore(db)
    catalog.initialize()
    return catalog


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from simconnect.main import app

    _reset_schema()
    with TestClient(app) as test_client:
        yield test_client
