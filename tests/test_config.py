from sqlalchemy.pool import StaticPool

from simconnect.core.config import Settings, get_settings, parse_cors_origins
from simconnect.core.database import engine_options, normalize_database_url


def test_parse_cors_origins_csv():
    value = "http://localhost:5173, http://localhost:3000"
    assert parse_cors_origins(value) == [
        "http://localhost:5173",
        "http://localhost:3000",
    ]


def test_parse_cors_origins_json_list():
    value = '["http://localhost:5173", "https://simconnect.example.com"]'
    assert parse_cors_origins(value) == [
        "http://localhost:5173",
        "https://simconnect.example.com",
    ]


def test_parse_cors_origins_deduplicates():
    value = "http://localhost:5173,http://localhost:5173"
    assert parse_cors_origins(value) == ["http://localhost:5173"]


def test_parse_cors_origins_invalid_json_is_empty():
    assert parse_cors_origins("[not json") == []


def test_settings_read_environment(monkeypatch):
    monkeypatch.setenv("GEMINI_MODEL", "gemini-2.5-pro")
    monkeypatch.setenv("SEED_ON_STARTUP", "false")
    settings = Settings()
    assert settings.gemini_model == "gemini-2.5-pro"
    assert settings.seed_on_startup is False


def test_test_environment_uses_in_memory_sqlite():
    settings = get_settings()
    assert settings.database_url == "sqlite://"
    assert not settings.gemini_api_key


def test_postgres_urls_use_psycopg_driver():
    assert normalize_database_url("postgresql://u:p@db/simconnect") == "postgresql+psycopg://u:p@db/simconnect"
    assert normalize_database_url("postgres://u:p@db/simconnect") == "postgresql+psycopg://u:p@db/simconnect"
    assert normalize_database_url("sqlite:///./simconnect.db") == "sqlite:///./simconnect.db"


def test_engine_options_per_backend():
    settings = Settings(db_pool_size=7)
    memory = engine_options("sqlite://", settings)
    assert memory["poolclass"] is StaticPool
    assert memory["connect_args"] == {"check_same_thread": False}
    assert "poolclass" not in engine_options("sqlite:///./simconnect.db", settings)

    remote = engine_options("postgresql+psycopg://u:p@pg.example.com/simconnect", settings)
    assert remote["pool_size"] == 7
    assert remote["connect_args"]["sslmode"] == "require"
    local = engine_options("postgresql+psycopg://u:p@localhost/simconnect", settings)
    assert "sslmode" not in local["connect_args"]
