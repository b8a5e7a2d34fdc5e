import pytest
from pydantic import ValidationError

from zenfocus.config import load_settings

ENV_KEYS = (
    "ZENFOCUS_BACKEND",
    "SUPABASE_URL",
    "SUPABASE_KEY",
    "TOKEN_TTL_HOURS",
    "CORS_ORIGINS",
    "LOG_LEVEL",
    "HOST",
    "PORT",
)


@pytest.fixture
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)
    return monkeypatch


def test_defaults(clean_env) -> None:
    settings = load_settings()
    assert settings.backend == "supabase"
    assert settings.supabase_url is None
    assert settings.token_ttl_hours == 24
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.port == 8000


def test_reads_environment(clean_env) -> None:
    clean_env.setenv("ZENFOCUS_BACKEND", "MEMORY")
    clean_env.setenv("CORS_ORIGINS", "http://localhost:3000, https://zenfocus.app")
    clean_env.setenv("TOKEN_TTL_HOURS", "2")
    clean_env.setenv("LOG_LEVEL", "debug")
    clean_env.setenv("PORT", "9000")

    settings = load_settings()
    assert settings.backend == "memory"
    assert settings.cors_origins == ["http://localhost:3000", "https://zenfocus.app"]
    assert settings.token_ttl_hours == 2
    assert settings.log_level == "DEBUG"
    assert settings.port == 9000


def test_unknown_backend_rejected(clean_env) -> None:
    clean_env.setenv("ZENFOCUS_BACKEND", "mysql")
    with pytest.raises(ValidationError):
        load_settings()
