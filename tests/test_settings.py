import pytest

from tasklens.libs.schemas import get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_get_settings_defaults(monkeypatch):
    for name in ("APP_NAME", "TASKLENS_APP_NAME", "API_PREFIX", "TASKLENS_API_PREFIX"):
        monkeypatch.delenv(name, raising=False)

    settings = get_settings()

    assert settings.app_name == "Tasklens"
    assert settings.api_prefix == "/api"
    assert settings.cors_allow_origins == ["*"]
    assert settings.enable_metrics is True


def test_get_settings_reads_prefixed_environment(monkeypatch):
    monkeypatch.setenv("TASKLENS_APP_NAME", "TestLens")
    monkeypatch.setenv("TASKLENS_ENVIRONMENT", "production")
    monkeypatch.setenv("TASKLENS_CORS_ALLOW_ORIGINS", '["http://localhost:3000"]')
    monkeypatch.setenv("TASKLENS_ENABLE_METRICS", "false")

    settings = get_settings()

    assert settings.app_name == "TestLens"
    assert settings.environment == "production"
    assert settings.is_development is False
    assert settings.cors_allow_origins == ["http://localhost:3000"]
    assert settings.enable_metrics is False


def test_get_settings_is_cached():
    assert get_settings() is get_settings()
