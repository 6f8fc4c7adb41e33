import pytest

from questions_api.settings import Settings


@pytest.fixture(autouse=True)
def _clear_cors_env(monkeypatch: pytest.MonkeyPatch):
    for name in ("CORS_ALLOW_ORIGINS", "ALLOWED_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS", "PORT", "HOST"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    settings = Settings(_env_file=None)
    assert settings.host == "127.0.0.1"
    assert settings.port == 3030
    assert settings.cors_allow_origins == ["*"]
    assert settings.cors_allow_methods == ["PUT", "DELETE", "GET", "POST"]
    assert settings.cors_allow_headers == ["content-type"]


def test_comma_separated_lists_are_normalized(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("CORS_ALLOW_METHODS", "get, post")
    monkeypatch.setenv("CORS_ALLOW_HEADERS", "Content-Type,X-Trace")
    settings = Settings(_env_file=None)
    assert settings.cors_allow_methods == ["GET", "POST"]
    assert settings.cors_allow_headers == ["content-type", "x-trace"]


def test_origins_accept_json_array_and_legacy_alias(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("ALLOWED_ORIGINS", '["https://a.com", "http://localhost:3000"]')
    settings = Settings(_env_file=None)
    assert settings.cors_allow_origins == ["https://a.com", "http://localhost:3000"]


def test_port_override(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PORT", "8080")
    assert Settings(_env_file=None).port == 8080
