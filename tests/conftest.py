"""Shared fixtures."""

import json

import pytest
from httpx import ASGITransport, AsyncClient

from questions_api.main import create_app
from questions_api.settings import Settings
from questions_api.stores import QuestionStore


@pytest.fixture
def sample_payload() -> dict:
    return {
        "1": {"id": "1", "title": "T", "content": "C", "tags": None},
        "2": {"id": "2", "title": "Second", "content": "More content", "tags": ["a", "b"]},
    }


@pytest.fixture
def store(sample_payload: dict) -> QuestionStore:
    return QuestionStore.from_json(json.dumps(sample_payload))


@pytest.fixture
def settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    for name in ("CORS_ALLOW_ORIGINS", "ALLOWED_ORIGINS", "CORS_ALLOW_METHODS", "CORS_ALLOW_HEADERS"):
        monkeypatch.delenv(name, raising=False)
    return Settings(_env_file=None)


@pytest.fixture
async def client(settings: Settings, store: QuestionStore):
    """Create test client."""
    async with AsyncClient(
        transport=ASGITransport(app=create_app(settings=settings, store=store)),
        base_url="http://test",
    ) as ac:
        yield ac
