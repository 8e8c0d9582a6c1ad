"""
Note Store: Test Configuration (conftest.py)
============================================

What:  Shared pytest fixtures for the entire test suite.
How:   Every test gets its own temporary cache directory; the app under test
       is built with create_app() from a Settings object pointing at it.

Fixture Hierarchy (all function-scoped):
    ├── temp_storage: Temporary cache directory
    ├── settings: Settings bound to temp_storage
    ├── store: NoteStore over temp_storage
    ├── app: FastAPI app built from settings
    └── test_client: HTTPX AsyncClient talking to app through ASGITransport
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from notestore.config import Settings
from notestore.main import create_app
from notestore.services.note_store import NoteStore


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch, tmp_path):
    """Keeps NOTESTORE_* variables and stray .env files out of every test."""
    for var in (
        "NOTESTORE_HOST",
        "NOTESTORE_PORT",
        "NOTESTORE_CACHE_DIR",
        "NOTESTORE_LOG_LEVEL",
        "NOTESTORE_CORS_ORIGINS",
        "NOTESTORE_UPLOAD_FORM_PATH",
    ):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def temp_storage(tmp_path):
    """A fresh, empty cache directory for each test."""
    storage_dir = tmp_path / "cache"
    storage_dir.mkdir()
    return storage_dir


@pytest.fixture
def settings(temp_storage):
    return Settings(host="127.0.0.1", port=8008, cache_dir=temp_storage, log_level="WARNING")


@pytest.fixture
def store(temp_storage):
    return NoteStore(temp_storage)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest_asyncio.fixture
async def test_client(app):
    """
    HTTPX AsyncClient routed straight into the ASGI app (no server needed).

    Usage:
        async def test_greeting(test_client):
            response = await test_client.get("/")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
