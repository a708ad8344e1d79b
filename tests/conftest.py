"""Shared fixtures: an app wired to the in-memory store and an HTTP client for it."""

from pathlib import Path

import httpx
import pytest
import pytest_asyncio

from registration.core.config import Settings
from registration.main import create_app
from registration.services.memory_store import InMemoryUserStore

PUBLIC_DIR = Path(__file__).resolve().parent.parent / "public"


@pytest.fixture
def settings() -> Settings:
    return Settings(_env_file=None, MONGO_URI=None, STATIC_DIR=str(PUBLIC_DIR), CORS_ORIGINS=[])


@pytest.fixture
def store() -> InMemoryUserStore:
    return InMemoryUserStore()


@pytest.fixture
def app(settings, store):
    return create_app(settings, store)


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


@pytest.fixture
def ann() -> dict:
    return {"name": "Ann", "email": "ann@x.com", "password": "p1", "phone": "555"}
