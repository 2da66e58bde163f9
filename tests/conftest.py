from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from app.config import settings
from app.main import app
from tests.helpers import FakeDatabase


@pytest.fixture
def api_key():
    return settings.API_KEY


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def patched_db(fake_db):
    """Route every service's get_database() to the in-memory fake."""
    with (
        patch("app.maps.ingest.get_database", return_value=fake_db),
        patch("app.maps.service.get_database", return_value=fake_db),
        patch("app.taming.service.get_database", return_value=fake_db),
    ):
        yield fake_db


@pytest.fixture
async def client(api_key, patched_db):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        ac.headers["X-API-Key"] = api_key
        yield ac
