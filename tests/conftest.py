import httpx
import pytest
from httpx import ASGITransport

from app.services.database import Database


@pytest.fixture
def database_url(tmp_path):
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
def mock_env(monkeypatch, database_url):
    monkeypatch.setenv("DATABASE_URL", database_url)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")


@pytest.fixture
async def db(database_url):
    async with Database.connect(database_url) as database:
        await database.create_schema()
        yield database


@pytest.fixture
async def client(mock_env):
    from app.main import app, lifespan

    async with lifespan(app):
        async with httpx.AsyncClient(
            transport=ASGITransport(app=app),
            base_url="http://test",
        ) as c:
            yield c
