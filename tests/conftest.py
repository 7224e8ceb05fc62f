import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from app.main import app
from app.database import get_session
from unittest.mock import AsyncMock

class RecordingQuery:
    """Stands in for ``execute_query``: records calls and returns canned rows."""

    def __init__(self, rows=None, error=None):
        self.rows = rows if rows is not None else []
        self.error = error
        self.calls = []

    async def __call__(self, db, sql_text, params=()):
        self.calls.append((sql_text, list(params)))
        if self.error is not None:
            raise self.error
        return self.rows


@pytest.fixture
def mock_db_session():
    session = AsyncMock()
    session.commit = AsyncMock()
    return session

@pytest.fixture
def recording_query():
    def factory(rows=None, error=None):
        return RecordingQuery(rows=rows, error=error)
    return factory

@pytest_asyncio.fixture
async def client(mock_db_session):
    async def override_get_session():
        yield mock_db_session

    app.dependency_overrides[get_session] = override_get_session
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
