"""
Deciservice — Test Configuration (conftest.py)
================================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── mock_notes_resource: AsyncMock standing in for NotesResource
    ├── mock_templater:      MagicMock standing in for Templater
    ├── templater:           real Templater over the shipped templates
    ├── mock_db_session:     mock AsyncSession (no real DB needed)
    ├── sqlite_session:      real AsyncSession on an in-memory SQLite database
    ├── sample_notes:        stored-looking Note values
    └── test_client:         HTTPX AsyncClient with collaborators overridden
"""

import os

# Override settings for testing BEFORE any deciservice imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from unittest.mock import AsyncMock, MagicMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from deciservice.config import settings  # noqa: E402
from deciservice.database import Base  # noqa: E402
from deciservice.dependencies import get_notes_resource, get_templater  # noqa: E402
from deciservice.main import create_app  # noqa: E402
from deciservice.models.note import NoteRecord  # noqa: E402, F401
from deciservice.schemas.note import Note, note_uri  # noqa: E402
from deciservice.services.notes_resource import NotesResource  # noqa: E402
from deciservice.services.templater import Templater  # noqa: E402


@pytest.fixture
def mock_notes_resource():
    """
    Provides a mock notes resource.

    Every interface method is an AsyncMock; defaults model an empty store.
    """
    resource = AsyncMock(spec=NotesResource)
    resource.get_notes.return_value = []
    resource.get_note.return_value = None
    resource.create_all.return_value = []
    resource.update_all.return_value = []
    resource.delete_note.return_value = None
    resource.health_check.return_value = True
    return resource


@pytest.fixture
def mock_templater():
    """A Templater whose render() returns fixed HTML and records its variables."""
    templater = MagicMock(spec=Templater)
    templater.render.return_value = "<html>rendered</html>"
    return templater


@pytest.fixture
def templater():
    """The real Jinja2 templater over the shipped templates."""
    return Templater(settings.templates_dir)


@pytest.fixture
def sample_notes():
    return [
        Note(id=1, uri=note_uri(1), title="Groceries", body="milk\neggs"),
        Note(id=2, uri=note_uri(2), title="Ideas", body="<b>bold</b> idea"),
    ]


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Usage:
        mock_db_session.execute.return_value.scalar_one_or_none.return_value = record
        note = await SqlNotesResource(mock_db_session).get_note(1)
    """
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    session.add_all = MagicMock()
    return session


@pytest_asyncio.fixture
async def sqlite_session():
    """
    Provides a real AsyncSession on a fresh in-memory SQLite database.

    The notes table is created from the ORM metadata.
    """
    engine = create_async_engine("sqlite+aiosqlite:///:memory:")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
def app(mock_notes_resource, mock_templater):
    """A fresh application with the notes resource and templater overridden."""
    application = create_app()
    application.dependency_overrides[get_notes_resource] = lambda: mock_notes_resource
    application.dependency_overrides[get_templater] = lambda: mock_templater
    return application


@pytest_asyncio.fixture
async def test_client(app):
    """
    Provides an async HTTP test client for endpoint testing.

    Redirects are not followed, so tests can assert on 303 responses.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
