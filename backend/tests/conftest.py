"""
Standup Notes Backend - Test Configuration (conftest.py)
========================================================

Shared pytest fixtures.

Fixture Hierarchy:
    ├── db_engine: in-memory SQLite engine with notes/summaries tables
    ├── session_factory / db_session: sessions bound to db_engine
    ├── add_note: inserts a note with an explicit created_at
    ├── mock_db_session: AsyncMock session for failure-path unit tests
    ├── mock_completion: CompletionService double returning canned text
    └── test_client: HTTPX AsyncClient wired to the app, the SQLite store
                     and mock_completion
"""

import os
from datetime import datetime
from typing import Optional
from unittest.mock import AsyncMock, MagicMock

# Must be set before standup_notes.config is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["GEMINI_API_KEY"] = "test-key-not-real"
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from standup_notes.database import Base, get_db_session
from standup_notes.models import Note
from standup_notes.services.llm_base import CompletionService

GENERATED_SUMMARY = (
    "What I Did Yesterday:\n- Fixed bug X\n\n"
    "What I Will Do Today:\n- Nothing found in the notes\n\n"
    "Obstacles/Blockers:\n- Nothing found in the notes"
)


@pytest_asyncio.fixture
async def db_engine():
    """Fresh in-memory database per test, tables built from the ORM metadata."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def add_note(session_factory):
    """
    Insert a note with a chosen created_at.

    Usage:
        note = await add_note("fixed bug X", datetime(2024, 1, 2, 9, 0))
    """

    async def _add(content: str, created_at: Optional[datetime] = None) -> Note:
        async with session_factory() as session:
            note = Note(content=content)
            if created_at is not None:
                note.created_at = created_at
            session.add(note)
            await session.commit()
            await session.refresh(note)
            return note

    return _add


@pytest.fixture
def mock_db_session():
    """AsyncSession stand-in; tests set execute/flush side effects."""
    session = AsyncMock()
    session.execute = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.refresh = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest.fixture
def mock_completion():
    """CompletionService double; complete() returns GENERATED_SUMMARY."""
    completion = MagicMock(spec=CompletionService)
    completion.complete = AsyncMock(return_value=GENERATED_SUMMARY)
    completion.health_check = AsyncMock(return_value=True)
    return completion


@pytest_asyncio.fixture
async def test_client(session_factory, mock_completion, monkeypatch):
    """
    HTTPX client for the app, talking to the SQLite store and mock_completion.

    Usage:
        async def test_list(test_client):
            response = await test_client.get("/notes")
    """
    from standup_notes.main import app
    from standup_notes.services.summary_service import summary_service

    async def override_db_session():
        async with session_factory() as session:
            yield session

    monkeypatch.setattr(summary_service, "completion", mock_completion)
    app.dependency_overrides[get_db_session] = override_db_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
