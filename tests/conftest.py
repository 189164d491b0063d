"""
Shared test fixtures and configuration for entire test suite.

Provides: In-memory async database, sample users/clients/sessions, cipher
Dependencies: pytest, sqlalchemy, aiosqlite, cryptography
System role: Test infrastructure and fixture management
"""

import uuid
from datetime import datetime, timezone

import pytest
from cryptography.fernet import Fernet


@pytest.fixture
async def test_async_db():
    """
    Create in-memory SQLite async database for testing.

    Yields:
        AsyncSession: Test database session with cleanup (lazy imported to avoid settings issues)
    """
    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
    from sqlalchemy.pool import StaticPool

    from coachdesk.boundary.db.base import Base
    from coachdesk.boundary.db import models  # noqa: F401

    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def cipher():
    """Provide a SecretCipher with a throwaway key."""
    from coachdesk.core.encryption import SecretCipher

    return SecretCipher(Fernet.generate_key())


@pytest.fixture
async def sample_user(test_async_db):
    """Persist a user with default prompts and no API key."""
    from coachdesk.boundary.db.models import UserModel
    from coachdesk.core.ai.claude_models import DEFAULT_CLAUDE_MODEL
    from coachdesk.core.ai.prompts import DEFAULT_ANALYSIS_PROMPT, DEFAULT_PREPARATION_PROMPT

    user = UserModel(
        id="coach-uid-1",
        email="coach@example.com",
        name="Casey Coach",
        claude_model=DEFAULT_CLAUDE_MODEL,
        analysis_prompt=DEFAULT_ANALYSIS_PROMPT,
        preparation_prompt=DEFAULT_PREPARATION_PROMPT,
    )
    test_async_db.add(user)
    await test_async_db.flush()
    return user


@pytest.fixture
async def other_user(test_async_db):
    """Persist a second user for ownership checks."""
    from coachdesk.boundary.db.models import UserModel

    user = UserModel(id="coach-uid-2", email="other@example.com", name="Other")
    test_async_db.add(user)
    await test_async_db.flush()
    return user


@pytest.fixture
def make_client(test_async_db):
    """Factory persisting a client for a user."""
    from coachdesk.boundary.db.models import ClientModel

    async def _make(user_id: str, name: str = "Jordan Exec", **fields) -> ClientModel:
        client = ClientModel(user_id=user_id, name=name, **fields)
        test_async_db.add(client)
        await test_async_db.flush()
        return client

    return _make


@pytest.fixture
def make_session(test_async_db):
    """Factory persisting a coaching session for a client."""
    from coachdesk.boundary.db.models import CoachingSessionModel

    async def _make(
        user_id: str,
        client_id: uuid.UUID,
        title: str = "Quarterly check-in",
        date: datetime | None = None,
        **fields,
    ) -> CoachingSessionModel:
        session = CoachingSessionModel(
            user_id=user_id,
            client_id=client_id,
            title=title,
            date=date or datetime(2026, 3, 4, 15, 0, tzinfo=timezone.utc),
            **fields,
        )
        test_async_db.add(session)
        await test_async_db.flush()
        return session

    return _make


@pytest.fixture
async def seeded_tags(test_async_db):
    """Seed the predefined session and resource tags."""
    from coachdesk.boundary.db.seed_tags import seed_tags

    await seed_tags(test_async_db)
    await test_async_db.flush()
