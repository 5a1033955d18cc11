"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB through DatabaseSessionManager,
      so SQLAlchemy errors are mapped exactly as in production
    - db_manager patched so the readiness check sees the test DB
    - Staff account passwords hashed with few PBKDF2 iterations

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (JSON columns and generic Uuid keep the models portable)
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

import mentorship.infrastructure.database as db_module
from mentorship.db.base import Base
from mentorship.infrastructure.database import DatabaseSessionManager, get_db
from mentorship.infrastructure.passwords import hash_password
from mentorship.main import app
import mentorship.models  # noqa: F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def fake_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(fake_manager):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with fake_manager.session() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(
        "mentorship.api.routes.staff.hash_password",
        lambda password: hash_password(password, iterations=1_000),
    )


@pytest.fixture
def mentee_payload():
    return {
        "first_name": "Jane",
        "last_name": "Student",
        "email": "jane.student@example.com",
        "phone": "+1-473-555-0101",
        "program_start_date": "2024-09-01",
        "goals": ["Launch a small business"],
    }


@pytest.fixture
def staff_payload():
    return {
        "first_name": "John",
        "last_name": "Mentor",
        "email": "john.mentor@mentorship.com",
        "role": "mentor",
        "department": "Business Development",
        "skills": ["Business Strategy"],
    }
