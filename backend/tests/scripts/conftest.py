"""Script test fixtures — a real DatabaseSessionManager on in-memory SQLite."""

import pytest

from mentorship.db.base import Base
from mentorship.infrastructure.database import DatabaseSessionManager
from mentorship.infrastructure.passwords import hash_password
import mentorship.models  # noqa: F401


@pytest.fixture
async def manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture(autouse=True)
def fast_hashing(monkeypatch):
    monkeypatch.setattr(
        "mentorship.scripts.create_admin.hash_password",
        lambda password: hash_password(password, iterations=1_000),
    )
