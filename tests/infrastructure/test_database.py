"""Database Session Manager — rollback, readiness, lifecycle.

Tests cover:
    - an exception inside session() rolls back and propagates unchanged
    - health_check reports a reachable database
    - init_db/close_db set and clear the module-level manager
"""

import pytest
from sqlalchemy import func, select

import blog_api.infrastructure.database as db_module
from blog_api.db.base import Base
from blog_api.infrastructure.database import DatabaseSessionManager
from blog_api.models.account import Account


@pytest.fixture
async def manager(tmp_path):
    manager = DatabaseSessionManager(
        f"sqlite+aiosqlite:///{tmp_path / 'blog.db'}", pool_size=2, max_overflow=0,
    )
    async with manager.engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.dispose()


async def test_failed_request_rolls_back(manager):
    with pytest.raises(RuntimeError, match="boom"):
        async with manager.session() as db:
            db.add(Account(email="a@blog.io", password_hash="x"))
            await db.flush()
            raise RuntimeError("boom")

    async with manager.session() as db:
        count = await db.scalar(select(func.count()).select_from(Account))
    assert count == 0


async def test_health_check(manager):
    assert await manager.health_check() is True


async def test_init_and_close(tmp_path, monkeypatch):
    monkeypatch.setattr(db_module, "db_manager", None)

    db_module.init_db(f"sqlite+aiosqlite:///{tmp_path / 'life.db'}")
    assert isinstance(db_module.db_manager, DatabaseSessionManager)

    await db_module.close_db()
    assert db_module.db_manager is None
