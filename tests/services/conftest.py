"""Service test fixtures — in-memory fakes, async DB, and FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine
    - Each client fixture builds its own app from explicit Settings

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific features not exercised here)
    - bcrypt cost 4: the minimum bcrypt accepts, keeps hashing fast
"""

import pytest
from httpx import ASGITransport, AsyncClient

from blog_api.config import Settings
from blog_api.infrastructure.database import get_db, DatabaseSessionManager
from blog_api.infrastructure.password_hasher import PasswordHasher
from blog_api.infrastructure.token_codec import TokenCodec
from blog_api.main import create_app
import blog_api.infrastructure.database as db_module

from tests.services.fakes import InMemoryAccountRepository, InMemoryPostRepository

TEST_SECRET = "route-test-secret-with-at-least-32-bytes"


# ─── Unit-level collaborators ────────────────────────────────────

@pytest.fixture
def accounts():
    return InMemoryAccountRepository()


@pytest.fixture
def posts(accounts):
    return InMemoryPostRepository(accounts=accounts)


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def codec():
    return TokenCodec(secret=TEST_SECRET)


# ─── Database + HTTP ─────────────────────────────────────────────

@pytest.fixture
def test_settings():
    return Settings(
        jwt_secret_key=TEST_SECRET,
        bcrypt_rounds=4,
        database_url="sqlite+aiosqlite:///:memory:",
    )


@pytest.fixture
def test_app(test_settings):
    return create_app(test_settings)


@pytest.fixture
async def client(test_app, test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    test_app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=test_app), base_url="http://test",
    ) as c:
        yield c

    test_app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Helpers ─────────────────────────────────────────────────────

async def register_and_login(client, email: str, password: str = "secret1") -> str:
    """Register an account over HTTP and return its bearer token."""
    res = await client.post("/register", json={"email": email, "password": password})
    assert res.status_code == 201, res.text
    res = await client.post("/login", json={"email": email, "password": password})
    assert res.status_code == 200, res.text
    return res.json()["data"]["token"]


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def alice_token(client):
    return await register_and_login(client, "alice@blog.io")


@pytest.fixture
async def bob_token(client):
    return await register_and_login(client, "bob@blog.io")
