"""Shared pytest fixtures: one in-memory SQLite store handle per test."""

import logging
import os
import tempfile

# settings are read at import time, so the environment goes first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["SECRET_KEY"] = "test-secret-key"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="fesnotes-test-logs-")
os.environ["FESNOTES_SKIP_LIFESPAN_DB"] = "1"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from fesnotes.core.repositories import NoteRepository, ShareRepository, UserRepository  # noqa: E402
from fesnotes.database import Database  # noqa: E402
from fesnotes.main import create_app  # noqa: E402
from fesnotes.security import create_access_token, hash_password  # noqa: E402

# Silence extremely verbose DEBUG logs from aiosqlite to keep test output readable
logging.getLogger("aiosqlite").setLevel(logging.WARNING)


@pytest.fixture
async def db():
    """Fresh in-memory database with the schema created."""
    database = Database(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,  # keep the same memory DB across connections
        connect_args={"check_same_thread": False},
    )
    await database.create_tables()
    try:
        yield database
    finally:
        await database.dispose()


@pytest.fixture
async def test_session(db):
    """Session for direct repository/service tests."""
    async with db.session_factory() as session:
        yield session


@pytest.fixture
def test_app(db):
    """App wired to the test store handle (Redis left disconnected)."""
    return create_app(database=db)


@pytest.fixture
async def client(test_app):
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as ac:
        yield ac


@pytest.fixture
def register(client):
    """Register a user over the API; returns (auth headers, public user)."""

    async def _register(username: str, email: str = None, password: str = "secret1"):
        response = await client.post(
            "/api/auth/register",
            json={
                "username": username,
                "email": email or f"{username}@example.com",
                "password": password,
            },
        )
        assert response.status_code == 201, response.text
        body = response.json()
        return {"Authorization": f"Bearer {body['token']}"}, body["user"]

    return _register


@pytest.fixture
def make_user(test_session):
    """Insert a user straight through the repository."""

    async def _make_user(username: str, password: str = "secret1"):
        return await UserRepository(test_session).create_user(
            {
                "username": username,
                "email": f"{username}@example.com",
                "password_hash": hash_password(password),
            }
        )

    return _make_user


@pytest.fixture
def make_note(test_session):
    async def _make_note(owner, title: str = "Title", content: str = "Content", **extra):
        return await NoteRepository(test_session).create_note(
            {"title": title, "content": content, "owner_id": owner.id, **extra}
        )

    return _make_note


@pytest.fixture
def make_share(test_session):
    async def _make_share(note, grantee, permission: str = "read"):
        share, _ = await ShareRepository(test_session).upsert_grant(
            note.id, note.owner_id, grantee.id, permission
        )
        return share

    return _make_share


@pytest.fixture
def auth_headers():
    """Bearer headers for a user created outside the API."""

    def _headers(user) -> dict:
        return {"Authorization": f"Bearer {create_access_token(user.id, user.email)}"}

    return _headers
