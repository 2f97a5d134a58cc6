"""
Shared test fixtures for the LiveBoard test suite.

The store is process-wide and in-memory, so every test starts from an
empty one. Socket emits are captured with an AsyncMock instead of going
out over the wire.
"""

import os
import sys
from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest

# Ensure project root is importable
ROOT_DIR = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if ROOT_DIR not in sys.path:
    sys.path.insert(0, ROOT_DIR)

# Override environment BEFORE importing application modules
os.environ["JWT_SECRET"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SEED_SAMPLE_DATA"] = "false"
os.environ["CORS_ORIGINS"] = "*"
os.environ["LOG_LEVEL"] = "WARNING"

from httpx import ASGITransport, AsyncClient

from liveboard.core.security import create_access_token, get_password_hash
from liveboard.db.store import new_id, store
from liveboard.main import app
from liveboard.models.user import User
from liveboard.realtime.server import sio

ADMIN_PASSWORD = "adminpass123"
USER_PASSWORD = "userpass123"


@pytest.fixture(autouse=True)
def clean_store():
    """Empty every repository before and after each test."""
    store.clear()
    yield
    store.clear()


@pytest.fixture(autouse=True)
def socket_emit(monkeypatch) -> AsyncMock:
    """Capture everything the shared Socket.IO server would broadcast."""
    emit = AsyncMock()
    monkeypatch.setattr(sio, "emit", emit)
    return emit


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient, None]:
    """Return a httpx AsyncClient wired to the app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


# ── Users / tokens ──────────────────────────────────────────────────
def _make_user(username: str, role: str, password: str) -> User:
    user = User(
        id=new_id(),
        username=username,
        email=f"{username}@liveboard.test",
        hashed_password=get_password_hash(password),
        first_name=username.title(),
        role=role,
    )
    store.users.put(user.id, user)
    return user


@pytest.fixture
def admin_user() -> User:
    return _make_user("admin", "admin", ADMIN_PASSWORD)


@pytest.fixture
def viewer_user() -> User:
    return _make_user("viewer", "viewer", USER_PASSWORD)


@pytest.fixture
def auth_headers(admin_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(admin_user)}"}


@pytest.fixture
def viewer_headers(viewer_user: User) -> dict[str, str]:
    return {"Authorization": f"Bearer {create_access_token(viewer_user)}"}


def calls_for(emit: AsyncMock, event: str) -> list[tuple[dict, dict]]:
    """(payload, kwargs) for every captured emit of *event*.

    The payload may arrive positionally or as ``data=``.
    """
    found = []
    for c in emit.call_args_list:
        if not c.args or c.args[0] != event:
            continue
        payload = c.args[1] if len(c.args) > 1 else c.kwargs.get("data")
        found.append((payload, c.kwargs))
    return found


@pytest.fixture
def emitted(socket_emit: AsyncMock):
    """Lookup of captured broadcasts: ``emitted(event)`` -> [(payload, kwargs)]."""
    return lambda event: calls_for(socket_emit, event)
