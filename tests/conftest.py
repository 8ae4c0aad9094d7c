from __future__ import annotations

import os

# Cheap bcrypt rounds and an in-process session store for the whole test run
os.environ.setdefault("PASSWORD_HASH_ROUNDS", "4")
os.environ.setdefault("SESSION_BACKEND", "memory")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

from collections.abc import AsyncIterator, Iterator
from datetime import timedelta
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from moodmenu.api.deps import get_db_session, get_session_manager
from moodmenu.api.main import app
from moodmenu.core.auth import Role
from moodmenu.domain.services.auth_service import AuthService
from moodmenu.domain.services.sessions import InMemorySessionStore, SessionManager
from moodmenu.infrastructure.db.base import Base
from moodmenu.infrastructure.db.models import UserModel


@pytest.fixture()
async def engine(tmp_path: Path) -> AsyncIterator[AsyncEngine]:
    # File-backed so concurrent sessions get their own connections
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}", future=True)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture()
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False)


@pytest.fixture()
async def db(session_factory: async_sessionmaker[AsyncSession]) -> AsyncIterator[AsyncSession]:
    """Provide a database session for tests that need direct DB access."""
    async with session_factory() as session:
        yield session


@pytest.fixture()
def session_manager() -> SessionManager:
    return SessionManager(InMemorySessionStore(), ttl=timedelta(hours=24))


@pytest.fixture()
def app_overrides(
    session_factory: async_sessionmaker[AsyncSession], session_manager: SessionManager
) -> Iterator[None]:
    async def override_db_session() -> AsyncIterator[AsyncSession]:
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_session_manager] = lambda: session_manager
    yield
    app.dependency_overrides.pop(get_db_session, None)
    app.dependency_overrides.pop(get_session_manager, None)


@pytest.fixture()
async def async_client(app_overrides: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for testing async routes."""
    transport = ASGITransport(app=app)  # type: ignore
    async with AsyncClient(transport=transport, base_url="http://testserver") as client:
        yield client


@pytest.fixture()
async def standard_user(db: AsyncSession) -> UserModel:
    return await AuthService(db).create_user(email="user@example.com", password="userpass", role=Role.USER)


@pytest.fixture()
async def admin_user(db: AsyncSession) -> UserModel:
    return await AuthService(db).create_user(email="admin@example.com", password="adminpass", role=Role.ADMIN)


@pytest.fixture()
async def user_token(session_manager: SessionManager, standard_user: UserModel) -> str:
    """Session token for a standard user."""
    return (await session_manager.begin(standard_user)).token


@pytest.fixture()
async def admin_token(session_manager: SessionManager, admin_user: UserModel) -> str:
    """Session token for an admin user."""
    return (await session_manager.begin(admin_user)).token
