"""Integration tests for application-level error handlers."""

from __future__ import annotations

from collections.abc import AsyncIterator
from typing import Any

from fastapi import status
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from moodmenu.api.deps import get_db_session
from moodmenu.api.main import app
from tests.utils import session_cookie


class FailingSession:
    """Session stand-in whose every statement fails like an unreachable database."""

    async def execute(self, *args: Any, **kwargs: Any) -> Any:
        raise OperationalError("SELECT 1", {}, Exception("connection refused to db.internal:5432"))

    async def scalar(self, *args: Any, **kwargs: Any) -> Any:
        return await self.execute(*args, **kwargs)

    async def get(self, *args: Any, **kwargs: Any) -> Any:
        return await self.execute(*args, **kwargs)

    async def rollback(self) -> None:
        return None


async def failing_db_session() -> AsyncIterator[FailingSession]:
    yield FailingSession()


async def test_storage_failure_returns_generic_500(
    async_client: AsyncClient, admin_token: str
) -> None:
    app.dependency_overrides[get_db_session] = failing_db_session

    response = await async_client.get("/api/admin/recipes", headers=session_cookie(admin_token))

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal storage error"}
    assert "db.internal" not in response.text
    assert "SELECT" not in response.text


async def test_storage_failure_during_login_returns_generic_500(async_client: AsyncClient) -> None:
    app.dependency_overrides[get_db_session] = failing_db_session

    response = await async_client.post("/api/login", json={"email": "a@x.com", "password": "pw"})

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal storage error"}
