from __future__ import annotations

from collections.abc import AsyncIterator

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession
from structlog.contextvars import bind_contextvars
from moodmenu.core.config import get_settings
from moodmenu.domain import SessionRecord
from moodmenu.domain.services.sessions import SessionManager
from moodmenu.infrastructure.db.session import get_session


def get_session_manager(request: Request) -> SessionManager:
    """Return the process-wide session manager attached to the application."""
    return request.app.state.session_manager


def get_session_token(request: Request) -> str | None:
    """Read the session token from the session cookie."""
    return request.cookies.get(get_settings().session_cookie_name)


async def get_current_session(
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),  # noqa: B008
) -> SessionRecord | None:
    """Resolve the caller's session, or ``None`` for anonymous/expired callers."""
    return await sessions.resolve(token)


async def require_authenticated(
    current: SessionRecord | None = Depends(get_current_session),  # noqa: B008
) -> SessionRecord:
    """Reject callers without a live session."""
    if current is None:
        raise _unauthorized("Unauthorized")

    bind_contextvars(user_id=current.user_id, role=current.role.value)
    return current


async def require_elevated(
    current: SessionRecord = Depends(require_authenticated),  # noqa: B008
) -> SessionRecord:
    """Reject authenticated callers whose role is not elevated."""
    if not current.is_elevated:
        raise _forbidden("Forbidden - Admin access required")
    return current


async def get_db_session() -> AsyncIterator[AsyncSession]:
    """Provide an async SQLAlchemy session for API handlers."""
    async for session in get_session():
        yield session


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=detail)


def _forbidden(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
