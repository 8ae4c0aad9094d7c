"""Authentication routes - login, logout, session status."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.api.deps import (
    get_current_session,
    get_db_session,
    get_session_manager,
    get_session_token,
)
from moodmenu.api.schemas.auth import (
    AuthStatusResponse,
    LoginRequest,
    LoginResponse,
    LogoutResponse,
)
from moodmenu.core.config import get_settings
from moodmenu.domain import SessionRecord
from moodmenu.domain.services import AuthService, InvalidCredentialsError, SessionManager

logger = structlog.get_logger()
router = APIRouter(prefix="/api", tags=["authentication"])


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="User login",
    description="Verify email and password, start a session and set the session cookie.",
)
async def login(
    payload: LoginRequest,
    response: Response,
    session: AsyncSession = Depends(get_db_session),
    sessions: SessionManager = Depends(get_session_manager),
    previous_token: str | None = Depends(get_session_token),
) -> LoginResponse:
    """Authenticate user and issue a session cookie, replacing any prior session."""
    service = AuthService(session)
    await logger.ainfo("login_attempt", email=payload.email)

    try:
        user = await service.verify_credentials(email=payload.email, password=payload.password)
    except InvalidCredentialsError as exc:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=str(exc),
        ) from exc

    # A login replaces the caller's current session
    await sessions.end(previous_token)
    record = await sessions.begin(user)

    settings = get_settings()
    response.set_cookie(
        key=settings.session_cookie_name,
        value=record.token,
        max_age=settings.session_ttl_seconds,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )

    await logger.ainfo("login_success", user_id=user.id, email=user.email, role=user.role.value)
    return LoginResponse(email=user.email, role=user.role, is_admin=user.role.is_elevated)


@router.post("/logout", response_model=LogoutResponse, summary="User logout")
async def logout(
    response: Response,
    token: str | None = Depends(get_session_token),
    sessions: SessionManager = Depends(get_session_manager),
) -> LogoutResponse:
    """End the caller's session; succeeds even without one."""
    await sessions.end(token)

    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        httponly=True,
        samesite="lax",
        secure=settings.session_cookie_secure,
    )
    return LogoutResponse()


@router.get("/auth/status", response_model=AuthStatusResponse, summary="Session status")
async def auth_status(
    current: SessionRecord | None = Depends(get_current_session),
) -> AuthStatusResponse:
    """Report whether the caller holds a live session."""
    if current is None:
        return AuthStatusResponse(authenticated=False)

    return AuthStatusResponse(
        authenticated=True,
        email=current.email,
        role=current.role,
        is_admin=current.is_elevated,
    )
