from __future__ import annotations

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.api.deps import get_db_session, get_session_manager
from moodmenu.core.config import get_settings
from moodmenu.domain.services.sessions import RedisSessionStore, SessionManager

router = APIRouter(tags=["Observability"])
logger = structlog.get_logger()


async def check_database(session: AsyncSession) -> dict:
    """Check the database connection."""
    try:
        await session.execute(text("SELECT 1"))
        return {"status": "ok"}
    except Exception as e:
        return {"status": "error", "message": str(e)[:100]}


async def check_session_store(sessions: SessionManager) -> dict:
    """Check the session store; the in-memory store is always available."""
    store = sessions.store
    if not isinstance(store, RedisSessionStore):
        return {"status": "ok", "backend": "memory"}
    try:
        await store.ping()
        return {"status": "ok", "backend": "redis"}
    except Exception as e:
        return {"status": "error", "backend": "redis", "message": str(e)[:100]}


@router.get("/health", summary="Service health probe")
async def health_check(
    session: AsyncSession = Depends(get_db_session),
    sessions: SessionManager = Depends(get_session_manager),
) -> dict:
    """Return basic service and datastore status information."""
    settings = get_settings()

    database_status = await check_database(session)
    session_store_status = await check_session_store(sessions)

    overall_status = "ok"
    if database_status.get("status") != "ok" or session_store_status.get("status") != "ok":
        overall_status = "degraded"

    payload = {
        "service": settings.app_name,
        "version": settings.version,
        "status": overall_status,
        "timestamp": datetime.now(UTC).isoformat(),
        "datastores": {
            "database": database_status,
            "session_store": session_store_status,
        },
    }
    logger.info("health_probe", **payload)
    return payload
