"""Server-side session management.

Sessions live in a ``SessionStore``; the manager owns token issuance and the
absolute-expiry policy, stores own concurrency-safe persistence.
"""

from __future__ import annotations

import heapq
import json
import threading
from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from typing import Any, Protocol

import structlog
from moodmenu.core.auth import Role, new_session_token
from moodmenu.core.config import Settings
from moodmenu.core.logging import token_fingerprint
from moodmenu.domain.models import SessionRecord
from moodmenu.infrastructure.db.models import UserModel

logger = structlog.get_logger()

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(UTC)


class SessionStore(Protocol):
    async def save(self, record: SessionRecord) -> None: ...

    async def load(self, token: str) -> SessionRecord | None: ...

    async def delete(self, token: str) -> None: ...


class InMemorySessionStore:
    """Process-local session map guarded by a lock.

    Every ``save`` evicts the entries that expired at or before the new
    record's creation time, so abandoned sessions do not pile up.
    """

    def __init__(self) -> None:
        self._records: dict[str, SessionRecord] = {}
        self._expiry_heap: list[tuple[datetime, str]] = []
        self._lock = threading.Lock()

    async def save(self, record: SessionRecord) -> None:
        with self._lock:
            self._evict_expired(record.created_at)
            self._records[record.token] = record
            heapq.heappush(self._expiry_heap, (record.expires_at, record.token))

    def _evict_expired(self, now: datetime) -> None:
        # Caller holds the lock. Heap entries of ended sessions are skipped.
        while self._expiry_heap and self._expiry_heap[0][0] <= now:
            expires_at, token = heapq.heappop(self._expiry_heap)
            current = self._records.get(token)
            if current is not None and current.expires_at == expires_at:
                del self._records[token]

    async def load(self, token: str) -> SessionRecord | None:
        with self._lock:
            return self._records.get(token)

    async def delete(self, token: str) -> None:
        with self._lock:
            self._records.pop(token, None)

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


class RedisSessionStore:
    """Session store backed by Redis; keys expire with the session."""

    key_prefix = "session:"

    def __init__(self, client: Any) -> None:
        self._client = client

    @classmethod
    def from_url(cls, url: str) -> RedisSessionStore:
        import redis.asyncio as aioredis

        return cls(aioredis.from_url(url, decode_responses=True))

    def _key(self, token: str) -> str:
        return f"{self.key_prefix}{token}"

    async def save(self, record: SessionRecord) -> None:
        ttl = max(int((record.expires_at - record.created_at).total_seconds()), 1)
        await self._client.set(self._key(record.token), _dump_record(record), ex=ttl)

    async def load(self, token: str) -> SessionRecord | None:
        raw = await self._client.get(self._key(token))
        if raw is None:
            return None
        return _load_record(token, raw)

    async def delete(self, token: str) -> None:
        await self._client.delete(self._key(token))

    async def ping(self) -> bool:
        return bool(await self._client.ping())

    async def close(self) -> None:
        await self._client.aclose()


def _dump_record(record: SessionRecord) -> str:
    return json.dumps(
        {
            "user_id": record.user_id,
            "email": record.email,
            "role": record.role.value,
            "created_at": record.created_at.isoformat(),
            "expires_at": record.expires_at.isoformat(),
        }
    )


def _load_record(token: str, raw: str | bytes) -> SessionRecord:
    data = json.loads(raw)
    return SessionRecord(
        token=token,
        user_id=data["user_id"],
        email=data["email"],
        role=Role(data["role"]),
        created_at=datetime.fromisoformat(data["created_at"]),
        expires_at=datetime.fromisoformat(data["expires_at"]),
    )


class SessionManager:
    """Issues, resolves and ends sessions with a fixed, non-sliding lifetime."""

    def __init__(
        self,
        store: SessionStore,
        *,
        ttl: timedelta,
        clock: Clock = utcnow,
    ) -> None:
        self.store = store
        self.ttl = ttl
        self._clock = clock

    async def begin(self, user: UserModel) -> SessionRecord:
        now = self._clock()
        record = SessionRecord(
            token=new_session_token(),
            user_id=user.id,
            email=user.email,
            role=user.role,
            created_at=now,
            expires_at=now + self.ttl,
        )
        await self.store.save(record)
        logger.info(
            "session_started",
            user_id=user.id,
            role=user.role.value,
            session=token_fingerprint(record.token),
            expires_at=record.expires_at.isoformat(),
        )
        return record

    async def resolve(self, token: str | None) -> SessionRecord | None:
        if not token:
            return None

        record = await self.store.load(token)
        if record is None:
            return None

        if record.is_expired(self._clock()):
            await self.store.delete(token)
            logger.info("session_expired", session=token_fingerprint(token), user_id=record.user_id)
            return None
        return record

    async def end(self, token: str | None) -> None:
        if not token:
            return
        await self.store.delete(token)
        logger.info("session_ended", session=token_fingerprint(token))


def build_session_store(settings: Settings) -> SessionStore:
    """Create the session store selected by ``SESSION_BACKEND``."""
    backend = settings.session_backend.lower()
    if backend == "memory":
        return InMemorySessionStore()
    if backend == "redis":
        return RedisSessionStore.from_url(settings.redis_url)
    raise ValueError(f"Unsupported session backend: {settings.session_backend}")


def build_session_manager(settings: Settings) -> SessionManager:
    return SessionManager(
        build_session_store(settings),
        ttl=timedelta(seconds=settings.session_ttl_seconds),
    )
