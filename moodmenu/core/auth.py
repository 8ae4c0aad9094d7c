from __future__ import annotations

import secrets
from enum import Enum


class Role(str, Enum):
    USER = "user"
    ADMIN = "admin"

    @property
    def is_elevated(self) -> bool:
        return self in ELEVATED_ROLES


ELEVATED_ROLES: frozenset[Role] = frozenset({Role.ADMIN})

SESSION_TOKEN_BYTES = 32


def new_session_token() -> str:
    """Generate an unpredictable, URL-safe session token."""
    return secrets.token_urlsafe(SESSION_TOKEN_BYTES)
