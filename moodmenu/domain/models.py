from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from moodmenu.core.auth import Role


@dataclass(slots=True, frozen=True)
class SessionRecord:
    """Server-held association between a session token and an authenticated user.

    ``email`` and ``role`` are snapshots taken at login; later changes to the
    user row are picked up on the next login.
    """

    token: str
    user_id: str
    email: str
    role: Role
    created_at: datetime
    expires_at: datetime

    @property
    def is_elevated(self) -> bool:
        return self.role.is_elevated

    def is_expired(self, now: datetime) -> bool:
        return now >= self.expires_at
