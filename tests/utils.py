from __future__ import annotations

from datetime import datetime, timedelta
from typing import Any

from moodmenu.core.config import get_settings


def session_cookie(token: str) -> dict[str, str]:
    """Cookie header carrying a session token."""
    return {"Cookie": f"{get_settings().session_cookie_name}={token}"}


def recipe_payload(**overrides: Any) -> dict[str, Any]:
    payload: dict[str, Any] = {
        "name": "Test Recipe",
        "mood": "happy",
        "ingredients": "Flour, Water, Salt",
        "instructions": "1. Mix. 2. Bake.",
        "prep_time": "30 minutes",
        "servings": 4,
        "image": "🍞",
    }
    payload.update(overrides)
    return payload


class FakeClock:
    """Controllable clock for session expiry tests."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta
