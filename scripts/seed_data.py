#!/usr/bin/env python3
"""
Seed default accounts and the starter recipe set.

Run after migrations:
    alembic upgrade head
    python scripts/seed_data.py
"""

from __future__ import annotations

import sys
from pathlib import Path

# Make the moodmenu package importable when run from any directory
sys.path.insert(0, str(Path(__file__).parent.parent))

import asyncio

from moodmenu.core.logging import setup_logging
from moodmenu.infrastructure.db.seed import seed_reference_data
from moodmenu.infrastructure.db.session import dispose_engine, get_session_factory


async def main() -> None:
    setup_logging()
    async with get_session_factory()() as session:
        created = await seed_reference_data(session)
    await dispose_engine()
    print(f"Created {created['users']} user(s) and {created['recipes']} recipe(s)")


if __name__ == "__main__":
    asyncio.run(main())
