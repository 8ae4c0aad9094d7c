#!/usr/bin/env python3
"""
Create an admin account from the command line.

    python scripts/create_admin.py admin@example.com
"""

from __future__ import annotations

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

import argparse
import asyncio
import getpass

from moodmenu.core.auth import Role
from moodmenu.core.logging import setup_logging
from moodmenu.domain.services.auth_service import AuthService, UserExistsError
from moodmenu.infrastructure.db.session import dispose_engine, get_session_factory


async def create_admin(email: str, password: str) -> int:
    try:
        async with get_session_factory()() as session:
            user = await AuthService(session).create_user(
                email=email, password=password, role=Role.ADMIN
            )
    except UserExistsError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    finally:
        await dispose_engine()
    print(f"Created admin {user.email} ({user.id})")
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("email")
    args = parser.parse_args()

    setup_logging()
    password = getpass.getpass("Password: ")
    if not password:
        parser.error("password must not be empty")
    sys.exit(asyncio.run(create_admin(args.email, password)))


if __name__ == "__main__":
    main()
