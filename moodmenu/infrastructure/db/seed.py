from __future__ import annotations

import structlog
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.core.auth import Role
from moodmenu.domain.reference_data import DEFAULT_USERS, RECIPES
from moodmenu.domain.services.auth_service import AuthService, UserExistsError
from moodmenu.domain.services.catalog import RecipeCatalog
from moodmenu.infrastructure.db.models import RecipeModel, UserModel

logger = structlog.get_logger()


async def seed_reference_data(session: AsyncSession, *, include_recipes: bool = True) -> dict[str, int]:
    """Insert default accounts and the starter recipe set into empty tables."""
    created = {"users": 0, "recipes": 0}

    auth = AuthService(session)
    for account in DEFAULT_USERS:
        exists = await session.scalar(select(UserModel.id).where(UserModel.email == account["email"]))
        if exists:
            continue
        try:
            await auth.create_user(
                email=account["email"],
                password=account["password"],
                role=Role(account["role"]),
            )
        except UserExistsError:
            continue
        created["users"] += 1

    if include_recipes:
        has_recipes = await session.scalar(select(RecipeModel.id).limit(1))
        if not has_recipes:
            catalog = RecipeCatalog(session)
            for recipe in RECIPES:
                await catalog.create(recipe)
                created["recipes"] += 1

    logger.info("reference_data_seeded", **created)
    return created
