"""Recipe catalog with soft-delete visibility."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import String, cast, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.infrastructure.db.models import DEFAULT_RECIPE_IMAGE, Mood, RecipeModel

logger = structlog.get_logger()


class CatalogError(Exception):
    """Base exception for catalog errors."""

    pass


class InvalidRecipeError(CatalogError):
    """Raised when recipe fields are missing or out of range."""

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []


class RecipeNotFoundError(CatalogError):
    """Raised when no recipe exists with the requested id."""

    pass


class NoRecipesAvailableError(CatalogError):
    """Raised when a mood has no visible recipes."""

    pass


class RecipeFields(BaseModel):
    """Mutable recipe fields, required in full on create and update."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    mood: Mood
    ingredients: str = Field(..., min_length=1)
    instructions: str = Field(..., min_length=1)
    prep_time: str = Field(..., min_length=1, max_length=64)
    servings: int = Field(..., gt=0)
    image: str | None = Field(None, max_length=32)


def validate_recipe_fields(fields: RecipeFields | Mapping[str, Any]) -> RecipeFields:
    if isinstance(fields, RecipeFields):
        return fields
    try:
        return RecipeFields.model_validate(dict(fields))
    except PydanticValidationError as exc:
        raise InvalidRecipeError(
            "All fields are required",
            errors=exc.errors(include_url=False, include_context=False),
        ) from exc


class RecipeCatalog:
    """Repository for recipes."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def list_all(self) -> list[RecipeModel]:
        """Every recipe regardless of visibility, by mood name then recipe name."""
        stmt = (
            select(RecipeModel)
            .order_by(cast(RecipeModel.mood, String), RecipeModel.name)
            .execution_options(populate_existing=True)
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def list_visible(self, mood: Mood) -> list[RecipeModel]:
        stmt = (
            select(RecipeModel)
            .where(RecipeModel.mood == mood, RecipeModel.visible.is_(True))
            .order_by(RecipeModel.name, RecipeModel.id)
            .execution_options(populate_existing=True)
        )
        return list((await self.session.execute(stmt)).scalars().all())

    async def list_moods(self) -> list[Mood]:
        """Moods that currently have at least one visible recipe."""
        stmt = select(RecipeModel.mood).where(RecipeModel.visible.is_(True)).distinct()
        moods = (await self.session.execute(stmt)).scalars().all()
        return sorted(moods, key=lambda mood: mood.value)

    async def get(self, recipe_id: int) -> RecipeModel:
        recipe = await self.session.get(RecipeModel, recipe_id, populate_existing=True)
        if recipe is None:
            raise RecipeNotFoundError(f"Recipe {recipe_id} not found")
        return recipe

    async def create(self, fields: RecipeFields | Mapping[str, Any]) -> RecipeModel:
        data = validate_recipe_fields(fields)
        recipe = RecipeModel(
            name=data.name,
            mood=data.mood,
            ingredients=data.ingredients,
            instructions=data.instructions,
            prep_time=data.prep_time,
            servings=data.servings,
            image=data.image or DEFAULT_RECIPE_IMAGE,
            visible=True,
        )
        self.session.add(recipe)
        await self.session.commit()
        await self.session.refresh(recipe)

        logger.info("recipe_created", recipe_id=recipe.id, mood=recipe.mood.value)
        return recipe

    async def update(self, recipe_id: int, fields: RecipeFields | Mapping[str, Any]) -> RecipeModel:
        """Replace every mutable field; visibility is left untouched."""
        data = validate_recipe_fields(fields)
        recipe = await self.get(recipe_id)

        recipe.name = data.name
        recipe.mood = data.mood
        recipe.ingredients = data.ingredients
        recipe.instructions = data.instructions
        recipe.prep_time = data.prep_time
        recipe.servings = data.servings
        recipe.image = data.image or DEFAULT_RECIPE_IMAGE

        await self.session.commit()
        await self.session.refresh(recipe)

        logger.info("recipe_updated", recipe_id=recipe.id, mood=recipe.mood.value)
        return recipe

    async def toggle_visibility(self, recipe_id: int) -> bool:
        """Flip ``visible`` in one UPDATE and return the committed value."""
        stmt = (
            update(RecipeModel)
            .where(RecipeModel.id == recipe_id)
            .values(visible=~RecipeModel.visible)
            .returning(RecipeModel.visible)
            .execution_options(synchronize_session=False)
        )
        visible = (await self.session.execute(stmt)).scalar_one_or_none()
        if visible is None:
            await self.session.rollback()
            raise RecipeNotFoundError(f"Recipe {recipe_id} not found")
        await self.session.commit()

        logger.info("recipe_visibility_toggled", recipe_id=recipe_id, visible=bool(visible))
        return bool(visible)
