from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.api.deps import get_db_session, require_authenticated
from moodmenu.api.schemas.recipes import MoodsResponse, RecipeDetail, RecipesResponse
from moodmenu.domain.services import NoRecipesAvailableError, RecipeCatalog, RecipeSelector
from moodmenu.infrastructure.db.models import Mood, RecipeModel

router = APIRouter(
    prefix="/api",
    tags=["Recipes"],
    dependencies=[Depends(require_authenticated)],
)
logger = structlog.get_logger()


def to_recipe_detail(recipe: RecipeModel) -> RecipeDetail:
    return RecipeDetail(
        id=recipe.id,
        name=recipe.name,
        mood=recipe.mood,
        ingredients=recipe.ingredients,
        instructions=recipe.instructions,
        prep_time=recipe.prep_time,
        servings=recipe.servings,
        image=recipe.image,
        visible=recipe.visible,
        created_at=recipe.created_at,
        updated_at=recipe.updated_at,
    )


@router.get("/moods", response_model=MoodsResponse)
async def list_moods(session: AsyncSession = Depends(get_db_session)) -> MoodsResponse:
    """Return moods that have at least one visible recipe."""
    moods = await RecipeCatalog(session).list_moods()
    return MoodsResponse(moods=moods)


@router.get("/recipes", response_model=RecipesResponse)
async def list_visible_recipes(
    mood: Mood = Query(..., description="Mood to filter by"),
    session: AsyncSession = Depends(get_db_session),
) -> RecipesResponse:
    """Return the visible recipes for a mood."""
    recipes = await RecipeCatalog(session).list_visible(mood)
    return RecipesResponse(recipes=[to_recipe_detail(recipe) for recipe in recipes])


@router.get("/recipes/{mood}", response_model=RecipeDetail)
async def random_recipe(
    mood: str,
    session: AsyncSession = Depends(get_db_session),
) -> RecipeDetail:
    """Return one visible recipe for the mood, chosen uniformly at random."""
    no_recipes = HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="No recipes found for this mood",
    )
    try:
        wanted = Mood(mood)
    except ValueError as exc:
        raise no_recipes from exc

    selector = RecipeSelector(RecipeCatalog(session))
    try:
        recipe = await selector.pick(wanted)
    except NoRecipesAvailableError as exc:
        raise no_recipes from exc

    return to_recipe_detail(recipe)
