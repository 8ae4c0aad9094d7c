"""Admin routes - recipe catalog and user roster management."""

from __future__ import annotations

import structlog
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession
from moodmenu.api.deps import get_db_session, require_elevated
from moodmenu.api.routes.recipes import to_recipe_detail
from moodmenu.api.schemas.auth import CreateUserRequest, UserResponse, UsersResponse
from moodmenu.api.schemas.recipes import (
    RecipeDetail,
    RecipeFields,
    RecipesResponse,
    ToggleResponse,
)
from moodmenu.domain import SessionRecord
from moodmenu.domain.services import (
    AuthService,
    RecipeCatalog,
    RecipeNotFoundError,
    UserExistsError,
)
from moodmenu.infrastructure.db.models import UserModel

router = APIRouter(
    prefix="/api/admin",
    tags=["Admin"],
    dependencies=[Depends(require_elevated)],
)
logger = structlog.get_logger()


def to_user_response(user: UserModel) -> UserResponse:
    return UserResponse(
        id=user.id,
        email=user.email,
        role=user.role,
        is_admin=user.role.is_elevated,
        created_at=user.created_at,
    )


@router.get("/recipes", response_model=RecipesResponse)
async def list_all_recipes(session: AsyncSession = Depends(get_db_session)) -> RecipesResponse:
    """Return every recipe, hidden ones included (admin-only)."""
    recipes = await RecipeCatalog(session).list_all()
    return RecipesResponse(recipes=[to_recipe_detail(recipe) for recipe in recipes])


@router.post("/recipes", response_model=RecipeDetail)
async def create_recipe(
    payload: RecipeFields,
    session: AsyncSession = Depends(get_db_session),
    admin: SessionRecord = Depends(require_elevated),
) -> RecipeDetail:
    """Create a new, visible recipe (admin-only)."""
    recipe = await RecipeCatalog(session).create(payload)
    logger.info("admin_recipe_created", recipe_id=recipe.id, admin_user=admin.user_id)
    return to_recipe_detail(recipe)


@router.put("/recipes/{recipe_id}", response_model=RecipeDetail)
async def update_recipe(
    recipe_id: int,
    payload: RecipeFields,
    session: AsyncSession = Depends(get_db_session),
    admin: SessionRecord = Depends(require_elevated),
) -> RecipeDetail:
    """Replace a recipe's fields (admin-only)."""
    try:
        recipe = await RecipeCatalog(session).update(recipe_id, payload)
    except RecipeNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Recipe not found",
        ) from exc

    logger.info("admin_recipe_updated", recipe_id=recipe.id, admin_user=admin.user_id)
    return to_recipe_detail(recipe)


@router.patch("/recipes/{recipe_id}/toggle", response_model=ToggleResponse)
async def toggle_recipe(
    recipe_id: int,
    session: AsyncSession = Depends(get_db_session),
    admin: SessionRecord = Depends(require_elevated),
) -> ToggleResponse:
    """Show or hide a recipe (admin-only)."""
    try:
        visible = await RecipeCatalog(session).toggle_visibility(recipe_id)
    except RecipeNotFoundError as exc:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Recipe not found",
        ) from exc

    logger.info(
        "admin_recipe_toggled",
        recipe_id=recipe_id,
        visible=visible,
        admin_user=admin.user_id,
    )
    return ToggleResponse(
        id=recipe_id,
        visible=visible,
        message=f"Recipe {'activated' if visible else 'deactivated'} successfully",
    )


@router.post("/users", response_model=UserResponse)
async def create_user(
    payload: CreateUserRequest,
    session: AsyncSession = Depends(get_db_session),
    admin: SessionRecord = Depends(require_elevated),
) -> UserResponse:
    """Create a user account (admin-only)."""
    service = AuthService(session)

    try:
        user = await service.create_user(
            email=payload.email,
            password=payload.password,
            role=payload.role,
        )
    except UserExistsError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User with this email already exists",
        ) from exc

    logger.info("admin_user_created", user_id=user.id, admin_user=admin.user_id)
    return to_user_response(user)


@router.get("/users", response_model=UsersResponse)
async def list_users(session: AsyncSession = Depends(get_db_session)) -> UsersResponse:
    """List user accounts without credentials (admin-only)."""
    users = await AuthService(session).list_users()
    return UsersResponse(users=[to_user_response(user) for user in users])
