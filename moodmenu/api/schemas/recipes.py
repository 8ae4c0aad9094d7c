from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel
from moodmenu.domain.services.catalog import RecipeFields
from moodmenu.infrastructure.db.models import Mood

__all__ = [
    "MoodsResponse",
    "RecipeDetail",
    "RecipeFields",
    "RecipesResponse",
    "ToggleResponse",
]


class RecipeDetail(BaseModel):
    id: int
    name: str
    mood: Mood
    ingredients: str
    instructions: str
    prep_time: str
    servings: int
    image: str
    visible: bool
    created_at: datetime
    updated_at: datetime


class RecipesResponse(BaseModel):
    recipes: list[RecipeDetail]


class MoodsResponse(BaseModel):
    moods: list[Mood]


class ToggleResponse(BaseModel):
    id: int
    visible: bool
    message: str
