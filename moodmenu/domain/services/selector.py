from __future__ import annotations

import random

import structlog
from moodmenu.domain.services.catalog import NoRecipesAvailableError, RecipeCatalog
from moodmenu.infrastructure.db.models import Mood, RecipeModel

logger = structlog.get_logger()

_system_random = random.SystemRandom()


class RecipeSelector:
    """Picks one visible recipe for a mood with uniform probability."""

    def __init__(self, catalog: RecipeCatalog, rng: random.Random | None = None) -> None:
        self.catalog = catalog
        self.rng = rng or _system_random

    async def pick(self, mood: Mood) -> RecipeModel:
        candidates = await self.catalog.list_visible(mood)
        if not candidates:
            raise NoRecipesAvailableError(f"No recipes found for mood '{mood.value}'")

        chosen = candidates[self.rng.randrange(len(candidates))]
        logger.debug(
            "recipe_selected",
            mood=mood.value,
            recipe_id=chosen.id,
            candidates=len(candidates),
        )
        return chosen
