"""Unit tests for the recipe catalog."""

from __future__ import annotations

import asyncio

import pytest
from pydantic import ValidationError
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from moodmenu.domain.services.catalog import (
    InvalidRecipeError,
    RecipeCatalog,
    RecipeFields,
    RecipeNotFoundError,
)
from moodmenu.infrastructure.db.models import DEFAULT_RECIPE_IMAGE, Mood, RecipeModel
from tests.utils import recipe_payload


class TestCreate:
    async def test_new_recipe_starts_visible(self, db: AsyncSession) -> None:
        recipe = await RecipeCatalog(db).create(recipe_payload(name="R1", mood="happy", servings=4))

        assert recipe.id is not None
        assert recipe.name == "R1"
        assert recipe.mood is Mood.HAPPY
        assert recipe.servings == 4
        assert recipe.visible is True

    async def test_accepts_validated_fields(self, db: AsyncSession) -> None:
        fields = RecipeFields(**recipe_payload(mood="relaxed"))

        recipe = await RecipeCatalog(db).create(fields)

        assert recipe.mood is Mood.RELAXED

    async def test_missing_image_gets_default(self, db: AsyncSession) -> None:
        payload = recipe_payload()
        del payload["image"]

        recipe = await RecipeCatalog(db).create(payload)

        assert recipe.image == DEFAULT_RECIPE_IMAGE

    @pytest.mark.parametrize(
        "overrides",
        [
            {"servings": 0},
            {"servings": -3},
            {"name": ""},
            {"name": "   "},
            {"ingredients": ""},
            {"instructions": ""},
            {"prep_time": ""},
            {"mood": "grumpy"},
        ],
    )
    async def test_invalid_fields_rejected(self, db: AsyncSession, overrides: dict) -> None:
        with pytest.raises(InvalidRecipeError) as exc_info:
            await RecipeCatalog(db).create(recipe_payload(**overrides))

        assert exc_info.value.errors
        assert await db.scalar(select(func.count(RecipeModel.id))) == 0

    @pytest.mark.parametrize("field", ["name", "mood", "ingredients", "instructions", "prep_time", "servings"])
    async def test_missing_required_field_rejected(self, db: AsyncSession, field: str) -> None:
        payload = recipe_payload()
        del payload[field]

        with pytest.raises(InvalidRecipeError):
            await RecipeCatalog(db).create(payload)

    def test_schema_rejects_non_positive_servings(self) -> None:
        with pytest.raises(ValidationError):
            RecipeFields(**recipe_payload(servings=0))


class TestUpdate:
    async def test_full_replace_keeps_visibility(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        recipe = await catalog.create(recipe_payload(name="Before"))
        await catalog.toggle_visibility(recipe.id)

        updated = await catalog.update(
            recipe.id,
            recipe_payload(name="After", mood="sad", servings=2, image=None),
        )

        assert updated.id == recipe.id
        assert updated.name == "After"
        assert updated.mood is Mood.SAD
        assert updated.servings == 2
        assert updated.image == DEFAULT_RECIPE_IMAGE
        assert updated.visible is False

    async def test_unknown_id(self, db: AsyncSession) -> None:
        with pytest.raises(RecipeNotFoundError):
            await RecipeCatalog(db).update(9999, recipe_payload())

    async def test_invalid_update_leaves_recipe_untouched(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        recipe = await catalog.create(recipe_payload(name="Keep"))

        with pytest.raises(InvalidRecipeError):
            await catalog.update(recipe.id, recipe_payload(servings=0))

        assert (await catalog.get(recipe.id)).name == "Keep"


class TestToggleVisibility:
    async def test_toggle_hides_then_shows(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        recipe = await catalog.create(recipe_payload(name="R1", mood="happy"))

        assert await catalog.toggle_visibility(recipe.id) is False
        assert recipe.id not in [r.id for r in await catalog.list_visible(Mood.HAPPY)]

        assert await catalog.toggle_visibility(recipe.id) is True
        assert recipe.id in [r.id for r in await catalog.list_visible(Mood.HAPPY)]

    @pytest.mark.parametrize("times", [1, 2, 3, 4, 7])
    async def test_parity(self, db: AsyncSession, times: int) -> None:
        catalog = RecipeCatalog(db)
        recipe = await catalog.create(recipe_payload())

        for _ in range(times):
            await catalog.toggle_visibility(recipe.id)

        assert (await catalog.get(recipe.id)).visible is (times % 2 == 0)

    async def test_unknown_id(self, db: AsyncSession) -> None:
        with pytest.raises(RecipeNotFoundError):
            await RecipeCatalog(db).toggle_visibility(424242)

    async def test_concurrent_toggles_each_report_their_own_result(
        self, db: AsyncSession, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        recipe = await RecipeCatalog(db).create(recipe_payload())
        toggles = 6

        async def toggle() -> bool:
            async with session_factory() as session:
                return await RecipeCatalog(session).toggle_visibility(recipe.id)

        results = await asyncio.gather(*(toggle() for _ in range(toggles)))

        # Serialized flips from visible: False, True, False, ... in commit order
        assert sorted(results) == [False] * (toggles // 2) + [True] * (toggles // 2)
        async with session_factory() as session:
            final = await RecipeCatalog(session).get(recipe.id)
        assert final.visible is True

    async def test_odd_number_of_concurrent_toggles_hides(
        self, db: AsyncSession, session_factory: async_sessionmaker[AsyncSession]
    ) -> None:
        recipe = await RecipeCatalog(db).create(recipe_payload())

        async def toggle() -> bool:
            async with session_factory() as session:
                return await RecipeCatalog(session).toggle_visibility(recipe.id)

        results = await asyncio.gather(*(toggle() for _ in range(5)))

        assert results.count(False) == 3
        assert results.count(True) == 2
        assert (await RecipeCatalog(db).get(recipe.id)).visible is False


class TestListing:
    async def test_list_visible_filters_hidden_and_other_moods(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        shown = await catalog.create(recipe_payload(name="Shown", mood="happy"))
        hidden = await catalog.create(recipe_payload(name="Hidden", mood="happy"))
        await catalog.create(recipe_payload(name="Other", mood="sad"))
        await catalog.toggle_visibility(hidden.id)

        visible = await catalog.list_visible(Mood.HAPPY)

        assert [r.id for r in visible] == [shown.id]
        assert all(r.visible for r in visible)

    async def test_list_all_includes_hidden(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        await catalog.create(recipe_payload(name="Shown"))
        hidden = await catalog.create(recipe_payload(name="Hidden"))
        await catalog.toggle_visibility(hidden.id)

        everything = await catalog.list_all()

        assert {r.name for r in everything} == {"Shown", "Hidden"}
        assert {r.name: r.visible for r in everything} == {"Shown": True, "Hidden": False}

    async def test_list_all_orders_by_mood_name_then_recipe_name(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        for name, mood in [("B", "happy"), ("A", "sad"), ("C", "energetic"), ("A", "happy")]:
            await catalog.create(recipe_payload(name=name, mood=mood))

        ordered = [(r.mood.value, r.name) for r in await catalog.list_all()]

        assert ordered == [("energetic", "C"), ("happy", "A"), ("happy", "B"), ("sad", "A")]

    async def test_list_visible_empty_for_mood_without_recipes(self, db: AsyncSession) -> None:
        await RecipeCatalog(db).create(recipe_payload(mood="happy"))

        assert await RecipeCatalog(db).list_visible(Mood.SAD) == []

    async def test_list_moods_only_counts_visible(self, db: AsyncSession) -> None:
        catalog = RecipeCatalog(db)
        await catalog.create(recipe_payload(mood="happy"))
        await catalog.create(recipe_payload(mood="energetic"))
        sad = await catalog.create(recipe_payload(mood="sad"))
        await catalog.toggle_visibility(sad.id)

        assert await catalog.list_moods() == [Mood.ENERGETIC, Mood.HAPPY]
