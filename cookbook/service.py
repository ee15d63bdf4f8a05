from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional

from .models import Recipe, name_key, validate_recipe
from .storage import RecipeStorage

logger = logging.getLogger(__name__)


class RecipeService:
    """Recipe operations used by the web and command line layers.

    Every method reports ordinary failures (unknown name, duplicate name,
    invalid input, storage errors) through its return value; nothing here
    raises for them. Records handed out by the backend are never modified in
    place, so a failed write leaves the previously read collection intact.
    """

    def __init__(self, storage: RecipeStorage) -> None:
        self._storage = storage

    @property
    def storage(self) -> RecipeStorage:
        return self._storage

    async def list(self) -> List[Dict[str, Any]]:
        recipes = await self._storage.list()
        if not isinstance(recipes, (list, tuple)):
            logger.warning("Storage returned %s instead of a list of recipes", type(recipes).__name__)
            return []
        return list(recipes)

    async def get(self, name: str) -> Optional[Dict[str, Any]]:
        key = name_key(name)
        for recipe in await self.list():
            if name_key(recipe.get("name")) == key:
                return recipe
        return None

    async def add(self, candidate: Mapping[str, Any]) -> bool:
        recipes = await self.list()

        name = candidate.get("name") if isinstance(candidate, Mapping) else None
        key = name_key(name)
        if key and any(name_key(recipe.get("name")) == key for recipe in recipes):
            logger.info("Not adding recipe %r: the name is already taken", name)
            return False

        validated = validate_recipe(candidate)
        if validated is None:
            logger.info("Not adding recipe: required fields are missing or invalid")
            return False

        recipe = Recipe(id=_next_id(recipes), **validated)
        saved = await self._storage.persist([*recipes, recipe.to_dict()])
        if not saved:
            logger.info("Recipe %r could not be saved", recipe.name)
        return saved

    async def update(self, name: str, changes: Mapping[str, Any]) -> bool:
        recipes = await self.list()

        index = _find_index(recipes, name)
        if index is None:
            logger.info("Not updating recipe %r: no such recipe", name)
            return False

        validated = validate_recipe(changes, partial=True)
        if validated is None:
            logger.info("Not updating recipe %r: the update is not a mapping", name)
            return False
        # The name identifies the recipe and stays fixed once created.
        validated.pop("name", None)

        updated = [*recipes]
        updated[index] = {**recipes[index], **validated}
        saved = await self._storage.persist(updated)
        if not saved:
            logger.info("Recipe %r could not be updated", name)
        return saved

    async def delete(self, name: str) -> bool:
        recipes = await self.list()

        key = name_key(name)
        remaining = [recipe for recipe in recipes if name_key(recipe.get("name")) != key]
        if len(remaining) == len(recipes):
            logger.info("Not deleting recipe %r: no such recipe", name)
            return False

        saved = await self._storage.persist(remaining)
        if not saved:
            logger.info("Recipe %r could not be deleted", name)
        return saved


def _find_index(recipes: List[Dict[str, Any]], name: str) -> Optional[int]:
    key = name_key(name)
    for index, recipe in enumerate(recipes):
        if name_key(recipe.get("name")) == key:
            return index
    return None


def _next_id(recipes: List[Dict[str, Any]]) -> int:
    """Return ``count + 1``, bumped past the highest surviving id.

    Ids are only derived from the stored records, so the id of a deleted
    recipe comes back if it was the highest one.
    """

    ids = [recipe.get("id") for recipe in recipes]
    highest = max((value for value in ids if isinstance(value, int) and not isinstance(value, bool)), default=0)
    return max(highest, len(recipes)) + 1


__all__ = ["RecipeService"]
