from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence


@dataclass
class StorageResult:
    """Outcome of a backend read or write.

    Backends never raise for I/O problems; they report them here instead so
    that callers only ever branch on ``ok``.
    """

    ok: bool
    recipes: List[Dict[str, Any]] = field(default_factory=list)
    error: Optional[str] = None

    @classmethod
    def success(cls, recipes: Optional[List[Dict[str, Any]]] = None) -> "StorageResult":
        return cls(ok=True, recipes=list(recipes or []))

    @classmethod
    def failure(cls, error: str) -> "StorageResult":
        return cls(ok=False, error=error)


class RecipeStorage:
    """Contract shared by every recipe backend.

    Subclasses implement :meth:`load` and :meth:`save`; the public
    :meth:`list` and :meth:`persist` coroutines are what the service uses.
    """

    async def load(self) -> StorageResult:
        """Read the whole collection."""

        raise NotImplementedError("load() must be implemented.")

    async def save(self, recipes: Sequence[Dict[str, Any]]) -> StorageResult:
        """Replace the whole collection with ``recipes``."""

        raise NotImplementedError("save() must be implemented.")

    async def list(self) -> List[Dict[str, Any]]:
        """Return the stored recipes, or an empty list if they cannot be read."""

        result = await self.load()
        return result.recipes

    async def persist(self, recipes: Sequence[Dict[str, Any]]) -> bool:
        """Overwrite the stored collection and report whether it worked."""

        result = await self.save(recipes)
        return result.ok


__all__ = ["RecipeStorage", "StorageResult"]
