"""
JSON flat-file recipe backend.

The whole collection lives in a single UTF-8 JSON array. Every save rewrites
the file; nothing is ever appended.
"""

from __future__ import annotations

import asyncio
import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .config import get_settings
from .storage import RecipeStorage, StorageResult

logger = logging.getLogger(__name__)


class FileRecipeStorage(RecipeStorage):
    """Recipe storage backed by a JSON file on local disk."""

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self._path = Path(path)

    @classmethod
    def from_env(cls) -> "FileRecipeStorage":
        """Build a storage instance from environment variables."""

        return cls(get_settings().recipes_file)

    @property
    def path(self) -> Path:
        return self._path

    async def load(self) -> StorageResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._read)

    async def save(self, recipes: Sequence[Dict[str, Any]]) -> StorageResult:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._write, list(recipes))

    def _read(self) -> StorageResult:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return StorageResult.success()
        except (OSError, ValueError) as exc:
            logger.warning("Could not read recipes from %s, returning an empty list: %s", self._path, exc)
            return StorageResult.failure(str(exc))

        if not isinstance(data, list):
            logger.warning("Recipe file %s does not contain a JSON array, ignoring it", self._path)
            return StorageResult.failure("recipe file does not contain a list")

        recipes: List[Dict[str, Any]] = []
        for entry in data:
            if isinstance(entry, dict):
                recipes.append(entry)
            else:
                logger.warning("Skipping malformed recipe entry in %s: %r", self._path, entry)
        return StorageResult.success(recipes)

    def _write(self, recipes: List[Dict[str, Any]]) -> StorageResult:
        tmp_path: Optional[Path] = None
        try:
            payload = json.dumps(recipes, ensure_ascii=False, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            # One temp file per save; overlapping saves must not share it.
            fd, name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp")
            tmp_path = Path(name)
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                handle.write(payload)
            os.replace(tmp_path, self._path)
        except (OSError, TypeError, ValueError) as exc:
            logger.error("Error saving recipes to %s: %s", self._path, exc)
            if tmp_path is not None:
                self._discard(tmp_path)
            return StorageResult.failure(str(exc))
        return StorageResult.success(recipes)

    def _discard(self, tmp_path: Path) -> None:
        try:
            tmp_path.unlink(missing_ok=True)
        except OSError:
            # The target file is untouched either way; a stray temp file is harmless.
            pass


__all__ = ["FileRecipeStorage"]
