import logging
from typing import Optional

from .config import get_settings
from .file_storage import FileRecipeStorage
from .models import Recipe
from .mongo_storage import MongoRecipeStorage
from .service import RecipeService
from .storage import RecipeStorage, StorageResult

logger = logging.getLogger(__name__)


def create_service(storage: Optional[RecipeStorage] = None) -> RecipeService:
    """Create the recipe service.

    Parameters
    ----------
    storage:
        Optional recipe backend. When ``None`` the backend is chosen from the
        ``USE_DB`` environment toggle: :class:`MongoRecipeStorage` when it is
        truthy, :class:`FileRecipeStorage` otherwise. The choice is made once
        here and never revisited by the service.
    """

    if storage is None:
        if get_settings().use_db:
            storage = MongoRecipeStorage.from_env()
        else:
            storage = FileRecipeStorage.from_env()
    logger.debug("Using %s for recipe storage", type(storage).__name__)
    return RecipeService(storage)


__all__ = [
    "create_service",
    "FileRecipeStorage",
    "MongoRecipeStorage",
    "Recipe",
    "RecipeService",
    "RecipeStorage",
    "StorageResult",
]
