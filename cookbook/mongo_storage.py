from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING, Any, AsyncIterator, Callable, Dict, Optional, Sequence

from bson.errors import BSONError
from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from .config import get_settings
from .storage import RecipeStorage, StorageResult

if TYPE_CHECKING:
    from pymongo.asynchronous.collection import AsyncCollection

logger = logging.getLogger(__name__)

STORAGE_ERRORS = (PyMongoError, BSONError, TypeError, ValueError)


class MongoRecipeStorage(RecipeStorage):
    """MongoDB backed recipe storage.

    A client is opened for every call and closed again before the call
    returns, whether the operation succeeded or not. Saving replaces the whole
    collection.
    """

    def __init__(
        self,
        *,
        uri: str = "mongodb://localhost:27017",
        database_name: str = "cookbook",
        collection_name: str = "recipes",
        timeout_ms: int = 5000,
        client_factory: Optional[Callable[..., Any]] = None,
    ) -> None:
        self._uri = uri
        self._database_name = database_name
        self._collection_name = collection_name
        self._timeout_ms = timeout_ms
        self._client_factory = client_factory or AsyncMongoClient

    @classmethod
    def from_env(cls) -> "MongoRecipeStorage":
        """Build a storage instance from environment variables."""

        settings = get_settings()
        return cls(
            uri=settings.mongo_uri,
            database_name=settings.mongo_database,
            collection_name=settings.recipes_collection,
            timeout_ms=settings.mongo_timeout_ms,
        )

    async def load(self) -> StorageResult:
        try:
            async with self._collection() as collection:
                documents = await collection.find({}, {"_id": False}).to_list()
        except STORAGE_ERRORS as exc:
            logger.error("Error fetching recipes from database: %s", exc)
            return StorageResult.failure(str(exc))
        return StorageResult.success(documents)

    async def save(self, recipes: Sequence[Dict[str, Any]]) -> StorageResult:
        try:
            # insert_many sets ``_id`` on the documents it is given.
            documents = [dict(recipe) for recipe in recipes]
            async with self._collection() as collection:
                await collection.delete_many({})
                if documents:
                    await collection.insert_many(documents)
        except STORAGE_ERRORS as exc:
            logger.error("Error saving recipes to database: %s", exc)
            return StorageResult.failure(str(exc))
        return StorageResult.success([dict(recipe) for recipe in recipes])

    @asynccontextmanager
    async def _collection(self) -> AsyncIterator[AsyncCollection]:
        client = self._client_factory(self._uri, serverSelectionTimeoutMS=self._timeout_ms)
        try:
            await client.aconnect()
            yield client[self._database_name][self._collection_name]
        finally:
            await client.close()


__all__ = ["MongoRecipeStorage"]
