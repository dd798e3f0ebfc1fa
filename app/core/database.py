# app/core/database.py
import asyncio
import logging
from functools import lru_cache
from typing import Any, Callable, Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from .config import settings
from .errors import DataStoreConnectionError

logger = logging.getLogger(__name__)


class DataStoreGateway:
    """
    Lazily connected, process-wide MongoDB handle.

    The first `acquire()` starts one connection task (create the client, ping
    the server). Callers that arrive while it is in flight await that same
    task, so concurrent first callers share one attempt whether it succeeds or
    fails. A failed attempt is not cached; the next caller starts a new one.
    """

    def __init__(
        self,
        client_factory: Callable[[], Any],
        database_name: str,
        collection_name: str,
    ):
        self._client_factory = client_factory
        self._database_name = database_name
        self._collection_name = collection_name
        self._client: Optional[Any] = None
        self._connecting: Optional[asyncio.Task] = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    async def acquire(self):
        if self._client is not None:
            return self._client

        task = self._connecting
        if task is None:
            task = self._connecting = asyncio.ensure_future(self._connect())
            task.add_done_callback(self._forget_attempt)
        # a cancelled caller must not cancel the attempt the others are waiting on
        return await asyncio.shield(task)

    def _forget_attempt(self, task: asyncio.Task) -> None:
        if self._connecting is task:
            self._connecting = None

    async def _connect(self):
        try:
            client = self._client_factory()
        except PyMongoError as e:
            raise DataStoreConnectionError(f"MongoDB client could not be created: {e}") from e

        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise DataStoreConnectionError(f"MongoDB connection failed: {e}") from e

        logger.info("Connected to MongoDB database %r", self._database_name)
        self._client = client
        return client

    async def collection(self) -> AsyncIOMotorCollection:
        client = await self.acquire()
        return client[self._database_name][self._collection_name]


def _motor_client() -> AsyncIOMotorClient:
    return AsyncIOMotorClient(
        settings.mongodb_connection_uri,
        server_api=ServerApi("1", strict=True, deprecation_errors=True),
    )


@lru_cache()
def get_gateway() -> DataStoreGateway:
    """Process-wide gateway; never closed explicitly."""
    return DataStoreGateway(_motor_client, settings.mongodb_database, settings.mongodb_collection)
