"""Record Store Adapter — MongoDB access for the todos collection.

Invariants:
    - One TodoStore per process, opened by the lifespan and kept on app.state
    - Every driver exception (PyMongoError) is mapped to StoreError (core/errors.py)
    - connect() pings the server before returning; an unreachable database never
      yields a half-initialized store
    - Documents are returned as plain dicts: {"_id": ObjectId, "task": str, "completed": bool}

Design Decisions:
    - motor over synchronous pymongo: handlers are async, driver calls must not block the loop
    - Injected through Depends(get_store) rather than a module-level handle
    - No retries: a failed operation aborts only the current request
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo.errors import PyMongoError

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import ErrorContext, StoreConnectionError, StoreError

logger = logging.getLogger(__name__)


@contextmanager
def _translate_errors(operation: str, todo_id: TodoId | None = None) -> Iterator[None]:
    """Map driver exceptions raised inside the block to StoreError."""
    try:
        yield
    except PyMongoError as e:
        logger.error(
            f"Store {operation} failed: {e}",
            extra={"operation": operation, "todo_id": str(todo_id) if todo_id else None},
        )
        raise StoreError(
            type(e).__name__, operation,
            ErrorContext(todo_id=str(todo_id) if todo_id else None),
        ) from e


class TodoStore:
    """Find/insert/update/delete over one collection in one database."""

    def __init__(self, client, database_name: str, collection_name: str):
        self._client = client
        self.collection = client[database_name][collection_name]

    @classmethod
    async def connect(
        cls,
        uri: str,
        database_name: str,
        collection_name: str,
        timeout_ms: int = 5000,
    ) -> "TodoStore":
        """Open a client and verify the server answers. Raises StoreConnectionError."""
        try:
            client = AsyncIOMotorClient(uri, serverSelectionTimeoutMS=timeout_ms)
        except PyMongoError as e:
            raise StoreConnectionError(f"mongodb connection failed: {e}") from e

        store = cls(client, database_name, collection_name)
        try:
            await client.admin.command("ping")
        except PyMongoError as e:
            client.close()
            raise StoreConnectionError(f"mongodb connection failed: {e}") from e

        logger.info(f"db connected ({database_name}.{collection_name})")
        return store

    def close(self) -> None:
        self._client.close()

    async def ping(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            await self._client.admin.command("ping")
            return True
        except PyMongoError as e:
            logger.error(f"DB ping failed: {e}")
            return False

    async def find_all(self) -> list[dict]:
        """Every record, in whatever order the server returns them."""
        with _translate_errors("find"):
            return await self.collection.find({}).to_list(length=None)

    async def insert_one(self, task: str) -> dict:
        """Persist a new incomplete record and return it with its assigned _id."""
        document = {"task": task, "completed": False}
        with _translate_errors("insert"):
            result = await self.collection.insert_one(document)
        document["_id"] = result.inserted_id
        return document

    async def mark_completed(self, todo_id: TodoId) -> int:
        with _translate_errors("update", todo_id):
            result = await self.collection.update_one(
                {"_id": todo_id.value}, {"$set": {"completed": True}},
            )
        if result.matched_count == 0:
            logger.info(f"Update matched no record: {todo_id}", extra={"todo_id": str(todo_id)})
        return result.matched_count

    async def delete_one(self, todo_id: TodoId) -> int:
        with _translate_errors("delete", todo_id):
            result = await self.collection.delete_one({"_id": todo_id.value})
        if result.deleted_count == 0:
            logger.info(f"Delete matched no record: {todo_id}", extra={"todo_id": str(todo_id)})
        return result.deleted_count


def get_store(request: Request) -> TodoStore:
    """FastAPI dependency for the record store opened by the lifespan."""
    store = getattr(request.app.state, "store", None)
    if store is None:
        raise RuntimeError("Store not initialized")
    return store
