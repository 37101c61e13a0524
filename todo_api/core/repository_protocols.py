"""Boundary Protocols — contract between request handlers and the record store.

Invariants:
    - Handlers depend on TodoRepository, never on the MongoDB driver
    - Implementations raise StoreError (core/errors.py) on driver failure
    - mark_completed / delete_one return the number of matched records;
      zero is a valid outcome, not an error

Design Decisions:
    - Protocol over ABC: structural subtyping, TodoStore needs no base class
"""

from typing import Protocol

from todo_api.core.domain_types import TodoId


class TodoRepository(Protocol):
    """Contract for task record persistence — implemented by infrastructure."""
    async def find_all(self) -> list[dict]: ...
    async def insert_one(self, task: str) -> dict: ...
    async def mark_completed(self, todo_id: TodoId) -> int: ...
    async def delete_one(self, todo_id: TodoId) -> int: ...
    async def ping(self) -> bool: ...
