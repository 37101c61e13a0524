"""Todo Routes — list/create/complete/delete over the todos collection.

Invariants:
    - Each handler makes at most one store call
    - Client errors (missing title, malformed id) are raised before the store is touched
    - PATCH/DELETE answer with the success message whether or not a record matched
    - Store failures propagate as StoreError and are rendered by the global handler

Design Decisions:
    - Store injected via Depends(get_store): no module-level database handle
    - Path ids parsed by a dependency so both PATCH and DELETE share one validation path
"""

import logging

from fastapi import APIRouter, Depends

from todo_api.core.domain_types import TodoId
from todo_api.core.errors import MissingTaskError
from todo_api.core.repository_protocols import TodoRepository
from todo_api.infrastructure.database import get_store
from todo_api.schemas.todo import MessageResponse, TodoCreate, TodoResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/todos", tags=["todos"])


def todo_id_from_path(todo_id: str) -> TodoId:
    """Parse the {todo_id} path segment. Raises InvalidIdError (400)."""
    return TodoId.parse(todo_id)


@router.get(
    "", response_model=list[TodoResponse], response_model_exclude_none=True,
)
async def list_todos(store: TodoRepository = Depends(get_store)):
    """Every task record, in store order."""
    documents = await store.find_all()
    return [TodoResponse.from_document(doc) for doc in documents]


@router.post(
    "", response_model=TodoResponse, response_model_exclude_none=True,
)
async def create_todo(
    body: TodoCreate, store: TodoRepository = Depends(get_store),
):
    """Create an incomplete task record."""
    if not body.has_title():
        raise MissingTaskError()
    document = await store.insert_one(body.title)
    todo = TodoResponse.from_document(document)
    logger.info(f"Todo created: {todo.id}", extra={"todo_id": todo.id})
    return todo


@router.patch("/{todo_id}", response_model=MessageResponse)
async def complete_todo(
    todo_id: TodoId = Depends(todo_id_from_path),
    store: TodoRepository = Depends(get_store),
):
    """Mark a record completed. Idempotent."""
    await store.mark_completed(todo_id)
    return MessageResponse(message="update success")


@router.delete("/{todo_id}", response_model=MessageResponse)
async def delete_todo(
    todo_id: TodoId = Depends(todo_id_from_path),
    store: TodoRepository = Depends(get_store),
):
    """Remove a record if present."""
    await store.delete_one(todo_id)
    return MessageResponse(message="delete success")
