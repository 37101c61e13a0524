"""Todo Schemas — the closed set of request/response payloads for /api/todos.

Invariants:
    - TodoResponse serializes its id under "_id" as a 24-char hex string
    - TodoCreate carries only the task title; completion state is never client-set
    - MessageResponse is the only shape for confirmations and client errors

Design Decisions:
    - task is optional in TodoCreate: a missing title must reach the handler so it
      answers with "task must have title" instead of the generic validation envelope
"""

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, field_validator


class TodoCreate(BaseModel):
    """Create request — {"task": str}. Other fields are ignored."""
    task: str | None = None

    @property
    def title(self) -> str:
        return self.task or ""

    def has_title(self) -> bool:
        return bool(self.title)


class TodoResponse(BaseModel):
    """A task record as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: str | None = Field(None, alias="_id")
    task: str
    completed: bool = False

    @field_validator("id", mode="before")
    @classmethod
    def stringify_object_id(cls, v: object) -> object:
        if isinstance(v, ObjectId):
            return str(v)
        return v

    @classmethod
    def from_document(cls, document: dict) -> "TodoResponse":
        return cls.model_validate(document)


class MessageResponse(BaseModel):
    """Plain confirmation or error message."""
    message: str
