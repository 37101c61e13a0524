"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - TodoId wraps a bson ObjectId — handlers never parse raw path strings themselves
    - TodoId.parse is the only way to build an id from client input

Design Decisions:
    - Frozen dataclass over NewType: construction must validate, NewType cannot
"""

from dataclasses import dataclass

from bson import ObjectId
from bson.errors import InvalidId

from todo_api.core.errors import InvalidIdError


@dataclass(frozen=True)
class TodoId:
    """Store-assigned identifier of a task record."""
    value: ObjectId

    @classmethod
    def parse(cls, raw: str) -> "TodoId":
        """Build from a 24-char hex string. Raises InvalidIdError otherwise."""
        try:
            return cls(ObjectId(raw))
        except (InvalidId, TypeError):
            raise InvalidIdError(raw)

    def __str__(self) -> str:
        return str(self.value)
