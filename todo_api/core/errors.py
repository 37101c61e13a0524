"""Error Hierarchy — typed, categorized exceptions for all Todo API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) reject the request before the store is touched
    - Store and configuration errors (500-level) never leak driver details to clients
    - to_response() produces the {"message": ...} envelope used by every endpoint

Design Decisions:
    - Single hierarchy with TodoApiError base: FastAPI global handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field, replace
from datetime import datetime, timezone
from enum import Enum


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    DATABASE = "database"
    CONFIGURATION = "configuration"


@dataclass
class ErrorContext:
    """Context attached to an error for logging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    todo_id: str | None = None
    operation: str | None = None


class TodoApiError(Exception):
    """Base exception for all Todo API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def client_message(self) -> str:
        """Message safe to return to HTTP clients."""
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope."""
        return {"message": self.client_message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "todo_id": self.context.todo_id,
            "operation": self.context.operation,
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class MissingTaskError(TodoApiError):
    """Create called without a task title."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "task must have title", "TASK_REQUIRED", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )


class InvalidIdError(TodoApiError):
    """Path identifier is not a valid store key."""
    def __init__(self, raw_id: str, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), todo_id=raw_id)
        # "invalied" is the established wire message; clients match on it
        super().__init__(
            "invalied id", "INVALID_ID", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, ctx, 400,
        )
        self.raw_id = raw_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreError(TodoApiError):
    """Database operation failed mid-request."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), operation=operation)
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.operation = operation

    @property
    def client_message(self) -> str:
        return "internal server error"


class StoreConnectionError(StoreError):
    """Database unreachable when opening the store."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(message, "connect", context)
        self.code = "STORE_UNAVAILABLE"


class ConfigurationError(TodoApiError):
    """Settings could not be loaded — fatal at startup."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
