"""Error Hierarchy — typed, categorized exceptions for every expense failure mode.

Invariants:
    - Every error has an error_code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; infrastructure errors are 500-level
    - to_response() produces the {"code": <http status>, "message": <str>} envelope
    - DatabaseError never exposes the driver message to clients (kept in detail for logs)
    - ExpenseNotFoundError survives wrapping: callers test it with isinstance,
      the wrapped original stays on __cause__

Design Decisions:
    - Single hierarchy with ExpenseError base: one FastAPI handler catches all
    - ErrorContext as dataclass: operation context for logs, never serialized to clients
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    MALFORMED_INPUT = "malformed_input"
    UNAUTHORIZED = "unauthorized"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


INTERNAL_ERROR_MESSAGE = "Internal Server Error: "


@dataclass
class ErrorContext:
    """Diagnostic context attached by the layer that wraps an error."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    expense_id: int | None = None
    debug_info: dict[str, Any] | None = None


class ExpenseError(Exception):
    """Base exception for all expense API errors."""

    def __init__(
        self,
        message: str,
        error_code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def __str__(self) -> str:
        if self.context.operation:
            return f"{self.context.operation}: {self.message}"
        return self.message

    def to_response(self) -> dict:
        """Convert to the public JSON error body."""
        return {"code": self.http_status, "message": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class ExpenseValidationError(ExpenseError):
    """An expense record violates one of its rules."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class AmountInvalidError(ExpenseValidationError):
    """Amount is zero or negative."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("amount must be greater than zero", "amount", context)


class TitleEmptyError(ExpenseValidationError):
    """Title is the empty string."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__("empty title", "title", context)


class InvalidParamsError(ExpenseError):
    """Path parameter is not a signed 64-bit base-10 integer."""
    def __init__(self, raw: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.debug_info = {"raw": raw}
        super().__init__(
            "invalid params", "INVALID_PARAMS", ErrorCategory.MALFORMED_INPUT,
            ErrorSeverity.WARNING, ctx, 400,
        )


class InvalidRequestBodyError(ExpenseError):
    """Request body could not be bound to an expense."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "invalid request body", "INVALID_REQUEST_BODY",
            ErrorCategory.MALFORMED_INPUT, ErrorSeverity.WARNING, context, 400,
        )


class InvalidTokenAuthError(ExpenseError):
    """Authorization header missing or not a "Month DD, YYYY" date."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "missing or invalid token authentication", "INVALID_TOKEN_AUTH",
            ErrorCategory.UNAUTHORIZED, ErrorSeverity.WARNING, context, 401,
        )


class ExpenseNotFoundError(ExpenseError):
    """No expense row matches the requested id."""
    def __init__(self, expense_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.expense_id = expense_id
        super().__init__(
            "not found", "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.WARNING, ctx, 404,
        )
        self.expense_id = expense_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(ExpenseError):
    """Database operation failed."""
    def __init__(self, detail: str, operation: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.operation = operation
        super().__init__(
            INTERNAL_ERROR_MESSAGE, "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.detail = detail
        self.operation = operation

    def __str__(self) -> str:
        return f"{self.operation}: {self.detail}"
