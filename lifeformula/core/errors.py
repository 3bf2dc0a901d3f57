"""Error Hierarchy - typed, categorized exceptions for every engine failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Caller errors (400-level) are recoverable; engine/infrastructure errors are not
    - ValidationError carries ALL field messages, never only the first
    - to_response() produces the REST envelope; no internal details leak into it

Design Decisions:
    - Single hierarchy with LifeFormulaError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability fields without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    RATE_LIMIT = "rate_limit"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    tool_id: str | None = None
    user_ref: str | None = None
    debug_info: dict[str, Any] | None = None


class LifeFormulaError(Exception):
    """Base exception for all engine errors."""

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

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "success": False,
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {"tool_id": self.context.tool_id},
            },
        }


# --- Caller errors (400-level) ----------------------------------------------

class ValidationError(LifeFormulaError):
    """Tool input failed schema validation. Carries every field message."""
    def __init__(self, errors: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Input validation failed: {', '.join(errors)}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400,
        )
        self.errors = list(errors)

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["details"] = list(self.errors)
        return response


class ToolNotFoundError(LifeFormulaError):
    """Unknown or inactive tool id."""
    def __init__(self, tool_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_id = tool_id
        super().__init__(
            f"Tool '{tool_id}' not found",
            "TOOL_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.tool_id = tool_id


class UsageLimitExceededError(LifeFormulaError):
    """Usage gate refused the run (daily quota exhausted)."""
    def __init__(
        self, remaining: int | None, limit: int | None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Daily usage limit reached ({limit})",
            "USAGE_LIMIT_EXCEEDED", ErrorCategory.RATE_LIMIT,
            ErrorSeverity.WARNING, context, 429,
        )
        self.remaining = remaining
        self.limit = limit

    def to_response(self) -> dict:
        response = super().to_response()
        response["error"]["usage"] = {
            "remaining": self.remaining, "limit": self.limit,
        }
        return response


# --- Engine errors (500-level) ----------------------------------------------

class NotInitializedError(LifeFormulaError):
    """Registry queried before initialize() (programming error)."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Tool registry is not initialized; call initialize() first",
            "NOT_INITIALIZED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class InitializationError(LifeFormulaError):
    """Loading tool definitions from the configuration source failed."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Tool registry initialization failed: {message}",
            "INITIALIZATION_FAILED", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 503,
        )


class CalculationError(LifeFormulaError):
    """A formula could not produce a result for validated input (schema/formula mismatch)."""
    def __init__(self, tool_id: str, message: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.tool_id = tool_id
        super().__init__(
            f"Calculation for '{tool_id}' failed: {message}",
            "CALCULATION_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, ctx, 500,
        )
        self.tool_id = tool_id


class DatabaseError(LifeFormulaError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
