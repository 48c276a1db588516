"""Error Hierarchy: typed, categorized exceptions for the few real linkhop failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - The resolution path (router, aliases, handlers) never raises any of these
    - Startup/config errors are CRITICAL; history persistence errors are recoverable
    - to_response() produces the REST envelope; no internal details leaked

Design Decisions:
    - Single hierarchy with LinkhopError base: one FastAPI handler catches all
    - ErrorContext as dataclass: observability data without coupling to logging
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    command: str | None = None


class LinkhopError(Exception):
    """Base exception for all linkhop errors."""

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
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "command": self.context.command,
                },
            }
        }


# ─── Startup Errors ─────────────────────────────────────────────

class DuplicateBindingError(LinkhopError):
    """Two registered commands declare the same binding."""
    def __init__(
        self,
        collisions: list[tuple[str, str, str]],
        context: ErrorContext | None = None,
    ):
        details = "; ".join(
            f"'{binding}' is used by both {first} and {second}"
            for binding, first, second in collisions
        )
        super().__init__(
            f"Command binding collision: {details}",
            "DUPLICATE_BINDING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.collisions = collisions


# ─── Infrastructure Errors ──────────────────────────────────────

class DatabaseError(LinkhopError):
    """History store operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.WARNING, context, 503,
        )
        self.operation = operation
