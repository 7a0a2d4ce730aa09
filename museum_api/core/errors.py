"""Error Hierarchy: typed, categorized exceptions for every API failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors are 400-level; store failures are 500-level
    - to_response() produces the single REST error envelope used by all handlers

Design Decisions:
    - Single hierarchy with MuseumError base: one global handler catches all
    - ErrorContext as dataclass: observability data kept off the exception signature
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    METHOD = "method"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs and the response envelope."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    path: str | None = None
    theme_id: str | None = None


class MuseumError(Exception):
    """Base exception for all museum API errors."""

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
                    "path": self.context.path,
                    "theme_id": self.context.theme_id,
                },
            }
        }


# ─── Client Errors (400-level) ──────────────────────────────────

class InputValidationError(MuseumError):
    """Required request input missing or malformed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INPUT_VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class MethodNotAllowedError(MuseumError):
    """Endpoint called with an HTTP method it does not serve."""
    def __init__(
        self, method: str, allowed: list[str], context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Method {method} not allowed; use {', '.join(allowed)}",
            "METHOD_NOT_ALLOWED", ErrorCategory.METHOD,
            ErrorSeverity.WARNING, context, 405,
        )
        self.method = method
        self.allowed = allowed


class ResourceNotFoundError(MuseumError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Store Errors (500-level) ───────────────────────────────────

class StoreError(MuseumError):
    """Data layer failure: connectivity loss, query or constraint failure."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Store {operation} failed: {message}",
            "STORE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation


class RecipientRegistrationError(MuseumError):
    """Recipient write failed. Message is generic; the cause is only logged."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Recipient registration failed due to a server error",
            "RECIPIENT_REGISTRATION_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )


class ItemLookupError(MuseumError):
    """Single-item lookup failed. Message is generic; the cause is only logged."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Item lookup failed due to a server error",
            "ITEM_LOOKUP_FAILED", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 500,
        )


class InternalError(MuseumError):
    """Unexpected failure inside a handler. The cause is only logged."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "An unexpected error occurred",
            "INTERNAL_ERROR", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
