"""Error Hierarchy — typed, categorized exceptions for every Ourzhop failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (4xx) are recoverable by the caller; infrastructure errors (5xx) are not
    - to_response() produces the REST envelope {"status": "error", "code", "message", "errors"?}
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with OurzhopError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - Field violations are NOT exceptions inside core/; they are accumulated in
      ValidationErrors; StoreValidationError only wraps the finished report at the service edge
"""

from dataclasses import dataclass, field
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
    BUSINESS_RULE = "business_rule"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs, never sent to clients."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    store_name: str | None = None


class OurzhopError(Exception):
    """Base exception for all Ourzhop errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
        details: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status
        self.details = details

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        response = {
            "status": "error",
            "code": self.code,
            "message": self.message,
        }
        if self.details is not None:
            response["errors"] = self.details
        return response

    def __str__(self) -> str:
        return f"status_code: {self.http_status}, message: {self.message}"


# ─── Domain Errors (4xx) ────────────────────────────────────────

class StoreValidationError(OurzhopError):
    """Create-store request failed one or more field rules."""
    def __init__(self, details: dict[str, str], context: ErrorContext | None = None):
        super().__init__(
            "Validation failed.", "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, 400, dict(details),
        )


class DuplicateStoreError(OurzhopError):
    """A store with the same name already exists."""
    def __init__(self, store_name: str, context: ErrorContext | None = None):
        super().__init__(
            "A store with this name already exists.",
            "DUPLICATE_STORE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.store_name = store_name


class ManagerNotFoundError(OurzhopError):
    """shop_manager_id does not resolve to a manager account."""
    def __init__(self, manager_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Shop manager account could not be verified.",
            "MANAGER_NOT_FOUND", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 422,
        )
        self.manager_id = manager_id


class ManagerLockedError(OurzhopError):
    """shop_manager_id resolves to a locked manager account."""
    def __init__(self, manager_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Shop manager account is locked.",
            "MANAGER_LOCKED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, context, 423,
        )
        self.manager_id = manager_id


# ─── Infrastructure Errors (5xx) ────────────────────────────────

class DatabaseError(OurzhopError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
