"""Error Hierarchy: typed, categorized exceptions for all social API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are scoped to a single request; infrastructure errors are 500-level
    - to_response() produces the REST envelope used by every error response
    - "Not found" is never an error raised by the rules: reads return None, deletes return False

Design Decisions:
    - Single hierarchy with SocialApiError base: one FastAPI handler maps all of them
    - InvalidCredentialsError subclasses ValidationError: login failures are still
      caller-data failures, only the HTTP status differs (401)
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Request-scoped context attached to an error for logs and responses."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    account_id: int | None = None
    message_id: int | None = None


class SocialApiError(Exception):
    """Base exception for all social API errors."""

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
                    "account_id": self.context.account_id,
                    "message_id": self.context.message_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(SocialApiError):
    """Caller-supplied data violates a precondition."""
    def __init__(
        self,
        message: str,
        field: str | None = None,
        code: str = "VALIDATION_ERROR",
        context: ErrorContext | None = None,
        http_status: int = 400,
    ):
        super().__init__(
            message, code, ErrorCategory.VALIDATION,
            ErrorSeverity.WARNING, context, http_status,
        )
        self.field = field


class InvalidCredentialsError(ValidationError):
    """Login failed. Never says whether the username or the password was wrong."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid username or password",
            code="INVALID_CREDENTIALS", context=context, http_status=401,
        )
        self.category = ErrorCategory.AUTHENTICATION


class ConflictError(SocialApiError):
    """Write collides with an existing uniqueness constraint."""
    def __init__(
        self, message: str, field: str | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, "CONFLICT", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, context, 409,
        )
        self.field = field


class ResourceNotFoundError(SocialApiError):
    """Requested resource does not exist. Built by the boundary layer only."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.INFO, context, 404,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SocialApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


def raise_for(error: dict | None, context: ErrorContext | None = None) -> None:
    """Raise ValidationError for an error dict produced by the core checks."""
    if error is None:
        return
    raise ValidationError(
        error["message"], field=error.get("field"),
        code=error["error_code"], context=context,
    )
