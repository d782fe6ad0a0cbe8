"""Error Hierarchy - typed, categorized exceptions for all Smoke Tracker failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SmokeTrackError base: one FastAPI handler catches all
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
    AUTHENTICATION = "authentication"
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    supply_id: str | None = None
    event_id: str | None = None
    debug_info: dict[str, Any] | None = None
    retry_after_seconds: int | None = None


class SmokeTrackError(Exception):
    """Base exception for all Smoke Tracker errors."""

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
                    "supply_id": self.context.supply_id,
                    "event_id": self.context.event_id,
                    "retry_after_seconds": self.context.retry_after_seconds,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class UnauthenticatedError(SmokeTrackError):
    """No valid caller identity on the request."""
    def __init__(self, message: str = "Authentication required", context: ErrorContext | None = None):
        super().__init__(
            message, "UNAUTHENTICATED", ErrorCategory.AUTHENTICATION,
            ErrorSeverity.WARNING, context, 401,
        )


class LockedError(SmokeTrackError):
    """Commit attempted inside the cooldown window without force."""
    def __init__(
        self,
        unlock_at: datetime,
        remaining_minutes: int,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.retry_after_seconds = remaining_minutes * 60
        super().__init__(
            f"Interval lock active: {remaining_minutes} minute(s) remaining "
            f"(unlocks at {unlock_at.isoformat()})",
            "INTERVAL_LOCKED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.WARNING, ctx, 403,
        )
        self.unlock_at = unlock_at
        self.remaining_minutes = remaining_minutes


class SupplyExhaustedError(SmokeTrackError):
    """Target supply has no remaining units."""
    def __init__(self, supply_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.supply_id = supply_id
        super().__init__(
            f"Supply '{supply_id}' has no remaining units",
            "SUPPLY_EXHAUSTED", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )
        self.supply_id = supply_id


class InvalidIntervalError(SmokeTrackError):
    """Interval settings outside the accepted range."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_INTERVAL", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class InvalidSupplyError(SmokeTrackError):
    """Supply counts or price that cannot describe a real pack."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_SUPPLY", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(SmokeTrackError):
    """Requested resource does not exist or belongs to another user."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(SmokeTrackError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
