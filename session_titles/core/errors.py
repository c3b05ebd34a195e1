"""Error Hierarchy — typed, categorized exceptions for session-titles failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors are 400-level; the title deriver itself never raises
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with SessionTitlesError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    chat_id: str | None = None
    schedule_id: str | None = None
    debug_info: dict[str, Any] | None = None


class SessionTitlesError(Exception):
    """Base exception for all session-titles errors."""

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
                    "chat_id": self.context.chat_id,
                    "schedule_id": self.context.schedule_id,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ScheduleTriggerError(SessionTitlesError):
    """Schedule needs exactly one trigger: a cron expression or a one-off instant."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Schedule requires exactly one of 'cron' or 'at'.",
            "INVALID_SCHEDULE_TRIGGER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


class ResourceNotFoundError(SessionTitlesError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
