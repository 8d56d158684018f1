"""Error Hierarchy — typed, categorized exceptions for web script failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Lookup errors (404) are recoverable; configuration and infrastructure errors are critical
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WebScriptError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - The resolver itself never raises these; routes convert a failed RequestStatus
      via error_from_status()
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone

from webscripts.core.domain_types import ResolutionFailure
from webscripts.core.request_status import RequestStatus


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    site_id: str | None = None
    container_id: str | None = None
    path: str | None = None
    node_ref: str | None = None


class WebScriptError(Exception):
    """Base exception for all web script errors."""

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
                    "site_id": self.context.site_id,
                    "container_id": self.context.container_id,
                    "path": self.context.path,
                    "node_ref": self.context.node_ref,
                },
            }
        }


# ─── Lookup Errors (404) ────────────────────────────────────────

class NodeNotFoundError(WebScriptError):
    """Site, container, path or node reference did not resolve."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "NODE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


# ─── Configuration / Infrastructure Errors (500-level) ─────────

class InvalidRequestError(WebScriptError):
    """Request carried neither a node reference nor a site context."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_REQUEST", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )


class DatabaseError(WebScriptError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


def error_from_status(
    status: RequestStatus, context: ErrorContext | None = None,
) -> WebScriptError:
    """Map a failed RequestStatus to the matching typed error."""
    message = status.message or "Request could not be resolved"
    if status.failure is ResolutionFailure.NOT_FOUND:
        return NodeNotFoundError(message, context)
    if status.failure is ResolutionFailure.INVALID_REQUEST:
        return InvalidRequestError(message, context)
    return WebScriptError(
        message, "REQUEST_FAILED", ErrorCategory.INTERNAL,
        ErrorSeverity.ERROR, context, status.code,
    )
