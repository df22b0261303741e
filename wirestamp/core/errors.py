"""Error Hierarchy — typed, categorized exceptions for all Wirestamp failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Construction errors (range, type) are CRITICAL: a caller bug, never corrected
    - Boundary errors wrap the underlying construction or schema error as __cause__
    - to_dict() produces a flat, JSON-serializable envelope for structured logs

Design Decisions:
    - Single hierarchy with WirestampError base: callers catch one type at the boundary
    - Construction errors also subclass ValueError/TypeError: stdlib callers that
      catch the builtin categories keep working
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - Subclasses copy a caller-supplied ErrorContext before filling in field/value
"""

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and caller handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    BOUNDARY = "boundary"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    field_name: str | None = None
    value: Any = None
    debug_info: dict[str, Any] | None = None


class WirestampError(Exception):
    """Base exception for all Wirestamp errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    @property
    def recoverable(self) -> bool:
        return self.severity in (ErrorSeverity.INFO, ErrorSeverity.WARNING)

    def to_dict(self) -> dict:
        """Convert to a flat error envelope."""
        return {
            "code": self.code,
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "recoverable": self.recoverable,
            "timestamp": self.context.timestamp.isoformat(),
            "field": self.context.field_name,
            "value": repr(self.context.value),
        }


# ─── Construction Errors (programmer errors) ────────────────────

class TimestampRangeError(WirestampError, ValueError):
    """Seconds or nanoseconds outside the supported calendar range."""
    def __init__(
        self, field: str, value: int, lower: int, upper: int,
        context: ErrorContext | None = None,
    ):
        ctx = replace(context or ErrorContext(), field_name=field, value=value)
        super().__init__(
            f"Timestamp {field} out of range: {value} not in [{lower}, {upper}]",
            "TIMESTAMP_OUT_OF_RANGE", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.field = field
        self.lower = lower
        self.upper = upper


class TimestampTypeError(WirestampError, TypeError):
    """Timestamp input is not an integral value or not a usable time point."""
    def __init__(self, field: str, value: Any, reason: str, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), field_name=field, value=value)
        super().__init__(
            f"Timestamp {field} {reason}: got {type(value).__name__}",
            "TIMESTAMP_INVALID_TYPE", ErrorCategory.VALIDATION,
            ErrorSeverity.CRITICAL, ctx,
        )
        self.field = field


# ─── Boundary Errors ────────────────────────────────────────────

class MalformedTimestampPayloadError(WirestampError):
    """Wire payload could not be turned into a valid Timestamp."""
    def __init__(self, message: str, field: str | None = None, context: ErrorContext | None = None):
        ctx = replace(context or ErrorContext(), field_name=field)
        super().__init__(
            f"Malformed timestamp payload: {message}",
            "MALFORMED_TIMESTAMP_PAYLOAD", ErrorCategory.BOUNDARY,
            ErrorSeverity.ERROR, ctx,
        )
        self.field = field
