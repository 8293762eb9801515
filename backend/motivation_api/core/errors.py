"""Error Hierarchy: typed, categorized exceptions for quote fetching and the API.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - QuoteAttemptError subclasses never escape the retry loop; they are logged
      and collapsed into a single "attempt failed" signal
    - to_response() never includes upstream bodies or credentials
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from motivation_api.core.domain_types import AttemptOutcome


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"
    MALFORMED_RESPONSE = "malformed_response"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context attached to an error for logs."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    attempt: int | None = None
    status_code: int | None = None


class MotivationError(Exception):
    """Base exception for all Motivation API errors."""

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
            }
        }


# ─── Attempt Errors (collapsed inside the retry loop) ────────────

class QuoteAttemptError(MotivationError):
    """One outbound attempt failed. Subclasses name the failure kind."""
    outcome: AttemptOutcome = AttemptOutcome.TRANSPORT_ERROR

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message, code, category, ErrorSeverity.WARNING, context, 502,
        )


class TransportError(QuoteAttemptError):
    """Connection failure or per-attempt timeout."""

    def __init__(
        self, message: str, timed_out: bool = False,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            message,
            "UPSTREAM_TIMEOUT" if timed_out else "UPSTREAM_UNREACHABLE",
            ErrorCategory.TIMEOUT if timed_out else ErrorCategory.EXTERNAL_API,
            context,
        )
        self.timed_out = timed_out
        self.outcome = (
            AttemptOutcome.TIMEOUT if timed_out else AttemptOutcome.TRANSPORT_ERROR
        )


class UpstreamStatusError(QuoteAttemptError):
    """Gemini answered with a non-2xx status."""
    outcome = AttemptOutcome.HTTP_STATUS

    def __init__(self, status_code: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.status_code = status_code
        super().__init__(
            f"HTTP error! status: {status_code}",
            "UPSTREAM_HTTP_ERROR", ErrorCategory.EXTERNAL_API, ctx,
        )
        self.status_code = status_code


class MalformedResponseError(QuoteAttemptError):
    """Envelope or nested quote text is not the expected JSON shape."""
    outcome = AttemptOutcome.MALFORMED_RESPONSE

    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "MALFORMED_RESPONSE",
            ErrorCategory.MALFORMED_RESPONSE, context,
        )


class IncompleteQuoteError(QuoteAttemptError):
    """Parsed object lacks a non-empty quote or author string."""
    outcome = AttemptOutcome.INCOMPLETE_QUOTE

    def __init__(self, missing: list[str], context: ErrorContext | None = None):
        super().__init__(
            f"Missing or empty quote fields: {', '.join(missing)}",
            "INCOMPLETE_QUOTE", ErrorCategory.VALIDATION, context,
        )
        self.missing = missing


# ─── Service Errors ──────────────────────────────────────────────

class ConfigurationError(MotivationError):
    """Settings cannot produce a usable QuoteRequestConfig."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, context, 500,
        )
