"""Error Hierarchy — typed, categorized exceptions for all quote failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - User-input errors (400/404) are recoverable; internal errors (500) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with QuotesError base: the API layer matches on class,
      never on message text (ADR: stable error vocabulary across layers)
    - Store and service raise the same classes, so kind survives every layer boundary
"""

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
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


class QuotesError(Exception):
    """Base exception for all quote errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


# ─── User Input Errors (400/404) ────────────────────────────────

class EmptyAuthorError(QuotesError):
    """Author blank on create or filter."""
    def __init__(self):
        super().__init__(
            "Author cannot be empty", "EMPTY_AUTHOR",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
        )


class EmptyTextError(QuotesError):
    """Quote text blank on create."""
    def __init__(self):
        super().__init__(
            "Quote text cannot be empty", "EMPTY_TEXT",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
        )


class InvalidIDError(QuotesError):
    """Quote id is non-positive or outside the 64-bit range."""
    def __init__(self, quote_id: int | None = None):
        super().__init__(
            "Invalid quote ID", "INVALID_ID",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, 400,
        )
        self.quote_id = quote_id


class MissingParameterError(QuotesError):
    """Required query parameter absent or empty."""
    def __init__(self, parameter: str):
        super().__init__(
            f"{parameter.capitalize()} parameter is required",
            "MISSING_PARAMETER", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, 400,
        )
        self.parameter = parameter


class NoQuotesAvailableError(QuotesError):
    """Random quote requested from an empty store."""
    def __init__(self):
        super().__init__(
            "No quotes available", "NO_QUOTES_AVAILABLE",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )


class QuoteNotFoundError(QuotesError):
    """Delete target id is not in the store."""
    def __init__(self, quote_id: int):
        super().__init__(
            "Quote not found", "QUOTE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, 404,
        )
        self.quote_id = quote_id


# ─── Internal Errors (500) ──────────────────────────────────────

class MissingQuoteError(QuotesError):
    """create_quote called without a quote; a caller bug, not user input."""
    def __init__(self):
        super().__init__(
            "Quote cannot be None", "MISSING_QUOTE",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )


class InternalServiceError(QuotesError):
    """Unexpected failure behind a route. Message is generic; cause is chained."""
    def __init__(self, message: str):
        super().__init__(
            message, "INTERNAL_ERROR",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL, 500,
        )
