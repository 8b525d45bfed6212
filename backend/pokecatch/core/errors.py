"""Error Hierarchy — typed, categorized exceptions for all Pokecatch failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages
    - "Record missing" and "record owned by someone else" share one error (no enumeration)

Design Decisions:
    - Single hierarchy with PokecatchError base: FastAPI global handler catches all
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
    AUTHENTICATION = "authentication"
    RESOURCE_NOT_FOUND = "resource_not_found"
    CONFLICT = "conflict"
    DATABASE = "database"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    user_id: str | None = None
    resource_id: str | None = None
    debug_info: dict[str, Any] | None = None


class PokecatchError(Exception):
    """Base exception for all Pokecatch errors."""

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


# ─── Credential Errors ──────────────────────────────────────────

class DuplicateCredentialError(PokecatchError):
    """Registration attempted with an email that already exists."""
    def __init__(self, email: str, context: ErrorContext | None = None):
        super().__init__(
            "Email already exists", "DUPLICATE_CREDENTIAL",
            ErrorCategory.CONFLICT, ErrorSeverity.WARNING, context, 409,
        )
        self.email = email


class UserNotFoundError(PokecatchError):
    """Login attempted for an email with no account."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "User not found", "USER_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, context, 404,
        )


class InvalidCredentialError(PokecatchError):
    """Password did not match the stored hash."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Invalid credentials", "INVALID_CREDENTIALS",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


# ─── Token / Auth Gate Errors ───────────────────────────────────

class TokenInvalidError(PokecatchError):
    """Token signature mismatch, malformed structure or missing claims."""
    def __init__(self, reason: str = "Invalid token", context: ErrorContext | None = None):
        super().__init__(
            reason, "TOKEN_INVALID",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class TokenExpiredError(PokecatchError):
    """Token is past its expiry instant."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Token has expired", "TOKEN_EXPIRED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


class UnauthorizedError(PokecatchError):
    """Protected operation attempted without a valid bearer token."""
    def __init__(self, reason: str = "YOU ARE UNAUTHORIZED", context: ErrorContext | None = None):
        super().__init__(
            reason, "UNAUTHORIZED",
            ErrorCategory.AUTHENTICATION, ErrorSeverity.WARNING, context, 401,
        )


# ─── Ownership Errors ───────────────────────────────────────────

class InputValidationError(PokecatchError):
    """Domain-level input validation failed."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class NotFoundOrForbiddenError(PokecatchError):
    """Ownership record does not exist or belongs to another user."""
    def __init__(self, record_id: str, context: ErrorContext | None = None):
        super().__init__(
            "Pokemon not found or not owned by user", "NOT_FOUND_OR_FORBIDDEN",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, context, 404,
        )
        self.record_id = record_id


# ─── External Catalog Errors ────────────────────────────────────

class CreatureNotFoundError(PokecatchError):
    """External catalog has no creature by that name."""
    def __init__(self, name: str, context: ErrorContext | None = None):
        super().__init__(
            "Your Pokémon was not found!", "CREATURE_NOT_FOUND",
            ErrorCategory.RESOURCE_NOT_FOUND, ErrorSeverity.WARNING, context, 404,
        )
        self.name = name


class CatalogLookupError(PokecatchError):
    """External catalog call failed (timeout, 5xx, connection, unexpected 4xx)."""
    def __init__(self, message: str, lookup_error_type: str, context: ErrorContext | None = None):
        super().__init__(
            "An error occurred while fetching the Pokémon data",
            "CATALOG_LOOKUP_FAILED", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, context, 502,
        )
        self.detail = message
        self.lookup_error_type = lookup_error_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StoreUnavailableError(PokecatchError):
    """Database operation failed for a reason other than a domain constraint."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            "The service is temporarily unavailable",
            "STORE_UNAVAILABLE", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.detail = f"Database {operation} failed: {message}"
        self.operation = operation
