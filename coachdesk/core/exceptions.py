"""
Exception hierarchy for the coaching workspace.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging, and
their message is safe to return to the caller.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CoachDeskException(Exception):
    """Base exception for all coaching workspace errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class ValidationError(CoachDeskException):
    """Raised when input validation fails."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class NotFoundError(CoachDeskException):
    """Raised when a row does not exist or is not owned by the caller."""

    def __init__(
        self,
        entity: str,
        entity_id: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            entity: Entity label used in the message ("Client", "Session", ...)
            entity_id: ID that was looked up
            details: Additional context
        """
        details = details or {}
        if entity_id is not None:
            details[f"{entity.lower().replace(' ', '_')}_id"] = str(entity_id)
        self.entity = entity
        super().__init__(f"{entity} not found", details)


class ConflictError(CoachDeskException):
    """Raised when an operation conflicts with existing state."""

    pass


class AuthenticationError(CoachDeskException):
    """Raised when the caller cannot be identified."""

    pass


class APIKeyNotConfiguredError(CoachDeskException):
    """Raised when an AI feature is used without a usable Claude API key."""

    pass


class AIServiceError(CoachDeskException):
    """Raised when the Claude API call fails."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize AI service error.

        Args:
            message: User-facing error message
            status_code: Upstream HTTP status if the API answered
            details: Additional context
        """
        details = details or {}
        if status_code is not None:
            details["status_code"] = status_code
        self.status_code = status_code
        super().__init__(message, details)


class StorageError(CoachDeskException):
    """Raised when object storage operations fail."""

    def __init__(
        self,
        message: str,
        key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize storage error.

        Args:
            message: Error message
            key: Object key involved in the failure
            details: Additional context
        """
        details = details or {}
        if key:
            details["key"] = key
        super().__init__(message, details)


class ParsingError(CoachDeskException):
    """Raised when text extraction from an uploaded document fails."""

    def __init__(
        self,
        message: str,
        file_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize parsing error.

        Args:
            message: Error message
            file_type: Type of file that failed parsing
            details: Additional context
        """
        details = details or {}
        if file_type:
            details["file_type"] = file_type
        super().__init__(message, details)
