"""
Exception hierarchy for the CareerValid application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CareerValidException(Exception):
    """Base exception for all CareerValid application errors."""

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


class ValidationError(CareerValidException):
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
        self.field = field
        super().__init__(message, details)


class DuplicateSkillError(ValidationError):
    """Raised when a skill with the same name already exists in the session."""

    def __init__(self, skill_name: str, session_id: str | None = None) -> None:
        """
        Initialize duplicate skill error.

        Args:
            skill_name: Name of the rejected skill
            session_id: Session the skill was submitted to
        """
        details = {"session_id": session_id} if session_id else {}
        self.skill_name = skill_name
        super().__init__(
            f"Skill '{skill_name}' already exists",
            field="skillName",
            details=details,
        )


class SessionNotFoundError(CareerValidException):
    """Raised when a session cannot be found."""

    def __init__(self, session_id: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize session not found error.

        Args:
            session_id: ID of the missing session
            details: Additional context
        """
        details = details or {}
        details["session_id"] = session_id
        self.session_id = session_id
        super().__init__(f"Session not found: {session_id}", details)


class UpstreamError(CareerValidException):
    """Raised when the GitHub API, the AI service or a portfolio site fails."""

    def __init__(
        self,
        message: str,
        service: str,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize upstream error.

        Args:
            message: Error message
            service: Upstream service name (github, gemini, portfolio)
            status_code: HTTP status returned by the upstream, if any
            details: Additional context
        """
        details = details or {}
        details["service"] = service
        if status_code is not None:
            details["status_code"] = status_code
        self.service = service
        self.status_code = status_code
        super().__init__(message, details)
