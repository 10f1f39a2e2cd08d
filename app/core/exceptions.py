"""
Base exception classes for application-wide error handling.

Every domain error carries a human-readable message, a machine-readable
error code and optional details, so callers (services, tasks, API layers)
can report failures uniformly.

Exception Hierarchy:
    BaseApplicationError (base)
    ├── ValidationError - Input or business rule violations
    └── NotFoundError - A required resource does not exist

Usage:
    from core.exceptions import NotFoundError

    raise NotFoundError(
        "Source file does not exist",
        error_code="SOURCE_NOT_FOUND",
        details={"path": path},
    )

    try:
        ...
    except BaseApplicationError as e:
        logger.warning("Operation failed", extra=e.to_dict())
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import Any


class BaseApplicationError(Exception):
    """
    Base exception for all application-specific errors.

    Attributes:
        message: Human-readable error description
        error_code: Machine-readable code for client-side handling
        details: Additional error context (paths, field errors, etc.)
    """

    default_error_code: str = "APPLICATION_ERROR"

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.error_code = error_code or self.default_error_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to a dictionary for logging or API responses.

        Example:
            {
                "error": "Image header could not be read",
                "error_code": "UNREADABLE_IMAGE",
                "details": {"path": "/uploads/a.jpg"}
            }
        """
        result: dict[str, Any] = {
            "error": self.message,
            "error_code": self.error_code,
        }
        if self.details:
            result["details"] = self.details
        return result

    def __str__(self) -> str:
        return f"[{self.error_code}] {self.message}"

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code!r}, "
            f"details={self.details!r})"
        )


class ValidationError(BaseApplicationError):
    """
    Raised when input validation or a business rule fails.

    Note:
        For DRF serializer validation, use DRF's built-in validation.
        Use this for service-layer validation logic.
    """

    default_error_code: str = "VALIDATION_ERROR"


class NotFoundError(BaseApplicationError):
    """Raised when a resource that is expected to exist cannot be found."""

    default_error_code: str = "NOT_FOUND"
