"""
Exception hierarchy for the blog posts API.

Raised by the domain model, use cases and repositories. Controllers and the
global exception handlers in main.py translate them into HTTP responses.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class BlogApiError(Exception):
    """Base exception for all blog API errors."""

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Request errors
# -----------------------------------------------------------------------------


class ValidationError(BlogApiError):
    """Raised when a create/update payload is missing or has empty fields."""
    pass


class NotFoundError(BlogApiError):
    """Raised when no post exists for the requested id."""

    def __init__(self, resource_id: str, resource: str = "Post"):
        super().__init__(
            f"{resource} {resource_id} not found",
            user_message=f"{resource} not found",
            details={"id": resource_id},
        )
        self.resource_id = resource_id


# -----------------------------------------------------------------------------
# Infrastructure
# -----------------------------------------------------------------------------


class PersistenceError(BlogApiError):
    """Raised when the document store fails (connectivity, write errors)."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message,
            user_message="A database error occurred. Please try again.",
            details=details,
        )
