"""
Core Application - Infrastructure & Base Classes

This app contains infrastructure code shared by the domain apps:

- Generic, reusable base classes (no domain-specific logic)
- Infrastructure endpoints (health check)

Models (import from core.models):
    - UUIDPrimaryKeyMixin: UUID as primary key
    - BaseModel: Abstract model with timestamps (created_at, updated_at)

Exceptions (import from core.exceptions):
    - BaseApplicationError: Base exception with error codes
    - ValidationError: Input validation failures
    - NotFoundError: Resource not found

Usage:
    from core.exceptions import NotFoundError
    from core.models import BaseModel, UUIDPrimaryKeyMixin

Note:
    Django models are NOT imported here to avoid AppRegistryNotReady
    errors. Import them directly from their modules.
"""

from .exceptions import BaseApplicationError, NotFoundError, ValidationError

__all__ = [
    "BaseApplicationError",
    "ValidationError",
    "NotFoundError",
]
