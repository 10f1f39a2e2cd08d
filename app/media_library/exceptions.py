"""
Media library exceptions.

Exception Hierarchy:
    MediaLibraryError (base)
    ├── UnsupportedSourceError - path is not an existing regular file
    ├── UnreadableImageError - raster header cannot be parsed
    ├── MalformedMarkupError - SVG is not well-formed XML
    ├── StorageProviderNotConfiguredError - no provider for a storage type
    └── MediaGroupTypeMismatchError - item type not accepted by a group

All of them are permanent for the item being processed: the cause is a
corrupt or missing source or a configuration problem, so callers report
the failure instead of retrying.
"""

from __future__ import annotations

from core.exceptions import BaseApplicationError, NotFoundError, ValidationError


class MediaLibraryError(BaseApplicationError):
    """Base exception for media library failures."""

    default_error_code: str = "MEDIA_LIBRARY_ERROR"


class UnsupportedSourceError(MediaLibraryError, NotFoundError):
    """Raised when a source path does not resolve to an existing regular file."""

    default_error_code: str = "UNSUPPORTED_SOURCE"


class UnreadableImageError(MediaLibraryError):
    """Raised when a raster image header cannot be parsed (corrupt or unsupported codec)."""

    default_error_code: str = "UNREADABLE_IMAGE"


class MalformedMarkupError(MediaLibraryError):
    """Raised when an SVG file is not well-formed XML."""

    default_error_code: str = "MALFORMED_MARKUP"


class StorageProviderNotConfiguredError(MediaLibraryError):
    """Raised when no storage provider is registered for a storage type."""

    default_error_code: str = "STORAGE_PROVIDER_NOT_CONFIGURED"


class MediaGroupTypeMismatchError(MediaLibraryError, ValidationError):
    """Raised when an item is added to a group restricted to another media type."""

    default_error_code: str = "MEDIA_GROUP_TYPE_MISMATCH"
