"""
Storage providers turn a media item into paths, URLs and HTML.

Each StorageType is served by one provider. Providers are registered in the
MEDIA_LIBRARY_STORAGE_PROVIDERS setting as dotted class paths and looked up
through StorageManager:

    MEDIA_LIBRARY_STORAGE_PROVIDERS = {
        "local": "media_library.storage.LocalStorageProvider",
    }

    provider = storage_manager.get_storage_provider(item.storage_type)
    provider.get_web_path(item)

Providers that can serve resized renditions also implement
FilteredStorageProvider.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from django.conf import settings
from django.utils.html import format_html
from django.utils.module_loading import import_string

from media_library.exceptions import StorageProviderNotConfiguredError
from media_library.types import MediaType, StorageType

if TYPE_CHECKING:
    from media_library.models import MediaItem

logger = logging.getLogger(__name__)


# =============================================================================
# Interfaces
# =============================================================================


@runtime_checkable
class StorageProvider(Protocol):
    """Interface every storage provider implements."""

    def get_absolute_path(self, media_item: "MediaItem") -> str: ...

    def get_absolute_web_path(self, media_item: "MediaItem") -> str: ...

    def get_web_path(self, media_item: "MediaItem") -> str: ...

    def get_thumbnail(self, media_item: "MediaItem") -> str: ...

    def get_link_html(self, media_item: "MediaItem") -> str: ...

    def get_include_html(self, media_item: "MediaItem") -> str: ...


@runtime_checkable
class FilteredStorageProvider(StorageProvider, Protocol):
    """Provider that can serve a named image rendition (e.g. "backend")."""

    def get_web_path_with_filter(
        self, media_item: "MediaItem", filter_name: str
    ) -> str: ...


# =============================================================================
# Local Provider
# =============================================================================


class LocalStorageProvider:
    """
    Serves items stored under MEDIA_LIBRARY_ROOT.

    Files live at ``<root>/<sharding folder>/<url>`` and are published under
    MEDIA_LIBRARY_URL with the same relative path. Renditions are published
    under ``<MEDIA_LIBRARY_URL>cache/<filter>/``.
    """

    def __init__(
        self,
        root: str | Path | None = None,
        base_url: str | None = None,
        site_url: str | None = None,
    ) -> None:
        self.root = Path(root or settings.MEDIA_LIBRARY_ROOT)
        self.base_url = base_url or settings.MEDIA_LIBRARY_URL
        self.site_url = (site_url or settings.SITE_URL).rstrip("/")

    def get_absolute_path(self, media_item: "MediaItem") -> str:
        return str(self.root / media_item.full_url)

    def get_web_path(self, media_item: "MediaItem") -> str:
        return f"{self.base_url}{media_item.full_url}"

    def get_absolute_web_path(self, media_item: "MediaItem") -> str:
        return f"{self.site_url}{self.get_web_path(media_item)}"

    def get_thumbnail(self, media_item: "MediaItem") -> str:
        return self.get_web_path(media_item)

    def get_web_path_with_filter(
        self, media_item: "MediaItem", filter_name: str
    ) -> str:
        return f"{self.base_url}cache/{filter_name}/{media_item.full_url}"

    def get_link_html(self, media_item: "MediaItem") -> str:
        return format_html(
            '<a href="{}" title="{}">{}</a>',
            self.get_web_path(media_item),
            media_item.title,
            media_item.title,
        )

    def get_include_html(self, media_item: "MediaItem") -> str:
        if media_item.media_type != MediaType.IMAGE:
            return self.get_link_html(media_item)

        return format_html(
            '<img src="{}" width="{}" height="{}" alt="{}" title="{}" />',
            self.get_web_path(media_item),
            media_item.width or "",
            media_item.height or "",
            media_item.title,
            media_item.title,
        )


# =============================================================================
# Registry
# =============================================================================


class StorageManager:
    """
    Registry mapping storage types to provider instances.

    Providers are built lazily from dotted paths, once per manager.
    """

    def __init__(self, provider_paths: dict[str, str] | None = None) -> None:
        self._provider_paths = provider_paths
        self._providers: dict[str, StorageProvider] = {}

    @property
    def provider_paths(self) -> dict[str, str]:
        if self._provider_paths is None:
            return settings.MEDIA_LIBRARY_STORAGE_PROVIDERS
        return self._provider_paths

    def register(self, storage_type: StorageType, provider: StorageProvider) -> None:
        """Register a provider instance directly, replacing any existing one."""
        self._providers[StorageType(storage_type).value] = provider

    def get_storage_provider(self, storage_type: StorageType | str) -> StorageProvider:
        """
        Return the provider serving a storage type.

        Raises:
            StorageProviderNotConfiguredError: If no provider is registered.
        """
        key = StorageType(storage_type).value

        if key not in self._providers:
            dotted_path = self.provider_paths.get(key)
            if dotted_path is None:
                raise StorageProviderNotConfiguredError(
                    f'No storage provider configured for "{key}".',
                    details={"storage_type": key},
                )

            logger.debug(
                "Loading storage provider",
                extra={"storage_type": key, "provider": dotted_path},
            )
            self._providers[key] = import_string(dotted_path)()

        return self._providers[key]

    def reset(self) -> None:
        """Drop cached providers so settings changes are picked up."""
        self._providers.clear()


storage_manager = StorageManager()
