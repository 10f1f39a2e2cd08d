"""
Service layer for creating and updating media items.

The service is the persistence boundary: it builds items through the model
factories, refreshes the derived aspect ratio explicitly and saves inside a
transaction, so a failure leaves nothing behind.

Usage:
    from media_library.services import MediaItemService

    item = MediaItemService.create_from_local_path(path, folder, user)
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from django.db import transaction

from media_library.exceptions import MediaLibraryError
from media_library.files import SourceFile
from media_library.models import MediaFolder, MediaItem
from media_library.types import StorageType

logger = logging.getLogger(__name__)


class MediaItemService:
    """Create and update MediaItem records."""

    @staticmethod
    def create_from_local_path(
        path: str | Path,
        folder: MediaFolder,
        user: Any,
    ) -> MediaItem:
        """
        Create and save a media item for a local file.

        Args:
            path: Path of the stored file.
            folder: Folder the item is added to.
            user: User adding the item.

        Returns:
            The saved MediaItem.

        Raises:
            UnsupportedSourceError: If the path is not an existing regular file.
            UnreadableImageError: If a raster image header cannot be parsed.
            MalformedMarkupError: If an SVG file is not well-formed XML.
        """
        try:
            source = SourceFile.from_path(path)
            media_item = MediaItem.create_from_local_storage_type(source, folder, user)
        except MediaLibraryError as e:
            logger.warning(
                "Could not create media item from path",
                extra={"path": str(path), "error_code": e.error_code},
            )
            raise

        MediaItemService.save(media_item)

        logger.info(
            "Created media item",
            extra={
                "media_item_id": str(media_item.pk),
                "media_type": media_item.media_type,
                "resolution": str(media_item.resolution),
                "aspect_ratio": media_item.aspect_ratio,
            },
        )

        return media_item

    @staticmethod
    def create_from_movie_url(
        storage_type: StorageType,
        movie_id: str,
        title: str,
        folder: MediaFolder,
        user: Any,
    ) -> MediaItem:
        """Create and save a media item referencing a remotely hosted movie."""
        media_item = MediaItem.create_from_movie_url(
            storage_type, movie_id, title, folder, user
        )
        MediaItemService.save(media_item)

        logger.info(
            "Created movie media item",
            extra={
                "media_item_id": str(media_item.pk),
                "storage_type": media_item.storage_type,
            },
        )

        return media_item

    @staticmethod
    def update(
        media_item: MediaItem,
        *,
        title: str | None = None,
        folder: MediaFolder | None = None,
        url: str | None = None,
    ) -> MediaItem:
        """
        Update the editable fields of an existing item.

        Raises:
            ValueError: If the item has not been saved yet.
        """
        if media_item._state.adding:
            raise ValueError("This method can not be used to create a new media item")

        if title is not None:
            media_item.title = title
        if folder is not None:
            media_item.folder = folder
        if url is not None:
            media_item.url = url

        MediaItemService.save(media_item)
        return media_item

    @staticmethod
    def set_resolution(media_item: MediaItem, width: int, height: int) -> MediaItem:
        """Change an item's resolution and persist it with its new aspect ratio."""
        media_item.set_resolution(width, height)
        MediaItemService.save(media_item)
        return media_item

    @staticmethod
    def save(media_item: MediaItem) -> None:
        """Refresh derived fields and save the item atomically."""
        media_item.refresh_aspect_ratio()
        with transaction.atomic():
            media_item.save()
