"""
MediaItem model: a single file (or remote movie) in the media library.

Provides:
- UUID primary key
- Media type classification at creation time
- Resolution and aspect ratio kept consistent through set_resolution()
- Storage-provider dispatch for paths, URLs and HTML
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from django.conf import settings
from django.db import models

from core.models import BaseModel, UUIDPrimaryKeyMixin
from media_library.classification import classify
from media_library.resolution import resolve
from media_library.types import AspectRatio, MediaType, Resolution, StorageType

if TYPE_CHECKING:
    from media_library.files import SourceFile
    from media_library.models.media_folder import MediaFolder
    from media_library.storage import StorageProvider


class MediaItem(UUIDPrimaryKeyMixin, BaseModel):
    """
    A media item stored locally or referenced on a remote movie host.

    Attributes:
        folder: Folder the item lives in.
        user: User who added the item.
        storage_type: Where the content is stored (local, youtube, vimeo).
        media_type: Canonical category (image, movie, audio, ...).
        mime: MIME type detected from the content, empty for remote movies.
        sharding_folder_name: Directory the stored file lives in.
        url: Stored filename, or the remote movie id.
        title: Display title.
        size: File size in bytes, empty for remote movies.

    Resolution Fields (written only by set_resolution):
        width: Width in pixels, images only.
        height: Height in pixels, images only.
        aspect_ratio: Bucket derived from width and height.
    """

    # =========================================================================
    # Core Fields
    # =========================================================================

    folder = models.ForeignKey(
        "media_library.MediaFolder",
        on_delete=models.CASCADE,
        related_name="items",
        help_text="Folder containing this item",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="media_items",
        help_text="User who added this item",
    )

    storage_type = models.CharField(
        max_length=20,
        choices=StorageType.choices,
        default=StorageType.LOCAL,
        help_text="Storage backend holding the content",
    )

    media_type = models.CharField(
        max_length=20,
        choices=MediaType.choices,
        db_index=True,
        help_text="Category of media (image, movie, audio, document, archive, other)",
    )

    mime = models.CharField(
        max_length=127,
        blank=True,
        null=True,
        help_text="Detected MIME type (e.g., image/jpeg)",
    )

    sharding_folder_name = models.CharField(
        max_length=255,
        blank=True,
        null=True,
        help_text="Directory the stored file lives in",
    )

    url = models.CharField(
        max_length=255,
        help_text="Stored filename, or the remote movie id",
    )

    title = models.CharField(
        max_length=255,
        help_text="Display title",
    )

    size = models.BigIntegerField(
        blank=True,
        null=True,
        help_text="File size in bytes",
    )

    # =========================================================================
    # Resolution Fields
    # =========================================================================

    width = models.PositiveIntegerField(
        blank=True,
        null=True,
        editable=False,
        help_text="Width in pixels (images only)",
    )

    height = models.PositiveIntegerField(
        blank=True,
        null=True,
        editable=False,
        help_text="Height in pixels (images only)",
    )

    aspect_ratio = models.CharField(
        max_length=20,
        choices=AspectRatio.choices,
        blank=True,
        null=True,
        editable=False,
        help_text="Aspect-ratio bucket derived from width and height",
    )

    groups = models.ManyToManyField(
        "media_library.MediaGroup",
        through="media_library.MediaGroupMediaItem",
        related_name="items",
    )

    class Meta:
        verbose_name = "Media Item"
        verbose_name_plural = "Media Items"
        ordering = ["-created_at"]

        indexes = [
            models.Index(
                fields=["folder", "media_type"],
                name="media_item_folder_type_idx",
            ),
        ]

        constraints = [
            # Width and height are set together or not at all
            models.CheckConstraint(
                condition=(
                    models.Q(width__isnull=True, height__isnull=True)
                    | models.Q(width__isnull=False, height__isnull=False)
                ),
                name="media_item_resolution_complete",
            ),
        ]

    def __str__(self) -> str:
        return self.title

    # =========================================================================
    # Factories
    # =========================================================================

    @classmethod
    def create_from_local_storage_type(
        cls,
        source: "SourceFile",
        folder: "MediaFolder",
        user: Any,
    ) -> "MediaItem":
        """
        Build an unsaved MediaItem from a local file.

        Classifies the file, copies its metadata and, for images, reads
        its resolution.

        Raises:
            UnreadableImageError: If a raster image header cannot be parsed.
            MalformedMarkupError: If an SVG file is not well-formed XML.
        """
        mime = source.mime_type
        media_type = classify(source.filename, mime)

        media_item = cls(
            folder=folder,
            user=user,
            storage_type=StorageType.LOCAL,
            media_type=media_type,
            mime=mime,
            sharding_folder_name=source.sharding_folder_name,
            url=source.filename,
            title=source.title,
            size=source.size,
        )

        resolution = resolve(source.path, media_type, mime)
        if resolution is not None:
            media_item.set_resolution(*resolution)

        return media_item

    @classmethod
    def create_from_movie_url(
        cls,
        storage_type: StorageType,
        movie_id: str,
        title: str,
        folder: "MediaFolder",
        user: Any,
    ) -> "MediaItem":
        """Build an unsaved MediaItem referencing a movie on a remote host."""
        return cls(
            folder=folder,
            user=user,
            storage_type=StorageType(storage_type),
            media_type=MediaType.MOVIE,
            url=movie_id,
            title=title,
        )

    # =========================================================================
    # Resolution
    # =========================================================================

    def set_resolution(self, width: int, height: int) -> "MediaItem":
        """
        Set width and height and derive the aspect ratio from them.

        This is the only way resolution fields are written.

        Raises:
            ValueError: If either dimension is negative.
        """
        if width < 0 or height < 0:
            raise ValueError(
                f"Resolution must be non-negative, got {width}x{height}"
            )

        self.width = int(width)
        self.height = int(height)
        self.refresh_aspect_ratio()

        return self

    def refresh_aspect_ratio(self) -> None:
        """
        Recompute aspect_ratio from width and height.

        Called by set_resolution() and by the service layer before every
        save, so a stored aspect ratio always matches the stored resolution.
        """
        if self.width is None or self.height is None:
            self.aspect_ratio = None
            return

        self.aspect_ratio = AspectRatio.from_width_and_height(self.width, self.height)

    @property
    def resolution(self) -> Resolution | None:
        if self.width is None or self.height is None:
            return None
        return Resolution(self.width, self.height)

    def get_aspect_ratio(self) -> AspectRatio | None:
        if self.aspect_ratio is None:
            return None
        return AspectRatio(self.aspect_ratio)

    # =========================================================================
    # Paths and URLs
    # =========================================================================

    @property
    def full_url(self) -> str:
        return f"{self.sharding_folder_name}/{self.url}"

    @property
    def storage_provider(self) -> "StorageProvider":
        from media_library.storage import storage_manager

        return storage_manager.get_storage_provider(self.storage_type)

    def get_absolute_path(self) -> str:
        return self.storage_provider.get_absolute_path(self)

    def get_absolute_web_path(self) -> str:
        return self.storage_provider.get_absolute_web_path(self)

    def get_link_html(self) -> str:
        return self.storage_provider.get_link_html(self)

    def get_include_html(self) -> str:
        return self.storage_provider.get_include_html(self)

    def get_web_path(self, filter_name: str | None = None) -> str:
        """
        Web path of the item, or of a named rendition when the provider
        supports renditions.
        """
        from media_library.storage import FilteredStorageProvider

        provider = self.storage_provider
        if filter_name is None or not isinstance(provider, FilteredStorageProvider):
            return provider.get_web_path(self)

        return provider.get_web_path_with_filter(self, filter_name)

    def get_thumbnail(self, filter_name: str | None = None) -> str:
        from media_library.storage import FilteredStorageProvider

        provider = self.storage_provider
        if filter_name is None or not isinstance(provider, FilteredStorageProvider):
            return provider.get_thumbnail(self)

        return provider.get_web_path_with_filter(self, filter_name)

    # =========================================================================
    # Groups
    # =========================================================================

    def has_groups(self) -> bool:
        return self.group_links.exists()
