"""MediaFolder model: the folder tree media items are stored in."""

from __future__ import annotations

from django.conf import settings
from django.db import models

from core.models import BaseModel, UUIDPrimaryKeyMixin


class MediaFolder(UUIDPrimaryKeyMixin, BaseModel):
    """
    A folder in the media library.

    Attributes:
        name: Display name of the folder.
        parent: Enclosing folder, None for top-level folders.
        user: User who created the folder.
    """

    name = models.CharField(
        max_length=255,
        help_text="Display name of the folder",
    )

    parent = models.ForeignKey(
        "self",
        on_delete=models.CASCADE,
        null=True,
        blank=True,
        related_name="children",
        help_text="Enclosing folder (empty for top-level folders)",
    )

    user = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.CASCADE,
        related_name="media_folders",
        help_text="User who created the folder",
    )

    class Meta:
        verbose_name = "Media Folder"
        verbose_name_plural = "Media Folders"
        ordering = ["name"]

    def __str__(self) -> str:
        return self.name

    def has_items(self) -> bool:
        return self.items.exists()
