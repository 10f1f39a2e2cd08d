"""
MediaGroup and MediaGroupMediaItem models.

A group is an ordered selection of media items, for example the images of a
gallery block. A group may be restricted to a single media type.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from django.db import models, transaction

from core.models import BaseModel, UUIDPrimaryKeyMixin
from media_library.exceptions import MediaGroupTypeMismatchError
from media_library.types import MediaType

if TYPE_CHECKING:
    from media_library.models.media_item import MediaItem


class MediaGroup(UUIDPrimaryKeyMixin, BaseModel):
    """
    Ordered collection of media items.

    Attributes:
        media_type: Only items of this type may be added. Empty accepts all.
    """

    media_type = models.CharField(
        max_length=20,
        choices=MediaType.choices,
        blank=True,
        null=True,
        help_text="Restrict the group to one media type (empty accepts all)",
    )

    class Meta:
        verbose_name = "Media Group"
        verbose_name_plural = "Media Groups"
        ordering = ["-created_at"]

    def accepts(self, media_item: "MediaItem") -> bool:
        return self.media_type is None or self.media_type == media_item.media_type

    def add_item(
        self,
        media_item: "MediaItem",
        sequence: int | None = None,
    ) -> "MediaGroupMediaItem":
        """
        Add an item to the group, at the end unless a sequence is given.

        Raises:
            MediaGroupTypeMismatchError: If the group does not accept the
                item's media type.
        """
        if not self.accepts(media_item):
            raise MediaGroupTypeMismatchError(
                f'Group only accepts "{self.media_type}" items.',
                details={
                    "group_id": str(self.pk),
                    "media_item_id": str(media_item.pk),
                    "media_type": media_item.media_type,
                },
            )

        with transaction.atomic():
            if sequence is None:
                last = self.item_links.aggregate(last=models.Max("sequence"))["last"]
                sequence = 0 if last is None else last + 1

            link, _ = MediaGroupMediaItem.objects.update_or_create(
                group=self,
                item=media_item,
                defaults={"sequence": sequence},
            )

        return link

    def get_items(self) -> models.QuerySet:
        """Items of the group in sequence order."""
        from media_library.models.media_item import MediaItem

        return MediaItem.objects.filter(group_links__group=self).order_by(
            "group_links__sequence"
        )


class MediaGroupMediaItem(BaseModel):
    """Places a media item at a position in a group."""

    group = models.ForeignKey(
        MediaGroup,
        on_delete=models.CASCADE,
        related_name="item_links",
    )

    item = models.ForeignKey(
        "media_library.MediaItem",
        on_delete=models.CASCADE,
        related_name="group_links",
    )

    sequence = models.PositiveIntegerField(
        default=0,
        help_text="Position of the item within the group",
    )

    class Meta:
        verbose_name = "Media Group Item"
        verbose_name_plural = "Media Group Items"
        ordering = ["sequence"]
        constraints = [
            models.UniqueConstraint(
                fields=["group", "item"],
                name="media_group_item_unique",
            ),
        ]

    def __str__(self) -> str:
        return f"{self.group_id}#{self.sequence}"
