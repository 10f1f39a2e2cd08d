"""
Serializers for media library items.

Provides:
- MediaItemSerializer: Read-only representation of a MediaItem, including
  the web paths produced by the item's storage provider
"""

from __future__ import annotations

import logging
from typing import Any

from django.conf import settings
from rest_framework import serializers

from media_library.exceptions import StorageProviderNotConfiguredError
from media_library.models import MediaItem

logger = logging.getLogger(__name__)


class MediaItemSerializer(serializers.ModelSerializer):
    """
    Read-only serializer for MediaItem.

    Besides the model fields the representation carries:
        full_url: Sharding folder and stored filename.
        source / direct_url: Public web path of the item.
        preview_source: Web path of the preview rendition.
        <media_type>: Always True, e.g. ``"image": true``, so templates can
            branch on the type without comparing strings.

    Web paths are None when no storage provider is configured for the
    item's storage type.
    """

    full_url = serializers.CharField(read_only=True)
    source = serializers.SerializerMethodField()
    preview_source = serializers.SerializerMethodField()
    direct_url = serializers.SerializerMethodField()

    class Meta:
        model = MediaItem
        fields = [
            "id",
            "folder",
            "user",
            "media_type",
            "storage_type",
            "mime",
            "sharding_folder_name",
            "url",
            "full_url",
            "title",
            "size",
            "width",
            "height",
            "aspect_ratio",
            "created_at",
            "updated_at",
            "source",
            "preview_source",
            "direct_url",
        ]
        read_only_fields = fields

    def get_source(self, obj: MediaItem) -> str | None:
        return self._web_path(obj)

    def get_preview_source(self, obj: MediaItem) -> str | None:
        return self._web_path(obj, settings.MEDIA_LIBRARY_PREVIEW_FILTER)

    def get_direct_url(self, obj: MediaItem) -> str | None:
        return self._web_path(obj)

    def to_representation(self, instance: MediaItem) -> dict[str, Any]:
        data = super().to_representation(instance)
        data[instance.media_type] = True
        return data

    def _web_path(self, obj: MediaItem, filter_name: str | None = None) -> str | None:
        try:
            return obj.get_web_path(filter_name)
        except StorageProviderNotConfiguredError as e:
            logger.debug(
                "No web path for media item",
                extra={"media_item_id": str(obj.pk), "error_code": e.error_code},
            )
            return None
