"""Tests for MediaItemSerializer."""

from __future__ import annotations

import pytest

from media_library.serializers import MediaItemSerializer
from media_library.tests.factories import MediaItemFactory
from media_library.types import MediaType, StorageType


@pytest.mark.django_db
class TestMediaItemSerializer:
    def test_image_representation(self):
        item = MediaItemFactory(sharding_folder_name="a1", url="photo.jpg")
        item.set_resolution(1920, 1080)
        item.save()
        item.refresh_from_db()

        data = MediaItemSerializer(item).data

        assert data["id"] == str(item.id)
        assert data["media_type"] == "image"
        assert data["image"] is True
        assert data["full_url"] == "a1/photo.jpg"
        assert data["width"] == 1920
        assert data["height"] == 1080
        assert data["aspect_ratio"] == "16:9"
        assert data["source"] == "/media/media_library/a1/photo.jpg"
        assert data["direct_url"] == "/media/media_library/a1/photo.jpg"
        assert (
            data["preview_source"]
            == "/media/media_library/cache/backend/a1/photo.jpg"
        )

    def test_preview_filter_setting(self, settings):
        settings.MEDIA_LIBRARY_PREVIEW_FILTER = "thumb_small"
        item = MediaItemFactory(sharding_folder_name="a1", url="photo.jpg")

        data = MediaItemSerializer(item).data

        assert data["preview_source"] == "/media/media_library/cache/thumb_small/a1/photo.jpg"

    def test_document_has_no_resolution(self):
        item = MediaItemFactory(media_type=MediaType.DOCUMENT, url="report.pdf")
        item.refresh_from_db()

        data = MediaItemSerializer(item).data

        assert data["document"] is True
        assert "image" not in data
        assert data["width"] is None
        assert data["aspect_ratio"] is None

    def test_unconfigured_provider_gives_no_paths(self):
        item = MediaItemFactory(
            storage_type=StorageType.YOUTUBE,
            media_type=MediaType.MOVIE,
            mime=None,
            sharding_folder_name=None,
            url="dQw4w9WgXcQ",
            size=None,
        )
        item.refresh_from_db()

        data = MediaItemSerializer(item).data

        assert data["movie"] is True
        assert data["source"] is None
        assert data["preview_source"] is None
        assert data["direct_url"] is None

    def test_fields_are_read_only(self):
        serializer = MediaItemSerializer(
            data={"title": "new", "width": 10, "aspect_ratio": "square"}
        )

        assert serializer.is_valid()
        assert serializer.validated_data == {}
