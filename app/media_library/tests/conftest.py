"""
Test fixtures for the media library app.

Provides fixtures for:
- Users and folders
- Stored source files (raster images, SVG documents, other files) written
  into a sharding folder under the test's MEDIA_LIBRARY_ROOT
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from media_library.tests.factories import MediaFolderFactory, UserFactory

SHARDING_FOLDER = "a1"


@pytest.fixture
def user(db):
    return UserFactory()


@pytest.fixture
def folder(user):
    return MediaFolderFactory(user=user)


@pytest.fixture
def storage_dir(media_library_root: Path) -> Path:
    """Sharding folder that stored files are written to."""
    path = media_library_root / SHARDING_FOLDER
    path.mkdir(parents=True, exist_ok=True)
    return path


@pytest.fixture
def make_image(storage_dir: Path) -> Callable[..., Path]:
    """Write a raster image of the given size and format, return its path."""

    def _make_image(
        name: str = "photo.jpg",
        size: tuple[int, int] = (100, 100),
        image_format: str = "JPEG",
        mode: str = "RGB",
    ) -> Path:
        path = storage_dir / name
        Image.new(mode, size, color=0).save(path, format=image_format)
        return path

    return _make_image


@pytest.fixture
def make_file(storage_dir: Path) -> Callable[[str, str | bytes], Path]:
    """Write arbitrary content to a stored file, return its path."""

    def _make_file(name: str, content: str | bytes) -> Path:
        path = storage_dir / name
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_bytes(content)
        return path

    return _make_file


@pytest.fixture
def sample_jpeg(make_image) -> Path:
    return make_image("photo.jpg", (1920, 1080), "JPEG")


@pytest.fixture
def sample_png(make_image) -> Path:
    return make_image("logo.png", (640, 480), "PNG", mode="RGBA")


@pytest.fixture
def sample_svg(make_file) -> Path:
    return make_file(
        "icon.svg",
        '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 300 150">'
        '<rect width="10" height="10"/></svg>',
    )
