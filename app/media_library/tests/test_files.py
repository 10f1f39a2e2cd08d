"""Tests for source file access and MIME detection."""

from __future__ import annotations

from unittest.mock import patch

import magic
import pytest

from media_library.exceptions import UnsupportedSourceError
from media_library.files import SourceFile, detect_mime_type


class TestDetectMimeType:
    def test_jpeg(self, sample_jpeg):
        assert detect_mime_type(sample_jpeg) == "image/jpeg"

    def test_png(self, sample_png):
        assert detect_mime_type(sample_png) == "image/png"

    def test_detection_uses_content_not_extension(self, sample_png, make_file):
        disguised = make_file("logo.jpg", sample_png.read_bytes())

        assert detect_mime_type(disguised) == "image/png"

    def test_empty_file(self, make_file):
        assert detect_mime_type(make_file("empty.txt", b"")) is None

    def test_missing_file(self, media_library_root, caplog):
        with caplog.at_level("WARNING", logger="media_library.files"):
            result = detect_mime_type(media_library_root / "missing.jpg")

        assert result is None
        assert "Could not read file for MIME detection" in caplog.text

    def test_libmagic_failure(self, sample_jpeg):
        with patch(
            "media_library.files.magic.from_buffer",
            side_effect=magic.MagicException("database not loaded"),
        ):
            assert detect_mime_type(sample_jpeg) is None


class TestSourceFile:
    def test_metadata(self, sample_jpeg):
        source = SourceFile.from_path(sample_jpeg)

        assert source.filename == "photo.jpg"
        assert source.extension == "jpg"
        assert source.title == "photo"
        assert source.size == sample_jpeg.stat().st_size
        assert source.sharding_folder_name == "a1"
        assert source.mime_type == "image/jpeg"

    def test_accepts_string_path(self, sample_jpeg):
        source = SourceFile.from_path(str(sample_jpeg))

        assert source.path == sample_jpeg.absolute()

    def test_extension_keeps_case(self, make_image):
        source = SourceFile.from_path(make_image("Holiday.JPG"))

        assert source.extension == "JPG"
        assert source.title == "Holiday"

    def test_only_final_suffix_is_the_extension(self, make_file):
        source = SourceFile.from_path(make_file("backup.tar.gz", b"\x1f\x8b\x08\x00"))

        assert source.extension == "gz"
        assert source.title == "backup.tar"

    def test_missing_path(self, media_library_root):
        missing = media_library_root / "a1" / "gone.jpg"

        with pytest.raises(UnsupportedSourceError) as exc_info:
            SourceFile.from_path(missing)

        assert str(missing) in exc_info.value.message
        assert exc_info.value.error_code == "UNSUPPORTED_SOURCE"

    def test_directory(self, storage_dir):
        with pytest.raises(UnsupportedSourceError) as exc_info:
            SourceFile.from_path(storage_dir)

        assert exc_info.value.message == "The given source is not a file."
