"""
Tests for resolution detection.

These tests verify:
- Raster sizes read from image headers
- SVG sizes from viewBox, width/height attributes and the fallback
- Truncation of fractional and unit-suffixed SVG numbers
- Errors for corrupt images, malformed SVG and missing files
"""

from __future__ import annotations

import pytest

from media_library.exceptions import (
    MalformedMarkupError,
    UnreadableImageError,
    UnsupportedSourceError,
)
from media_library.resolution import (
    SVG_FALLBACK_RESOLUTION,
    is_vector,
    resolve,
    resolve_svg,
    truncate,
)
from media_library.types import MediaType, Resolution

SVG_NS = 'xmlns="http://www.w3.org/2000/svg"'


def svg(attributes: str) -> str:
    return f"<svg {SVG_NS} {attributes}><rect/></svg>"


class TestResolveRaster:
    def test_jpeg(self, sample_jpeg):
        assert resolve(sample_jpeg, MediaType.IMAGE) == Resolution(1920, 1080)

    def test_png(self, sample_png):
        assert resolve(sample_png, MediaType.IMAGE, "image/png") == Resolution(640, 480)

    def test_gif(self, make_image):
        path = make_image("anim.gif", (32, 48), "GIF", mode="P")

        assert resolve(path, MediaType.IMAGE) == Resolution(32, 48)

    def test_corrupt_image(self, make_file):
        path = make_file("broken.jpg", b"this is not a jpeg at all")

        with pytest.raises(UnreadableImageError) as exc_info:
            resolve(path, MediaType.IMAGE, "image/jpeg")

        assert exc_info.value.details["path"] == str(path)

    def test_truncated_header(self, sample_jpeg, make_file):
        path = make_file("cut.jpg", sample_jpeg.read_bytes()[:8])

        with pytest.raises(UnreadableImageError):
            resolve(path, MediaType.IMAGE, "image/jpeg")


class TestResolveSvg:
    def test_view_box(self, sample_svg):
        assert resolve(sample_svg, MediaType.IMAGE) == Resolution(300, 150)

    def test_view_box_wins_over_width_and_height(self, make_file):
        path = make_file(
            "both.svg", svg('width="50" height="50" viewBox="0 0 300 150"')
        )

        assert resolve_svg(path) == Resolution(300, 150)

    def test_view_box_comma_separated(self, make_file):
        path = make_file("comma.svg", svg('viewBox="0,0,64,32"'))

        assert resolve_svg(path) == Resolution(64, 32)

    def test_view_box_fractions_are_truncated(self, make_file):
        path = make_file("fraction.svg", svg('viewBox="0 0 150.9 99.99"'))

        assert resolve_svg(path) == Resolution(150, 99)

    def test_width_and_height_attributes(self, make_file):
        path = make_file("sized.svg", svg('width="120px" height="80.7px"'))

        assert resolve_svg(path) == Resolution(120, 80)

    def test_only_width(self, make_file):
        path = make_file("wide.svg", svg('width="120"'))

        assert resolve_svg(path) == Resolution(120, 0)

    def test_no_size_uses_fallback(self, make_file):
        path = make_file("bare.svg", svg(""))

        assert resolve_svg(path) == SVG_FALLBACK_RESOLUTION == Resolution(200, 200)

    def test_zero_view_box_uses_fallback(self, make_file):
        path = make_file("zero.svg", svg('viewBox="0 0 0 0"'))

        assert resolve_svg(path) == SVG_FALLBACK_RESOLUTION

    def test_short_view_box_uses_fallback(self, make_file):
        path = make_file("short.svg", svg('viewBox="0 0"'))

        assert resolve_svg(path) == SVG_FALLBACK_RESOLUTION

    def test_detected_by_mime_type_without_extension(self, make_file):
        path = make_file("icon", svg('viewBox="0 0 10 20"'))

        assert resolve(path, MediaType.IMAGE, "image/svg+xml") == Resolution(10, 20)

    def test_malformed_markup(self, make_file):
        path = make_file("broken.svg", f"<svg {SVG_NS}><rect></svg>")

        with pytest.raises(MalformedMarkupError):
            resolve(path, MediaType.IMAGE, "image/svg+xml")

    def test_internal_entities_are_expanded(self, make_file):
        path = make_file(
            "illustrator.svg",
            '<?xml version="1.0" encoding="utf-8"?>'
            '<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" '
            '"http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd" ['
            '<!ENTITY ns_svg "http://www.w3.org/2000/svg">'
            '<!ENTITY size "150">'
            "]>"
            '<svg xmlns="&ns_svg;" width="300" height="&size;"/>',
        )

        assert resolve_svg(path) == Resolution(300, 150)

    def test_external_entities_are_rejected(self, make_file):
        path = make_file(
            "external.svg",
            '<?xml version="1.0"?>'
            '<!DOCTYPE svg [<!ENTITY secret SYSTEM "file:///etc/passwd">]>'
            f'<svg {SVG_NS} width="10" height="10"><text>&secret;</text></svg>',
        )

        with pytest.raises(MalformedMarkupError):
            resolve_svg(path)

    def test_raster_content_under_svg_name(self, make_image):
        path = make_image("logo.svg", (40, 30), "PNG")

        assert resolve(path, MediaType.IMAGE, "image/png") == Resolution(40, 30)
        assert resolve(path, MediaType.IMAGE) == Resolution(40, 30)


class TestResolve:
    @pytest.mark.parametrize(
        "media_type",
        [
            MediaType.MOVIE,
            MediaType.AUDIO,
            MediaType.DOCUMENT,
            MediaType.ARCHIVE,
            MediaType.OTHER,
        ],
    )
    def test_non_images_have_no_resolution(self, media_type, sample_jpeg):
        assert resolve(sample_jpeg, media_type) is None

    def test_non_image_does_not_touch_the_file(self, media_library_root):
        missing = media_library_root / "a1" / "movie.mp4"

        assert resolve(missing, MediaType.MOVIE) is None

    def test_missing_file(self, media_library_root):
        missing = media_library_root / "a1" / "gone.jpg"

        with pytest.raises(UnsupportedSourceError):
            resolve(missing, MediaType.IMAGE)

    def test_directory(self, storage_dir):
        with pytest.raises(UnsupportedSourceError):
            resolve(storage_dir, MediaType.IMAGE)


class TestIsVector:
    @pytest.mark.parametrize(
        "path, mime_type, expected",
        [
            ("icon.svg", None, True),
            ("ICON.SVG", "text/plain", True),
            ("icon", "image/svg+xml", True),
            ("icon", "image/svg", True),
            ("photo.jpg", "image/jpeg", False),
            ("photo.jpg", None, False),
            ("logo.svg", "image/png", False),
            ("icon.svg", "text/xml", True),
        ],
    )
    def test_is_vector(self, path, mime_type, expected):
        assert is_vector(path, mime_type) is expected


class TestTruncate:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("150", 150),
            ("150.9", 150),
            (" 42 ", 42),
            ("100px", 100),
            ("12.5%", 12),
            (".5", 0),
            ("1e3", 1000),
            ("-20", 0),
            ("auto", 0),
            ("", 0),
            (None, 0),
            ("1e999", 0),
        ],
    )
    def test_truncate(self, value, expected):
        assert truncate(value) == expected
