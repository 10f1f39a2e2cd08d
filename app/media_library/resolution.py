"""
Image resolution detection.

Raster images are measured from their header with Pillow. Image.open() is
lazy: it reads only enough bytes to identify the format and size, and the
pixel data is never decoded.

SVG images have no pixel grid, so their size is read from the root element:
the viewBox when present, otherwise the width and height attributes. All
numbers are truncated toward zero, never rounded. An SVG that declares no
size at all is treated as a 200x200 square.

Functions:
    resolve: Resolution of a file for a given media type
    resolve_raster: Pixel size from a raster image header
    resolve_svg: Declared size of an SVG document
"""

from __future__ import annotations

import logging
import math
import re
from pathlib import Path

from defusedxml import DefusedXmlException
from defusedxml import ElementTree
from PIL import Image, UnidentifiedImageError

from media_library.exceptions import (
    MalformedMarkupError,
    UnreadableImageError,
    UnsupportedSourceError,
)
from media_library.files import detect_mime_type
from media_library.types import MediaType, Resolution

logger = logging.getLogger(__name__)

# =============================================================================
# Constants
# =============================================================================

SVG_MIME_TYPES = frozenset({"image/svg", "image/svg+xml"})

SVG_EXTENSION = ".svg"

# Size assumed for an SVG that declares neither a viewBox nor a width/height
SVG_FALLBACK_RESOLUTION = Resolution(200, 200)

# Leading number of an attribute value, e.g. "100" in "100px" or "12.5" in "12.5%"
_NUMBER_PREFIX = re.compile(r"^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

_VIEWBOX_SEPARATOR = re.compile(r"[\s,]+")


# =============================================================================
# Public API
# =============================================================================


def resolve(
    path: str | Path,
    media_type: MediaType,
    mime_type: str | None = None,
) -> Resolution | None:
    """
    Determine the resolution of a media file.

    Only images have a resolution; every other media type returns None
    without touching the file.

    Args:
        path: Local path to the file.
        media_type: Classified type of the file.
        mime_type: MIME type of the content. Detected with libmagic when
            not given.

    Returns:
        Resolution for images, None for any other media type.

    Raises:
        UnsupportedSourceError: If the path is not an existing regular file.
        UnreadableImageError: If a raster image header cannot be parsed.
        MalformedMarkupError: If an SVG file is not well-formed XML.
    """
    if media_type != MediaType.IMAGE:
        return None

    path = Path(path)
    if not path.is_file():
        raise UnsupportedSourceError(
            f'This is not a valid file: "{path}".',
            details={"path": str(path)},
        )

    if mime_type is None:
        mime_type = detect_mime_type(path)

    if is_vector(path, mime_type):
        return resolve_svg(path)

    return resolve_raster(path)


def is_vector(path: str | Path, mime_type: str | None) -> bool:
    """
    Check whether a file is an SVG image.

    An image MIME type decides on its own, so raster content stored under a
    .svg name is still read as raster. The extension is only consulted when
    the MIME type is missing or not an image type (libmagic reports many SVG
    files as text/xml or text/plain).
    """
    essence = mime_type.split(";", 1)[0].strip().lower() if mime_type else ""
    if essence.startswith("image/"):
        return essence in SVG_MIME_TYPES
    return Path(path).suffix.lower() == SVG_EXTENSION


def resolve_raster(path: str | Path) -> Resolution:
    """
    Read the pixel dimensions of a raster image from its header.

    Raises:
        UnreadableImageError: If Pillow cannot identify or parse the image.
    """
    try:
        with Image.open(path) as img:
            width, height = img.size
    except Image.DecompressionBombError as e:
        logger.warning(
            "Image exceeds size limit",
            extra={"path": str(path), "error": str(e)},
        )
        raise UnreadableImageError(
            f"Image exceeds maximum size limit: {e}",
            details={"path": str(path)},
        ) from e
    except UnidentifiedImageError as e:
        logger.warning(
            "Cannot identify image format",
            extra={"path": str(path), "error": str(e)},
        )
        raise UnreadableImageError(
            f'Error happened when reading image "{path}": cannot identify image format',
            details={"path": str(path)},
        ) from e
    except (OSError, SyntaxError, ValueError) as e:
        # Pillow plugins raise SyntaxError/ValueError for broken headers
        logger.warning(
            "Image header is truncated or corrupted",
            extra={"path": str(path), "error": str(e)},
        )
        raise UnreadableImageError(
            f'Error happened when reading image "{path}": {e}',
            details={"path": str(path)},
        ) from e

    return Resolution(width, height)


def resolve_svg(path: str | Path) -> Resolution:
    """
    Read the declared size of an SVG document.

    Rules:
        - viewBox present: width and height are its 3rd and 4th numbers.
        - otherwise: the width and height attributes, 0 when missing.
        - both 0: SVG_FALLBACK_RESOLUTION.

    Raises:
        MalformedMarkupError: If the file is not well-formed XML, or refers
            to external entities.
    """
    try:
        with open(path, "rb") as f:
            root = ElementTree.parse(f, forbid_entities=False).getroot()
    except ElementTree.ParseError as e:
        logger.warning(
            "SVG is not well-formed XML",
            extra={"path": str(path), "error": str(e)},
        )
        raise MalformedMarkupError(
            f'Error happened when reading SVG "{path}": {e}',
            details={"path": str(path)},
        ) from e
    except DefusedXmlException as e:
        logger.warning(
            "SVG uses forbidden XML constructs",
            extra={"path": str(path), "error": str(e)},
        )
        raise MalformedMarkupError(
            f'Error happened when reading SVG "{path}": {e}',
            details={"path": str(path)},
        ) from e

    view_box = root.get("viewBox")
    if view_box is not None:
        tokens = _VIEWBOX_SEPARATOR.split(view_box.strip())
        width = truncate(tokens[2]) if len(tokens) > 2 else 0
        height = truncate(tokens[3]) if len(tokens) > 3 else 0
    else:
        width = truncate(root.get("width"))
        height = truncate(root.get("height"))

    if width == 0 and height == 0:
        logger.debug(
            "SVG declares no size, using fallback",
            extra={"path": str(path)},
        )
        return SVG_FALLBACK_RESOLUTION

    return Resolution(width, height)


def truncate(value: str | None) -> int:
    """
    Convert an SVG numeric attribute to a non-negative integer.

    The leading number is truncated toward zero ("150.9" -> 150,
    "100px" -> 100). Missing or non-numeric values and negative numbers
    yield 0.
    """
    if value is None:
        return 0

    match = _NUMBER_PREFIX.match(value)
    if match is None:
        return 0

    number = float(match.group(0))
    if not math.isfinite(number):
        return 0

    return max(0, int(number))
