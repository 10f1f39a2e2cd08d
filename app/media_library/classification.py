"""
Media type classification from file extension and MIME type.

The extension is authoritative. The MIME type (usually sniffed from content)
only corroborates it, and is used on its own when the extension is not
recognised.

Lookup tables are read-only mappings built once at import time.

Usage:
    from media_library.classification import classify

    classify("photo.jpg", "image/jpeg")  # MediaType.IMAGE
    classify("clip.mp4", None)  # MediaType.MOVIE
"""

from __future__ import annotations

import logging
import re
from pathlib import PurePath
from types import MappingProxyType

from media_library.types import MediaType

logger = logging.getLogger(__name__)

# =============================================================================
# Lookup Tables
# =============================================================================


def _by_type(table: dict[MediaType, set[str]]) -> MappingProxyType:
    return MappingProxyType(
        {key: media_type for media_type, keys in table.items() for key in keys}
    )


EXTENSION_TYPES: MappingProxyType = _by_type(
    {
        MediaType.IMAGE: {
            "jpg", "jpeg", "jpe", "png", "gif", "webp", "bmp", "tif", "tiff",
            "ico", "svg", "heic", "heif", "avif",
        },
        MediaType.MOVIE: {
            "mp4", "m4v", "mov", "qt", "avi", "wmv", "flv", "mkv", "webm",
            "mpg", "mpeg", "ogv", "3gp",
        },
        MediaType.AUDIO: {
            "mp3", "mpga", "wav", "aac", "m4a", "ogg", "oga", "flac", "wma",
            "aif", "aiff", "opus",
        },
        MediaType.DOCUMENT: {
            "pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "odt", "ods",
            "odp", "rtf", "txt", "csv", "md",
        },
        MediaType.ARCHIVE: {
            "zip", "rar", "7z", "tar", "gz", "tgz", "bz2", "xz",
        },
    }
)

MIME_TYPES: MappingProxyType = _by_type(
    {
        MediaType.DOCUMENT: {
            "application/pdf",
            "application/msword",
            "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
            "application/vnd.ms-excel",
            "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            "application/vnd.ms-powerpoint",
            "application/vnd.openxmlformats-officedocument.presentationml.presentation",
            "application/vnd.oasis.opendocument.text",
            "application/vnd.oasis.opendocument.spreadsheet",
            "application/vnd.oasis.opendocument.presentation",
            "application/rtf",
            "text/rtf",
            "text/plain",
            "text/csv",
            "text/markdown",
        },
        MediaType.ARCHIVE: {
            "application/zip",
            "application/x-zip-compressed",
            "application/x-rar-compressed",
            "application/vnd.rar",
            "application/x-7z-compressed",
            "application/x-tar",
            "application/gzip",
            "application/x-gzip",
            "application/x-bzip2",
            "application/x-xz",
        },
        MediaType.MOVIE: {
            "application/x-shockwave-flash",
        },
    }
)

# Whole top-level MIME families, checked after exact matches
MIME_PREFIX_TYPES: MappingProxyType = MappingProxyType(
    {
        "image/": MediaType.IMAGE,
        "video/": MediaType.MOVIE,
        "audio/": MediaType.AUDIO,
    }
)

_MIME_PATTERN = re.compile(r"^[\w.+-]+/[\w.+-]+$")


# =============================================================================
# Classification
# =============================================================================


def type_from_extension(extension: str | None) -> MediaType:
    """
    Look up the media type for a file extension.

    Args:
        extension: Extension with or without the leading dot, any case.

    Returns:
        The matching MediaType, or MediaType.OTHER when unknown.
    """
    if not extension:
        return MediaType.OTHER
    return EXTENSION_TYPES.get(extension.lower().lstrip("."), MediaType.OTHER)


def type_from_mime_type(mime_type: str | None) -> MediaType | None:
    """
    Look up the media type for a MIME type.

    Parameters such as ``; charset=utf-8`` are ignored.

    Returns:
        The matching MediaType, or None when the MIME type is absent,
        malformed or not in the tables.
    """
    if not mime_type:
        return None

    essence = mime_type.split(";", 1)[0].strip().lower()
    if not _MIME_PATTERN.match(essence):
        return None

    if essence in MIME_TYPES:
        return MIME_TYPES[essence]

    for prefix, media_type in MIME_PREFIX_TYPES.items():
        if essence.startswith(prefix):
            return media_type

    return None


def classify(filename: str, mime_type: str | None = None) -> MediaType:
    """
    Classify a file from its name and MIME type.

    Precedence:
        1. Known extension wins, whatever the MIME type says.
        2. Unknown extension falls back to the MIME classification.
        3. Neither known: MediaType.OTHER.

    Args:
        filename: File name or path; only the final suffix is used.
        mime_type: MIME type reported for the content, if any.

    Returns:
        The canonical MediaType.
    """
    extension = PurePath(filename).suffix
    extension_type = type_from_extension(extension)
    mime_type_type = type_from_mime_type(mime_type)

    if mime_type_type is None:
        return extension_type

    if extension_type == MediaType.OTHER:
        return mime_type_type

    if extension_type != mime_type_type:
        logger.warning(
            "Extension and MIME type disagree, using extension",
            extra={
                "source_filename": filename,
                "mime_type": mime_type,
                "extension_type": extension_type.value,
                "mime_type_type": mime_type_type.value,
            },
        )

    return extension_type
