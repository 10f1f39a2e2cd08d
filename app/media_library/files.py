"""
File access for media library sources.

SourceFile wraps a local path and exposes the metadata item creation needs:
filename, extension, title, size, sharding folder and the MIME type
detected from the file's content with python-magic.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from pathlib import Path

import magic

from media_library.exceptions import UnsupportedSourceError

logger = logging.getLogger(__name__)

# Bytes read for magic number detection
MIME_SNIFF_BYTES = 2048


def detect_mime_type(path: str | Path) -> str | None:
    """
    Detect a file's MIME type from its content using libmagic.

    Only the first MIME_SNIFF_BYTES are read.

    Returns:
        Detected MIME type string, or None if detection failed.
    """
    try:
        with open(path, "rb") as f:
            header = f.read(MIME_SNIFF_BYTES)
    except OSError as e:
        logger.warning(
            "Could not read file for MIME detection",
            extra={"path": str(path), "error": str(e)},
        )
        return None

    if not header:
        return None

    try:
        return magic.from_buffer(header, mime=True)
    except magic.MagicException as e:
        logger.warning(
            "libmagic failed to detect MIME type",
            extra={"path": str(path), "error": str(e)},
        )
        return None


@dataclass(frozen=True)
class SourceFile:
    """
    A local file that a media item is created from.

    Use SourceFile.from_path() to build one; it validates the path first.

    Attributes:
        path: Absolute path to the file.
    """

    path: Path

    @classmethod
    def from_path(cls, path: str | Path) -> "SourceFile":
        """
        Build a SourceFile, rejecting anything that is not a regular file.

        Raises:
            UnsupportedSourceError: If the path does not exist or is not a
                regular file (directories, sockets, broken symlinks).
        """
        resolved = Path(path)

        if not resolved.exists():
            raise UnsupportedSourceError(
                f'This is not a valid file: "{path}".',
                details={"path": str(path)},
            )

        if not resolved.is_file():
            raise UnsupportedSourceError(
                "The given source is not a file.",
                details={"path": str(path)},
            )

        return cls(path=resolved.absolute())

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def extension(self) -> str:
        """Extension without the leading dot, as written in the filename."""
        return self.path.suffix.lstrip(".")

    @property
    def title(self) -> str:
        """Filename without its extension."""
        return self.path.stem

    @property
    def size(self) -> int:
        return self.path.stat().st_size

    @property
    def sharding_folder_name(self) -> str:
        """Name of the directory the file is stored in."""
        return self.path.parent.name

    @cached_property
    def mime_type(self) -> str | None:
        return detect_mime_type(self.path)
