"""
Value types for the media library.

Provides:
- MediaType: canonical category of a media item
- StorageType: where the item's content lives (local disk or a remote host)
- AspectRatio: named aspect-ratio bucket derived from a resolution
- Resolution: (width, height) pair in pixels

All enums are string-valued TextChoices, so members compare equal to their
stored column values and can be used directly as model field choices.
"""

from __future__ import annotations

import math
from types import MappingProxyType
from typing import NamedTuple

from django.db import models


class MediaType(models.TextChoices):
    """Canonical media categories."""

    IMAGE = "image", "Image"
    MOVIE = "movie", "Movie"
    AUDIO = "audio", "Audio"
    DOCUMENT = "document", "Document"
    ARCHIVE = "archive", "Archive"
    OTHER = "other", "Other"

    @property
    def is_image(self) -> bool:
        return self == MediaType.IMAGE


class StorageType(models.TextChoices):
    """Storage backends an item can live on."""

    LOCAL = "local", "Local"
    YOUTUBE = "youtube", "YouTube"
    VIMEO = "vimeo", "Vimeo"


class Resolution(NamedTuple):
    """Pixel dimensions of an image."""

    width: int
    height: int

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


class AspectRatio(models.TextChoices):
    """
    Named aspect-ratio buckets used for thumbnail cropping.

    A resolution maps to the bucket whose ratio is nearest on a log scale,
    so landscape and portrait orientations are treated symmetrically
    (16:9 and 9:16 are equally far from square). Ties go to the bucket
    declared first. A resolution with a zero side maps to DEGENERATE.
    """

    SQUARE = "square", "Square (1:1)"
    RATIO_5_4 = "5:4", "5:4"
    RATIO_4_3 = "4:3", "4:3"
    RATIO_3_2 = "3:2", "3:2"
    RATIO_16_10 = "16:10", "16:10"
    RATIO_16_9 = "16:9", "16:9"
    RATIO_21_9 = "21:9", "21:9"
    RATIO_4_5 = "4:5", "4:5"
    RATIO_3_4 = "3:4", "3:4"
    RATIO_2_3 = "2:3", "2:3"
    RATIO_10_16 = "10:16", "10:16"
    RATIO_9_16 = "9:16", "9:16"
    RATIO_9_21 = "9:21", "9:21"
    DEGENERATE = "degenerate", "Degenerate"

    @classmethod
    def from_width_and_height(cls, width: int, height: int) -> "AspectRatio":
        """
        Map a resolution to its nearest named bucket.

        Args:
            width: Width in pixels (non-negative).
            height: Height in pixels (non-negative).

        Returns:
            The nearest AspectRatio bucket, or DEGENERATE when either
            side is zero.

        Example:
            >>> AspectRatio.from_width_and_height(1920, 1080)
            <AspectRatio.RATIO_16_9: '16:9'>
        """
        if width <= 0 or height <= 0:
            return cls.DEGENERATE

        log_ratio = math.log(width / height)
        nearest = None
        nearest_distance = math.inf

        for bucket, bucket_ratio in BUCKET_RATIOS.items():
            distance = abs(log_ratio - math.log(bucket_ratio))
            if distance < nearest_distance:
                nearest = bucket
                nearest_distance = distance

        return cls(nearest)

    @property
    def ratio(self) -> float | None:
        """Width divided by height for this bucket, None for DEGENERATE."""
        return BUCKET_RATIOS.get(self.value)


# Bucket values mapped to width / height. Declaration order decides ties.
BUCKET_RATIOS = MappingProxyType(
    {
        "square": 1.0,
        "5:4": 5 / 4,
        "4:3": 4 / 3,
        "3:2": 3 / 2,
        "16:10": 16 / 10,
        "16:9": 16 / 9,
        "21:9": 21 / 9,
        "4:5": 4 / 5,
        "3:4": 3 / 4,
        "2:3": 2 / 3,
        "10:16": 10 / 16,
        "9:16": 9 / 16,
        "9:21": 9 / 21,
    }
)
