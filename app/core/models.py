"""
Abstract base models shared by the domain apps.

Base Classes:
    BaseModel: Abstract model with timestamps (created_at, updated_at)
    UUIDPrimaryKeyMixin: UUID primary key generated client-side

Usage:
    from core.models import BaseModel, UUIDPrimaryKeyMixin

    class MediaFolder(UUIDPrimaryKeyMixin, BaseModel):
        name = models.CharField(max_length=255)

Note:
    Always list mixins before BaseModel in inheritance.
"""

from __future__ import annotations

import uuid

from django.db import models


class UUIDPrimaryKeyMixin(models.Model):
    """
    Use a UUID as primary key instead of an auto-increment integer.

    The id is generated with uuid4 before the first INSERT, so it is
    available on unsaved instances.
    """

    id = models.UUIDField(
        primary_key=True,
        default=uuid.uuid4,
        editable=False,
        help_text="Unique identifier for this record",
    )

    class Meta:
        abstract = True


class BaseModel(models.Model):
    """
    Abstract base model with creation and modification timestamps.

    Fields:
        created_at: Set when the object is first created
        updated_at: Updated whenever the object is saved
    """

    created_at = models.DateTimeField(
        auto_now_add=True,
        db_index=True,
        help_text="Timestamp when this record was created",
    )
    updated_at = models.DateTimeField(
        auto_now=True,
        help_text="Timestamp when this record was last modified",
    )

    class Meta:
        abstract = True
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return f"{self.__class__.__name__}(id={self.pk})"
