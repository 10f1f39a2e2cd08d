import uuid

import django.db.models.deletion
from django.conf import settings
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = [
        migrations.swappable_dependency(settings.AUTH_USER_MODEL),
    ]

    operations = [
        migrations.CreateModel(
            name="MediaFolder",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "name",
                    models.CharField(
                        help_text="Display name of the folder", max_length=255
                    ),
                ),
                (
                    "parent",
                    models.ForeignKey(
                        blank=True,
                        help_text="Enclosing folder (empty for top-level folders)",
                        null=True,
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="children",
                        to="media_library.mediafolder",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="User who created the folder",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="media_folders",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Media Folder",
                "verbose_name_plural": "Media Folders",
                "ordering": ["name"],
            },
        ),
        migrations.CreateModel(
            name="MediaGroup",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "media_type",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("image", "Image"),
                            ("movie", "Movie"),
                            ("audio", "Audio"),
                            ("document", "Document"),
                            ("archive", "Archive"),
                            ("other", "Other"),
                        ],
                        help_text="Restrict the group to one media type (empty accepts all)",
                        max_length=20,
                        null=True,
                    ),
                ),
            ],
            options={
                "verbose_name": "Media Group",
                "verbose_name_plural": "Media Groups",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MediaItem",
            fields=[
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "id",
                    models.UUIDField(
                        default=uuid.uuid4,
                        editable=False,
                        help_text="Unique identifier for this record",
                        primary_key=True,
                        serialize=False,
                    ),
                ),
                (
                    "storage_type",
                    models.CharField(
                        choices=[
                            ("local", "Local"),
                            ("youtube", "YouTube"),
                            ("vimeo", "Vimeo"),
                        ],
                        default="local",
                        help_text="Storage backend holding the content",
                        max_length=20,
                    ),
                ),
                (
                    "media_type",
                    models.CharField(
                        choices=[
                            ("image", "Image"),
                            ("movie", "Movie"),
                            ("audio", "Audio"),
                            ("document", "Document"),
                            ("archive", "Archive"),
                            ("other", "Other"),
                        ],
                        db_index=True,
                        help_text="Category of media (image, movie, audio, document, archive, other)",
                        max_length=20,
                    ),
                ),
                (
                    "mime",
                    models.CharField(
                        blank=True,
                        help_text="Detected MIME type (e.g., image/jpeg)",
                        max_length=127,
                        null=True,
                    ),
                ),
                (
                    "sharding_folder_name",
                    models.CharField(
                        blank=True,
                        help_text="Directory the stored file lives in",
                        max_length=255,
                        null=True,
                    ),
                ),
                (
                    "url",
                    models.CharField(
                        help_text="Stored filename, or the remote movie id",
                        max_length=255,
                    ),
                ),
                (
                    "title",
                    models.CharField(help_text="Display title", max_length=255),
                ),
                (
                    "size",
                    models.BigIntegerField(
                        blank=True, help_text="File size in bytes", null=True
                    ),
                ),
                (
                    "width",
                    models.PositiveIntegerField(
                        blank=True,
                        editable=False,
                        help_text="Width in pixels (images only)",
                        null=True,
                    ),
                ),
                (
                    "height",
                    models.PositiveIntegerField(
                        blank=True,
                        editable=False,
                        help_text="Height in pixels (images only)",
                        null=True,
                    ),
                ),
                (
                    "aspect_ratio",
                    models.CharField(
                        blank=True,
                        choices=[
                            ("square", "Square (1:1)"),
                            ("5:4", "5:4"),
                            ("4:3", "4:3"),
                            ("3:2", "3:2"),
                            ("16:10", "16:10"),
                            ("16:9", "16:9"),
                            ("21:9", "21:9"),
                            ("4:5", "4:5"),
                            ("3:4", "3:4"),
                            ("2:3", "2:3"),
                            ("10:16", "10:16"),
                            ("9:16", "9:16"),
                            ("9:21", "9:21"),
                            ("degenerate", "Degenerate"),
                        ],
                        editable=False,
                        help_text="Aspect-ratio bucket derived from width and height",
                        max_length=20,
                        null=True,
                    ),
                ),
                (
                    "folder",
                    models.ForeignKey(
                        help_text="Folder containing this item",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="items",
                        to="media_library.mediafolder",
                    ),
                ),
                (
                    "user",
                    models.ForeignKey(
                        help_text="User who added this item",
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="media_items",
                        to=settings.AUTH_USER_MODEL,
                    ),
                ),
            ],
            options={
                "verbose_name": "Media Item",
                "verbose_name_plural": "Media Items",
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="MediaGroupMediaItem",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                (
                    "created_at",
                    models.DateTimeField(
                        auto_now_add=True,
                        db_index=True,
                        help_text="Timestamp when this record was created",
                    ),
                ),
                (
                    "updated_at",
                    models.DateTimeField(
                        auto_now=True,
                        help_text="Timestamp when this record was last modified",
                    ),
                ),
                (
                    "sequence",
                    models.PositiveIntegerField(
                        default=0,
                        help_text="Position of the item within the group",
                    ),
                ),
                (
                    "group",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="item_links",
                        to="media_library.mediagroup",
                    ),
                ),
                (
                    "item",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="group_links",
                        to="media_library.mediaitem",
                    ),
                ),
            ],
            options={
                "verbose_name": "Media Group Item",
                "verbose_name_plural": "Media Group Items",
                "ordering": ["sequence"],
            },
        ),
        migrations.AddField(
            model_name="mediaitem",
            name="groups",
            field=models.ManyToManyField(
                related_name="items",
                through="media_library.MediaGroupMediaItem",
                to="media_library.mediagroup",
            ),
        ),
        migrations.AddIndex(
            model_name="mediaitem",
            index=models.Index(
                fields=["folder", "media_type"],
                name="media_item_folder_type_idx",
            ),
        ),
        migrations.AddConstraint(
            model_name="mediaitem",
            constraint=models.CheckConstraint(
                condition=(
                    models.Q(("height__isnull", True), ("width__isnull", True))
                    | models.Q(("height__isnull", False), ("width__isnull", False))
                ),
                name="media_item_resolution_complete",
            ),
        ),
        migrations.AddConstraint(
            model_name="mediagroupmediaitem",
            constraint=models.UniqueConstraint(
                fields=("group", "item"),
                name="media_group_item_unique",
            ),
        ),
    ]
