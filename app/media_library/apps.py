"""Django app configuration for the media library."""

from django.apps import AppConfig


class MediaLibraryConfig(AppConfig):
    """Configuration for the media library app."""

    default_auto_field = "django.db.models.BigAutoField"
    name = "media_library"
    verbose_name = "Media Library"
