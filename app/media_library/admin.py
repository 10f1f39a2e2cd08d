"""Django admin configuration for the media library."""

from django.contrib import admin

from media_library.models import MediaFolder, MediaGroup, MediaGroupMediaItem, MediaItem
from media_library.services import MediaItemService


@admin.register(MediaFolder)
class MediaFolderAdmin(admin.ModelAdmin):
    list_display = ["id", "name", "parent", "user", "created_at"]
    search_fields = ["name"]
    raw_id_fields = ["parent", "user"]


@admin.register(MediaItem)
class MediaItemAdmin(admin.ModelAdmin):
    """Resolution and aspect ratio are derived, so they are read-only here."""

    list_display = [
        "id",
        "title",
        "media_type",
        "storage_type",
        "width",
        "height",
        "aspect_ratio",
        "folder",
        "created_at",
    ]
    list_filter = ["media_type", "storage_type", "aspect_ratio"]
    search_fields = ["title", "url"]
    readonly_fields = [
        "id",
        "mime",
        "size",
        "sharding_folder_name",
        "width",
        "height",
        "aspect_ratio",
        "created_at",
        "updated_at",
    ]
    raw_id_fields = ["folder", "user"]
    date_hierarchy = "created_at"
    ordering = ["-created_at"]

    def save_model(self, request, obj, form, change):
        MediaItemService.save(obj)


class MediaGroupMediaItemInline(admin.TabularInline):
    model = MediaGroupMediaItem
    raw_id_fields = ["item"]
    extra = 0


@admin.register(MediaGroup)
class MediaGroupAdmin(admin.ModelAdmin):
    list_display = ["id", "media_type", "created_at"]
    inlines = [MediaGroupMediaItemInline]
