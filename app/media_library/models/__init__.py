"""
Media library models package.

Exports:
    MediaFolder: Folder tree items are organised in
    MediaItem: A single image, movie, audio file, document or archive
    MediaGroup: Ordered selection of items used by content blocks
    MediaGroupMediaItem: Through table placing an item in a group
"""

from media_library.models.media_folder import MediaFolder
from media_library.models.media_group import MediaGroup, MediaGroupMediaItem
from media_library.models.media_item import MediaItem

__all__ = [
    "MediaFolder",
    "MediaGroup",
    "MediaGroupMediaItem",
    "MediaItem",
]
