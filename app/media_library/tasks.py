"""
Celery tasks for the media library.

Bulk import turns a list of already-stored files into media items. Each file
is created in its own transaction, so one corrupt or missing file does not
abort the rest of the batch.

Usage:
    from media_library.tasks import import_media_items

    import_media_items.delay(paths, str(folder.id), user.id)
"""

from __future__ import annotations

import logging
from uuid import UUID

from celery import shared_task
from django.contrib.auth import get_user_model

from media_library.exceptions import MediaLibraryError

logger = logging.getLogger(__name__)


@shared_task(acks_late=True)
def import_media_items(paths: list[str], folder_id: str, user_id: int) -> dict:
    """
    Create media items for a batch of local files.

    Failures are permanent for the file concerned (missing source, corrupt
    image, malformed SVG), so they are recorded and never retried.

    Args:
        paths: Local paths of the stored files.
        folder_id: UUID of the MediaFolder the items are added to.
        user_id: Primary key of the user adding the items.

    Returns:
        Dict with the created item ids and, per failed path, the error.
    """
    from media_library.models import MediaFolder
    from media_library.services import MediaItemService

    result: dict = {"status": "completed", "created": [], "failed": []}

    try:
        folder = MediaFolder.objects.get(id=UUID(str(folder_id)))
        user = get_user_model().objects.get(pk=user_id)
    except (MediaFolder.DoesNotExist, get_user_model().DoesNotExist):
        logger.error(
            "Folder or user not found for media import",
            extra={"folder_id": str(folder_id), "user_id": user_id},
        )
        result["status"] = "not_found"
        return result

    logger.info(
        "Importing media items",
        extra={"folder_id": str(folder_id), "count": len(paths)},
    )

    for path in paths:
        try:
            media_item = MediaItemService.create_from_local_path(path, folder, user)
        except MediaLibraryError as e:
            result["failed"].append({"path": path, **e.to_dict()})
            continue

        result["created"].append(str(media_item.pk))

    logger.info(
        "Finished importing media items",
        extra={
            "folder_id": str(folder_id),
            "created_count": len(result["created"]),
            "failed_count": len(result["failed"]),
        },
    )

    return result
