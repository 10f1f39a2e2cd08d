"""
Factory Boy factories for media library models.

Usage:
    from media_library.tests.factories import MediaFolderFactory, MediaItemFactory

    folder = MediaFolderFactory()
    item = MediaItemFactory(folder=folder, media_type=MediaType.DOCUMENT)
"""

import factory
from django.contrib.auth import get_user_model

from media_library.models import MediaFolder, MediaGroup, MediaItem
from media_library.types import MediaType, StorageType


class UserFactory(factory.django.DjangoModelFactory):
    """Factory for the configured user model."""

    class Meta:
        model = get_user_model()
        skip_postgeneration_save = True

    username = factory.Sequence(lambda n: f"editor{n}")
    email = factory.Sequence(lambda n: f"editor{n}@example.com")

    @classmethod
    def _create(cls, model_class, *args, **kwargs):
        """Override create to use UserManager.create_user()."""
        password = kwargs.pop("password", "TestPass123!")
        return model_class.objects.create_user(*args, password=password, **kwargs)


class MediaFolderFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = MediaFolder

    name = factory.Sequence(lambda n: f"Folder {n}")
    user = factory.SubFactory(UserFactory)


class MediaItemFactory(factory.django.DjangoModelFactory):
    """
    Factory for MediaItem.

    Creates a local image without resolution by default. Use
    item.set_resolution() to give it one.
    """

    class Meta:
        model = MediaItem

    folder = factory.SubFactory(MediaFolderFactory)
    user = factory.SelfAttribute("folder.user")
    storage_type = StorageType.LOCAL
    media_type = MediaType.IMAGE
    mime = "image/jpeg"
    sharding_folder_name = "a1"
    url = factory.Sequence(lambda n: f"image-{n}.jpg")
    title = factory.Sequence(lambda n: f"image-{n}")
    size = 1024


class MediaGroupFactory(factory.django.DjangoModelFactory):
    class Meta:
        model = MediaGroup

    media_type = None
