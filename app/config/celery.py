"""
Celery configuration for the media library backend.

Celery runs long media jobs outside the request cycle, such as bulk imports
of uploaded files (media_library.tasks.import_media_items).

Settings are read from Django settings with the CELERY_ prefix, and tasks
are auto-discovered from each installed app's tasks.py.
"""

import os

from celery import Celery

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "config.settings")

app = Celery("media_library_backend")

app.config_from_object("django.conf:settings", namespace="CELERY")

app.autodiscover_tasks()
