"""
Root pytest configuration for the Django project.

pytest-django sets up Django from DJANGO_SETTINGS_MODULE (see pyproject.toml).
This module adjusts settings for tests and assigns unit/integration/e2e
markers. App-specific fixtures are defined in each app's tests/conftest.py.
"""

import pytest


@pytest.fixture(autouse=True)
def media_library_root(settings, tmp_path):
    """Keep stored files and web paths of every test inside tmp_path."""
    from media_library.storage import storage_manager

    settings.MEDIA_LIBRARY_ROOT = tmp_path / "media_library"
    settings.MEDIA_LIBRARY_URL = "/media/media_library/"
    settings.SITE_URL = "https://cms.example.com"
    storage_manager.reset()
    yield settings.MEDIA_LIBRARY_ROOT
    storage_manager.reset()


def pytest_collection_modifyitems(items):
    """
    Auto-mark tests based on filename patterns.

    Mapping:
    - test_tasks.py → e2e (bulk import through the whole stack)
    - test_services.py, test_views.py, test_storage.py, ... → integration
    - test_classification.py, test_types.py, ... → unit
    - Unmatched files → integration (safe default for Django)

    Explicit markers on test functions/classes take precedence.
    """
    e2e_patterns = ["test_tasks.py"]

    integration_patterns = [
        "test_views.py",
        "test_services.py",
        "test_models.py",
        "test_serializers.py",
        "test_storage.py",
        "test_resolution.py",
        "test_files.py",
    ]

    unit_patterns = [
        "test_classification.py",
        "test_types.py",
        "test_exceptions.py",
    ]

    for item in items:
        existing_markers = {m.name for m in item.iter_markers()}
        if existing_markers & {"unit", "integration", "e2e"}:
            continue

        filename = str(item.fspath).split("/")[-1]

        if any(pattern in filename for pattern in e2e_patterns):
            item.add_marker(pytest.mark.e2e)
        elif any(pattern in filename for pattern in integration_patterns):
            item.add_marker(pytest.mark.integration)
        elif any(pattern in filename for pattern in unit_patterns):
            item.add_marker(pytest.mark.unit)
        else:
            item.add_marker(pytest.mark.integration)
