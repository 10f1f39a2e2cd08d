"""
Tests for media_library app.

This package contains test modules for:
- test_classification.py: Extension and MIME type classification
- test_types.py: MediaType, Resolution and AspectRatio buckets
- test_files.py: SourceFile metadata and MIME detection
- test_resolution.py: Raster and SVG resolution detection
- test_models.py: MediaItem, MediaFolder and MediaGroup model tests
- test_services.py: MediaItemService tests
- test_storage.py: Storage providers and StorageManager
- test_serializers.py: MediaItemSerializer tests
- test_tasks.py: Bulk import task tests

Usage:
    pytest media_library/tests/
    pytest media_library/tests/test_resolution.py
"""
