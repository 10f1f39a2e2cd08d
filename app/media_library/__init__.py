"""
Media library app.

This app provides:
- Media type classification from extension and MIME type
- Image resolution detection for raster and SVG files
- Aspect-ratio buckets derived from the resolution
- MediaItem, MediaFolder and MediaGroup models
- Storage-provider dispatch for paths, URLs and HTML
"""
