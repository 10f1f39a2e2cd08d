"""
URL configuration for the media library backend.

URL Structure:
    /admin/    - Django admin interface (media items, folders, groups)
    /health/   - Health check endpoint (for load balancers, Docker)
"""

from django.contrib import admin
from django.urls import path

from core.views import health_check

urlpatterns = [
    path("admin/", admin.site.urls),
    path("health/", health_check, name="health_check"),
]

admin.site.site_header = "Media Library Admin"
admin.site.site_title = "Media Library"
admin.site.index_title = "Media Library Administration"
