"""
Core views providing infrastructure endpoints.

These views are not part of the media library domain but are needed to run
it behind a load balancer or orchestrator.
"""

import logging

from django.conf import settings
from django.db import DatabaseError, connection
from django.http import JsonResponse

logger = logging.getLogger(__name__)


def health_check(request):
    """
    Health check endpoint for Docker, Kubernetes probes and load balancers.

    Reports database connectivity and whether the media library storage root
    is reachable.

    HTTP Status Codes:
        200: All systems operational
        503: Database unreachable

    Example Response:
        {
            "status": "healthy",
            "database": "connected",
            "media_storage": "available"
        }
    """
    health_status = {
        "status": "healthy",
        "database": "unknown",
        "media_storage": "unknown",
    }
    is_healthy = True

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
            cursor.fetchone()
        health_status["database"] = "connected"
    except DatabaseError as e:
        logger.error("Health check database failure", extra={"error": str(e)})
        health_status["database"] = "disconnected"
        health_status["status"] = "unhealthy"
        is_healthy = False

    # Missing storage root is degraded, not fatal: it is created on first write
    if settings.MEDIA_LIBRARY_ROOT.is_dir():
        health_status["media_storage"] = "available"
    else:
        health_status["media_storage"] = "missing"

    status_code = 200 if is_healthy else 503

    return JsonResponse(health_status, status=status_code)
