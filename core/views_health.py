"""
Health check endpoints for monitoring.

/health/       - Liveness check (always returns 200)
/health/ready/ - Readiness check (verifies DB and account count)
"""
import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.views import View

logger = logging.getLogger(__name__)


class HealthCheckView(View):
    """Liveness probe: always returns 200 if Django is running."""

    def get(self, request):
        return JsonResponse({"status": "ok"})


class ReadinessCheckView(View):
    """Readiness probe: checks database connectivity and data sanity."""

    def get(self, request):
        from core.models import User

        checks = {}

        # 1. Database connectivity
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
            checks["database"] = "ok"
        except DatabaseError as e:
            logger.warning("Readiness database check failed: %s", e)
            checks["database"] = f"error: {e}"

        # 2. Account count (basic data sanity)
        try:
            checks["account_count"] = User.objects.count()
        except DatabaseError as e:
            checks["account_count"] = f"error: {e}"

        all_ok = checks["database"] == "ok" and isinstance(checks["account_count"], int)

        return JsonResponse(
            {"status": "ready" if all_ok else "degraded", "checks": checks},
            status=200 if all_ok else 503,
        )
