"""
Django middleware for request-level correlation ID tracking and API errors.
"""
import logging
import uuid

from django.http import Http404, JsonResponse

from config.alerting import send_alert
from config.logging_filters import clear_correlation_id, set_correlation_id
from core.exceptions import FoundicError, NotFoundError

logger = logging.getLogger(__name__)


class CorrelationIdMiddleware:
    """Generate or propagate a correlation ID for every request."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        cid = request.headers.get("X-Correlation-ID", str(uuid.uuid4())[:8])
        set_correlation_id(cid)
        try:
            response = self.get_response(request)
        finally:
            clear_correlation_id()
        response["X-Correlation-ID"] = cid
        return response


class ApiErrorMiddleware:
    """Render domain errors as a structured JSON body.

    FoundicError and Http404 become {"error": {"kind", "message", "details"}}
    with the error's status code. Anything else is logged, alerted on and
    left to Django's regular 500 handling.
    """

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        if isinstance(exception, Http404):
            exception = NotFoundError(str(exception) or None)

        if isinstance(exception, FoundicError):
            logger.info(
                "%s %s -> %s (%s)",
                request.method, request.path, exception.status_code, exception.kind,
            )
            return JsonResponse(exception.as_dict(), status=exception.status_code)

        logger.exception("Unhandled error on %s %s", request.method, request.path)
        send_alert(
            "critical",
            f"Unhandled {type(exception).__name__} on {request.path}",
            str(exception),
        )
        return None
