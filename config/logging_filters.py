"""
Logging filters for structured log output.

Tracks a correlation ID per request thread so every log line emitted while
serving a request (services, point grants, alerts) can be tied together.
"""
import logging
import threading

_local = threading.local()


def get_correlation_id() -> str:
    """Get the current correlation ID ("-" outside a request)."""
    return getattr(_local, "correlation_id", "") or "-"


def set_correlation_id(cid: str) -> None:
    """Set the correlation ID for the current thread."""
    _local.correlation_id = cid


def clear_correlation_id() -> None:
    _local.correlation_id = ""


class CorrelationIdFilter(logging.Filter):
    """Attach correlation_id to every log record."""

    def filter(self, record):
        record.correlation_id = get_correlation_id()
        return True
