"""
Shared helpers for the JSON views of every app.
"""

import json

from django.conf import settings
from django.contrib.auth.mixins import LoginRequiredMixin
from django.core.paginator import Paginator
from django.http import QueryDict

from .exceptions import AuthenticationRequired, NotFoundError, ValidationFailed


class ApiLoginRequiredMixin(LoginRequiredMixin):
    """LoginRequiredMixin that answers 401 JSON instead of redirecting."""

    def handle_no_permission(self):
        raise AuthenticationRequired()


def parse_body(request) -> dict:
    """
    Return the request payload as a dict.

    JSON bodies are decoded; form-encoded bodies are flattened to single
    values (lists are kept for repeated keys).
    """
    if request.content_type == 'application/json':
        if not request.body:
            return {}
        try:
            payload = json.loads(request.body)
        except (json.JSONDecodeError, ValueError):
            raise ValidationFailed('Invalid JSON')
        if not isinstance(payload, dict):
            raise ValidationFailed('JSON body must be an object')
        return payload

    data = request.POST if request.method == 'POST' else QueryDict(request.body)
    return _flatten_querydict(data)


def _flatten_querydict(data: QueryDict) -> dict:
    flat = {}
    for key, values in data.lists():
        flat[key] = values if len(values) > 1 else values[0]
    return flat


def get_object_or_not_found(queryset, message=None, **lookup):
    """Like get_object_or_404, but raises the domain NotFoundError."""
    try:
        return queryset.get(**lookup)
    except queryset.model.DoesNotExist:
        raise NotFoundError(message or f'{queryset.model._meta.verbose_name.title()} not found')


def _positive_int(value, default):
    try:
        number = int(value)
    except (TypeError, ValueError):
        return default
    return number if number > 0 else default


def paginate(request, queryset, serialize, key='results') -> dict:
    """
    Slice a queryset by ?page=&limit= and serialize the page.

    Returns {key: [...], 'pagination': {'current', 'total', 'has_more', 'count'}}.
    An out-of-range page yields an empty list rather than an error.
    """
    config = settings.FOUNDIC_CONFIG
    limit = min(
        _positive_int(request.GET.get('limit'), config['default_page_size']),
        config['max_page_size'],
    )
    page_number = _positive_int(request.GET.get('page'), 1)

    paginator = Paginator(queryset, limit)
    if page_number <= paginator.num_pages:
        items = [serialize(obj) for obj in paginator.page(page_number).object_list]
    else:
        items = []

    return {
        key: items,
        'pagination': {
            'current': page_number,
            'total': paginator.num_pages if paginator.count else 0,
            'has_more': page_number * limit < paginator.count,
            'count': paginator.count,
        },
    }


def bounded_limit(request, default) -> int:
    """Read ?limit= capped at the configured maximum page size."""
    return min(
        _positive_int(request.GET.get('limit'), default),
        settings.FOUNDIC_CONFIG['max_page_size'],
    )


def require_authenticated(request):
    """For views whose read methods are public but writes need a session."""
    if not request.user.is_authenticated:
        raise AuthenticationRequired()
    return request.user
