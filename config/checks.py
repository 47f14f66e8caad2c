"""
Django system checks for required configuration.

Runs automatically on `manage.py runserver`, `migrate`, and `check`.
"""
import os

from django.conf import settings
from django.core.checks import Error, Warning, register


@register()
def check_required_settings(app_configs, **kwargs):
    errors = []

    # E001: Match threshold must be a valid compatibility score
    threshold = settings.FOUNDIC_CONFIG.get("match_threshold")
    if not isinstance(threshold, int) or not 0 <= threshold <= 100:
        errors.append(Error(
            f"FOUNDIC_CONFIG['match_threshold'] must be an int in [0, 100], got {threshold!r}.",
            hint="Fix match_threshold in config/settings.py",
            id="foundic.E001",
        ))

    # E002: DATABASE_URL required in production
    if not settings.DEBUG and not os.environ.get("DATABASE_URL"):
        errors.append(Error(
            "DATABASE_URL not set in production.",
            hint="Set DATABASE_URL for PostgreSQL connection.",
            id="foundic.E002",
        ))

    # E003: Insecure SECRET_KEY in production
    if not settings.DEBUG and "insecure" in settings.SECRET_KEY:
        errors.append(Error(
            "SECRET_KEY contains 'insecure' and is not safe for production.",
            hint="Generate a secure SECRET_KEY.",
            id="foundic.E003",
        ))

    # W001: No alert channel outside development
    if not settings.DEBUG and not (settings.SLACK_WEBHOOK_URL or settings.ALERT_EMAIL):
        errors.append(Warning(
            "No alert channel configured.",
            hint="Set SLACK_WEBHOOK_URL or ALERT_EMAIL to receive error alerts.",
            id="foundic.W001",
        ))

    return errors
