"""
Tests for config/checks.py: startup configuration checks.
"""

import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

from unittest.mock import patch

from django.conf import settings
from django.test import override_settings

from config.checks import check_required_settings


def _ids(messages):
    return sorted(message.id for message in messages)


class TestRequiredSettings:

    @override_settings(DEBUG=True)
    def test_development_defaults_pass(self):
        assert check_required_settings(None) == []

    @override_settings(DEBUG=True, FOUNDIC_CONFIG={**settings.FOUNDIC_CONFIG, 'match_threshold': 150})
    def test_threshold_out_of_range(self):
        assert _ids(check_required_settings(None)) == ['foundic.E001']

    @override_settings(DEBUG=False, SECRET_KEY='django-insecure-x', SLACK_WEBHOOK_URL='', ALERT_EMAIL='')
    @patch.dict(os.environ, {}, clear=True)
    def test_production_misconfiguration(self):
        assert _ids(check_required_settings(None)) == ['foundic.E002', 'foundic.E003', 'foundic.W001']

    @override_settings(DEBUG=False, SECRET_KEY='a-real-secret', ALERT_EMAIL='ops@example.com')
    @patch.dict(os.environ, {'DATABASE_URL': 'postgres://db/foundic'})
    def test_production_ok(self):
        assert check_required_settings(None) == []
