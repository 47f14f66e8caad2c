"""
Tests for config/middleware.py, the health endpoints and config/alerting.py.

Covers:
- Correlation ID generation and propagation
- Domain errors and Http404 rendered as JSON
- Liveness / readiness probes
- send_alert() channel routing
"""

import json
import os

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')

import pytest
import requests
from unittest.mock import MagicMock, patch

from django.http import Http404
from django.test import RequestFactory, override_settings
from django.urls import reverse

from config.alerting import send_alert
from config.middleware import ApiErrorMiddleware
from core.exceptions import ConflictError


# ---------------------------------------------------------------------------
# Correlation ID
# ---------------------------------------------------------------------------

@pytest.mark.django_db
class TestCorrelationId:

    def test_generated_when_missing(self, client):
        response = client.get(reverse('health'))
        assert len(response['X-Correlation-ID']) == 8

    def test_propagated_from_request(self, client):
        response = client.get(reverse('health'), HTTP_X_CORRELATION_ID='abc123')
        assert response['X-Correlation-ID'] == 'abc123'


# ---------------------------------------------------------------------------
# Error rendering
# ---------------------------------------------------------------------------

class TestApiErrorMiddleware:

    def setup_method(self):
        self.middleware = ApiErrorMiddleware(lambda request: None)
        self.request = RequestFactory().get('/anything/')

    def test_domain_error_rendered(self):
        error = ConflictError('Already applied', details={'job': 3})

        response = self.middleware.process_exception(self.request, error)

        assert response.status_code == 409
        assert json.loads(response.content) == {
            'error': {'kind': 'conflict', 'message': 'Already applied', 'details': {'job': 3}},
        }

    def test_http404_rendered_as_not_found(self):
        response = self.middleware.process_exception(self.request, Http404('Nope'))
        assert response.status_code == 404
        error = json.loads(response.content)['error']
        assert error['kind'] == 'not_found'
        assert error['message'] == 'Nope'

    @patch('config.middleware.send_alert')
    def test_unexpected_error_alerts_and_propagates(self, mock_alert):
        response = self.middleware.process_exception(self.request, RuntimeError('boom'))

        assert response is None
        mock_alert.assert_called_once()
        severity, title, detail = mock_alert.call_args[0]
        assert severity == 'critical'
        assert 'RuntimeError' in title
        assert detail == 'boom'


# ---------------------------------------------------------------------------
# Health probes
# ---------------------------------------------------------------------------

@pytest.mark.django_db
class TestHealth:

    def test_liveness(self, client):
        assert client.get(reverse('health')).json() == {'status': 'ok'}

    def test_readiness(self, client, founder):
        response = client.get(reverse('health-ready'))

        assert response.status_code == 200
        body = response.json()
        assert body['status'] == 'ready'
        assert body['checks'] == {'database': 'ok', 'account_count': 1}


# ---------------------------------------------------------------------------
# Alerting
# ---------------------------------------------------------------------------

class TestSendAlert:

    @override_settings(SLACK_WEBHOOK_URL='', ALERT_EMAIL='')
    @patch('config.alerting.requests.post')
    def test_log_only_without_channels(self, mock_post):
        send_alert('warning', 'Disk', 'almost full')
        mock_post.assert_not_called()

    @override_settings(SLACK_WEBHOOK_URL='https://hooks.example.com/x', ALERT_EMAIL='')
    @patch('config.alerting.requests.post')
    def test_posts_to_slack(self, mock_post):
        send_alert('critical', 'DB down', 'timeout')

        mock_post.assert_called_once()
        payload = mock_post.call_args.kwargs['json']
        assert payload['text'].startswith(':red_circle: *DB down*')

    @override_settings(SLACK_WEBHOOK_URL='https://hooks.example.com/x', ALERT_EMAIL='')
    @patch('config.alerting.requests.post', MagicMock(side_effect=requests.ConnectionError))
    def test_slack_failure_is_logged(self, caplog):
        send_alert('warning', 'Flaky', '')
        assert 'Failed to send Slack alert' in caplog.text

    @override_settings(SLACK_WEBHOOK_URL='', ALERT_EMAIL='ops@example.com')
    def test_critical_sends_email(self, mailoutbox):
        send_alert('critical', 'Unhandled error', 'trace')
        send_alert('warning', 'Minor', 'ignored')

        assert len(mailoutbox) == 1
        assert mailoutbox[0].subject == '[Foundic CRITICAL] Unhandled error'
        assert mailoutbox[0].to == ['ops@example.com']
