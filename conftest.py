"""
Root conftest for the Foundic test suite.

Handles:
- Django settings configuration (in-memory SQLite via config.test_settings)
- Shared account fixtures (founders, an investor, an admin)
- A JSON-aware test client helper
"""

import json
import os

import pytest

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'config.test_settings')


# ---------------------------------------------------------------------------
# Account factories
# ---------------------------------------------------------------------------

def make_user(username, role='founder', **kwargs):
    """Create an account with a usable password ('pass-Word-123')."""
    from core.models import User

    defaults = {
        'email': f'{username}@example.com',
        'name': username.title(),
        'role': role,
    }
    defaults.update(kwargs)
    return User.objects.create_user(username=username, password='pass-Word-123', **defaults)


@pytest.fixture
def make_account(db):
    """Factory fixture: make_account(username, role=..., **fields)."""
    return make_user


@pytest.fixture
def founder(db):
    return make_user(
        'alice',
        skills=['Python', 'Product'],
        experience='intermediate',
        startup_name='Acme',
        startup_stage='mvp',
    )


@pytest.fixture
def other_founder(db):
    return make_user(
        'bob',
        skills=['python', 'Sales'],
        experience='intermediate',
        startup_name='Widgets',
        startup_stage='mvp',
    )


@pytest.fixture
def investor(db):
    return make_user('ivy', role='investor', investor_type='angel')


@pytest.fixture
def admin_user(db):
    return make_user('root', role='admin', is_staff=True)


# ---------------------------------------------------------------------------
# JSON client
# ---------------------------------------------------------------------------

class JsonClient:
    """Thin wrapper over django.test.Client that sends and decodes JSON."""

    def __init__(self, client):
        self.client = client

    def _send(self, method, url, data=None):
        body = json.dumps(data) if data is not None else ''
        return getattr(self.client, method)(url, data=body, content_type='application/json')

    def get(self, url, params=None):
        return self.client.get(url, params or {})

    def post(self, url, data=None):
        return self._send('post', url, data)

    def put(self, url, data=None):
        return self._send('put', url, data)

    def delete(self, url):
        return self.client.delete(url)

    def login(self, user):
        self.client.force_login(user)
        return self


@pytest.fixture
def api(client):
    return JsonClient(client)
