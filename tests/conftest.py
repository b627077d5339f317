"""
Shared fixtures: in-memory database, Flask app and client, and fakes for the
identity store and the redirect scheduler.
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config import database
from src.utils.config import TestConfig
from webapp.app import create_app
from webapp.services.scheduling import TimerHandle


class FakeIdentityStore:
    """Identity store double that records every remote call."""

    def __init__(self, accounts=None, fail_updates=False):
        self.accounts = {email: dict(fields) for email, fields in (accounts or {}).items()}
        self.fail_updates = fail_updates
        self.calls = []

    def find_by_email(self, email):
        self.calls.append(('find_by_email', email))
        account = self.accounts.get(email)
        if account is None:
            return None
        return {'email': email, 'name': account.get('name', '')}

    def update_password(self, email, new_password):
        self.calls.append(('update_password', email))
        if self.fail_updates or email not in self.accounts:
            return False
        self.accounts[email]['password'] = new_password
        return True

    def verify_credentials(self, email, password):
        self.calls.append(('verify_credentials', email))
        account = self.accounts.get(email)
        if account is None or account.get('password') != password:
            return None
        return {
            'email': email,
            'name': account.get('name', ''),
            'join_date': 'Feb 2024',
            'profile_completion': account.get('profile_completion', 40),
        }


class ManualScheduler:
    """Scheduler driven by a fake clock; call ``advance`` to let time pass."""

    def __init__(self):
        self.now = 0.0
        self.handles = []

    def call_later(self, delay, callback, *args):
        handle = TimerHandle(delay, callback, args)
        handle.due = self.now + delay
        self.handles.append(handle)
        return handle

    def advance(self, seconds):
        self.now += seconds
        for handle in list(self.handles):
            if handle.pending and handle.due <= self.now:
                handle.fire()


@pytest.fixture
def scheduler():
    return ManualScheduler()


@pytest.fixture
def store():
    return FakeIdentityStore({
        'b@x.com': {'password': 'old-b', 'name': 'Bea'},
        'c@x.com': {'password': 'old-c', 'name': 'Cal'},
    })


@pytest.fixture
def db():
    """Fresh in-memory database with the users table."""
    database.configure_database('sqlite://')
    database.init_database()
    yield database
    database.engine.dispose()


@pytest.fixture
def app():
    app = create_app(TestConfig)
    database.create_user('ava@jewelmart.example', 'sparkle123', 'Ava Patel', 'Mar 2024', 80)
    yield app
    database.engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
