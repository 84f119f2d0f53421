"""Pytest configuration and shared fixtures for all tests."""

import os
from decimal import Decimal

os.environ.setdefault("DJANGO_SECRET_KEY", "test_secret_key_for_testing_only")
os.environ.setdefault("DB_ENGINE", "django.db.backends.sqlite3")

import pytest


@pytest.fixture
def make_user(db, django_user_model):
    """Factory for user records. Pass ``referrer`` to hang the user under another one."""
    counter = {'n': 0}

    def _make_user(coins='0', referrer=None, **fields):
        counter['n'] += 1
        n = counter['n']
        return django_user_model.objects.create_user(
            username=fields.pop('username', f"user{n}"),
            email=fields.pop('email', f"user{n}@test.local"),
            password=fields.pop('password', 'pass'),
            coins=Decimal(coins),
            referrer=referrer,
            **fields,
        )

    return _make_user


@pytest.fixture
def admin_account(make_user, settings):
    """Admin account configured to receive the admin share."""
    admin = make_user(username='admin', email='admin@test.local')
    settings.REFERRAL_ADMIN_USER_ID = admin.pk
    return admin


@pytest.fixture
def no_admin(settings):
    settings.REFERRAL_ADMIN_USER_ID = None


@pytest.fixture
def chain(make_user):
    """
    D <- C <- B <- A: A was referred by B, B by C, C by D.
    A holds 10 coins, the others start at zero.
    """
    d = make_user(username='D', email='d@test.local')
    c = make_user(username='C', email='c@test.local', referrer=d)
    b = make_user(username='B', email='b@test.local', referrer=c)
    a = make_user('10', username='A', email='a@test.local', referrer=b)
    return a, b, c, d


@pytest.fixture
def balance():
    """Fresh coin balance of a user record."""
    def _balance(user):
        user.refresh_from_db()
        return user.coins

    return _balance


@pytest.fixture
def no_sleep(monkeypatch):
    """Skip the retry backoff."""
    monkeypatch.setattr("mlm.store.time.sleep", lambda seconds: None)
