"""Tests for the mock AuthService."""

import json

import pytest

from app.schemas.user import Role, User
from app.services.auth import AuthService
from app.services.notifier import Notifier
from app.storage import USER_KEY, KeyValueStore


@pytest.fixture
def store():
    return KeyValueStore()


@pytest.fixture
def notifier():
    return Notifier()


@pytest.fixture
def auth(store, notifier):
    return AuthService(store, notifier)


def test_admin_credentials_grant_admin(auth, store):
    outcome = auth.login("admin@travelhub.com", "admin123")

    assert outcome.user == User(name="Admin User", email="admin@travelhub.com", role=Role.admin)
    assert outcome.redirect_to == "admin.html"
    assert outcome.redirect_after_ms == 800
    assert json.loads(store.get(USER_KEY))["role"] == "admin"


def test_admin_email_with_wrong_password_is_plain_user(auth):
    outcome = auth.login("admin@travelhub.com", "guess")
    assert outcome.user.role == Role.user
    assert outcome.user.name == "admin"


def test_login_derives_name_from_local_part(auth, notifier):
    outcome = auth.login("jane.doe@example.com", "pw")

    assert outcome.user.name == "jane.doe"
    assert outcome.user.role == Role.user
    assert outcome.redirect_to == "index.html"
    assert outcome.notification == "Welcome back, jane.doe!"
    assert notifier.active()[-1].message == "Welcome back, jane.doe!"
    assert auth.is_authenticated


def test_register_always_succeeds_with_user_role(auth, store):
    outcome = auth.register("Ana Perez", "ana@example.com", "pw")

    assert outcome.user.role == Role.user
    assert outcome.user.name == "Ana Perez"
    assert outcome.notification == "Welcome, Ana Perez!"
    assert outcome.redirect_to == "index.html"
    assert outcome.redirect_after_ms == 500
    assert USER_KEY in store


def test_register_outside_register_page_does_not_redirect(auth):
    outcome = auth.register("Ana Perez", "ana@example.com", "pw", from_register_page=False)
    assert outcome.redirect_to is None


def test_logout_clears_record(auth, store):
    auth.login("jane@example.com", "pw")
    outcome = auth.logout()

    assert outcome.user is None
    assert outcome.notification == "Logged out successfully"
    assert outcome.redirect_to == "index.html"
    assert USER_KEY not in store
    assert not auth.is_authenticated


def test_restore_valid_record(store, notifier):
    store.set(USER_KEY, json.dumps({"name": "Jo", "email": "jo@x.io", "role": "user"}))
    auth = AuthService(store, notifier)
    assert auth.restore() == User(name="Jo", email="jo@x.io")


def test_restore_without_record_is_anonymous(auth):
    assert auth.restore() is None


@pytest.mark.parametrize("raw", ["{not json", "[1, 2]", '"text"', '{"role": "superuser"}'])
def test_restore_corrupt_record_logs_out(store, notifier, raw):
    store.set(USER_KEY, raw)
    auth = AuthService(store, notifier)

    assert auth.restore() is None
    assert USER_KEY not in store
    assert notifier.active() == []
