"""Tests for AppState and SessionRegistry."""

from app.config import Settings
from app.schemas.currency import Currency
from app.state import AppState, SessionRegistry
from app.storage import CURRENCY_KEY, USER_KEY, KeyValueStore


def _settings(**overrides):
    return Settings(_env_file=None, **overrides)


def test_fresh_state_defaults():
    state = AppState(_settings())
    assert state.user is None
    assert state.selected_currency == Currency.INR
    assert state.guests.counts.adults == 2


def test_state_reads_persisted_values_on_init():
    store = KeyValueStore({
        CURRENCY_KEY: "EUR",
        USER_KEY: '{"name": "Jo", "email": "jo@x.io", "role": "admin"}',
    })
    state = AppState(_settings(), store=store)
    assert state.selected_currency == Currency.EUR
    assert state.user.name == "Jo"


def test_corrupt_user_record_is_cleared_on_init():
    store = KeyValueStore({USER_KEY: "{oops"})
    state = AppState(_settings(), store=store)
    assert state.user is None
    assert USER_KEY not in store


def test_registry_reuses_known_session():
    registry = SessionRegistry(_settings())
    session_id, state = registry.create()
    assert registry.get_or_create(session_id) == (session_id, state)


def test_registry_creates_for_unknown_session():
    registry = SessionRegistry(_settings())
    session_id, _ = registry.get_or_create("stale-cookie")
    assert session_id != "stale-cookie"
    assert len(registry) == 1


def test_registry_evicts_oldest():
    registry = SessionRegistry(_settings(), max_sessions=2)
    first, _ = registry.create()
    second, _ = registry.create()
    third, _ = registry.create()

    assert len(registry) == 2
    assert registry.get(first) is None
    assert registry.get(second) is not None
    assert registry.get(third) is not None
