"""Tests for PageRenderer."""

from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from app.config import Settings
from app.exceptions.custom import PageNotFoundError
from app.services.page import PageRenderer, resolve_page
from app.state import AppState

SITE_DIR = Path(__file__).resolve().parents[2] / "site"


@pytest.fixture
def renderer():
    return PageRenderer(SITE_DIR)


@pytest.fixture
def state():
    return AppState(Settings(_env_file=None, default_currency="USD"))


def _soup(html):
    return BeautifulSoup(html, "html.parser")


def test_root_maps_to_index():
    assert resolve_page(SITE_DIR, "/") == (SITE_DIR / "index.html").resolve()


def test_path_traversal_rejected():
    with pytest.raises(PageNotFoundError):
        resolve_page(SITE_DIR, "../pyproject.toml")


def test_null_byte_in_path_is_not_found():
    with pytest.raises(PageNotFoundError):
        resolve_page(SITE_DIR, "a\x00b.html")


def test_missing_page():
    with pytest.raises(PageNotFoundError):
        resolve_page(SITE_DIR, "nope.html")


def test_anonymous_page(renderer, state):
    soup = _soup(renderer.render("index.html", state))
    assert "hidden" not in soup.find(id="auth-buttons").get("class", [])
    assert "hidden" in soup.find(id="user-profile")["class"]
    assert soup.find(attrs={"data-guests-summary": True}).string == "2 adults · 0 children · 1 room"


def test_logged_in_page(renderer, state):
    state.auth.login("jane@example.com", "pw")
    soup = _soup(renderer.render("index.html", state))

    assert "hidden" in soup.find(id="auth-buttons")["class"]
    assert "hidden" not in soup.find(id="user-profile").get("class", [])
    assert soup.find(id="user-name-display").string == "jane"
    assert "Welcome back, jane!" in soup.find(id="toast-region").get_text()


def test_prices_follow_currency(renderer, state):
    state.currency.set_currency("EUR")
    soup = _soup(renderer.render("stays.html", state))

    assert soup.find(id="alpine").find(attrs={"data-price-usd": True}).string == "€87"
    assert soup.find(id="currencySelect").find("option", value="EUR").has_attr("selected")


def test_booking_buttons_carry_item_payload(renderer, state):
    soup = _soup(renderer.render("stays.html", state))
    button = soup.find(id="harbor").find(attrs={"data-action": "book"})
    assert button["data-item-title"] == "Harbor Suites"
    assert button["data-item-price"] == "$140"


def test_query_filters_and_sort(renderer, state):
    soup = _soup(renderer.render("stays.html", state, filters=["pool"], sort="price-high"))
    items = soup.find(id="listings").find_all("article", recursive=False)

    assert [el["id"] for el in items] == ["lagoon", "harbor", "alpine", "dune"]
    assert [el.has_attr("hidden") for el in items] == [False, False, True, True]


def test_reload_without_query_resets_listing_state(renderer, state):
    renderer.render("stays.html", state, filters=["pool"], sort="rating")
    soup = _soup(renderer.render("stays.html", state))

    items = soup.find(id="listings").find_all("article", recursive=False)
    assert [el["id"] for el in items] == ["lagoon", "alpine", "harbor", "dune"]
    assert not any(el.has_attr("hidden") for el in items)


def test_open_popover_is_rendered(renderer, state):
    state.guests.open("guest-trigger")
    soup = _soup(renderer.render("index.html", state))

    popover = soup.find(id="guest-popover")
    assert "hidden" not in popover.get("class", [])
    assert popover["data-anchor"] == "guest-trigger"
    assert popover.find(attrs={"data-guest-action": "done"}) is not None
