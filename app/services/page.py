"""Server-side projection of a visitor's state onto a site page."""

import logging
from enum import StrEnum
from html import escape
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from app.exceptions.custom import PageNotFoundError
from app.schemas.notification import ToastPhase
from app.services.currency import PRICE_ATTR
from app.state import AppState

logger = logging.getLogger(__name__)

ACTION_ATTR = "data-action"
GUESTS_SUMMARY_ATTR = "data-guests-summary"
CARD_ATTR = "data-tags"


class Action(StrEnum):
    book = "book"
    search = "search"
    open_guests = "open-guests"
    open_filters = "open-filters"
    logout = "logout"


def resolve_page(site_dir: Path, path: str) -> Path:
    """Map a request path to a file inside *site_dir*; ``/`` is ``index.html``."""
    relative = path.strip("/") or "index.html"
    root = site_dir.resolve()
    try:
        candidate = (root / relative).resolve()
    except ValueError:
        # e.g. an embedded null byte
        raise PageNotFoundError(path) from None
    if not candidate.is_relative_to(root):
        raise PageNotFoundError(path)
    if candidate.is_dir():
        candidate = candidate / "index.html"
    if not candidate.is_file():
        raise PageNotFoundError(path)
    return candidate


def _set_hidden(element: Tag | None, hidden: bool) -> None:
    if element is None:
        return
    classes = [c for c in element.get("class", []) if c != "hidden"]
    if hidden:
        classes.append("hidden")
    if classes:
        element["class"] = classes
    elif element.has_attr("class"):
        del element["class"]


def _card_of(element: Tag) -> Tag | None:
    for parent in element.parents:
        if isinstance(parent, Tag) and (parent.has_attr(CARD_ATTR) or parent.has_attr("data-card")):
            return parent
    return None


class PageRenderer:
    def __init__(self, site_dir: Path):
        self._site_dir = site_dir

    def load(self, path: str) -> BeautifulSoup:
        file_path = resolve_page(self._site_dir, path)
        return BeautifulSoup(file_path.read_text(encoding="utf-8"), "html.parser")

    def render(
        self,
        path: str,
        state: AppState,
        filters: list[str] | None = None,
        sort: str | None = None,
    ) -> str:
        soup = self.load(path)
        # Filter and sort state lives in the query string, not across reloads
        state.listings.configure(filters or [], sort)
        self.apply(soup, state)
        return str(soup)

    def apply(self, soup: BeautifulSoup, state: AppState) -> BeautifulSoup:
        state.currency.render_prices(soup)
        self._render_currency_select(soup, state)
        self._render_auth(soup, state)
        self._render_guests(soup, state)
        state.listings.render(soup)
        self._annotate_actions(soup, state)
        self._render_toasts(soup, state)
        return soup

    def _render_currency_select(self, soup: BeautifulSoup, state: AppState) -> None:
        select = soup.find(id="currencySelect")
        if select is None:
            return
        for option in select.find_all("option"):
            if option.get("value") == state.selected_currency.value:
                option["selected"] = ""
            elif option.has_attr("selected"):
                del option["selected"]

    def _render_auth(self, soup: BeautifulSoup, state: AppState) -> None:
        user = state.user
        _set_hidden(soup.find(id="auth-buttons"), user is not None)
        _set_hidden(soup.find(id="user-profile"), user is None)
        name_display = soup.find(id="user-name-display")
        if user is not None and name_display is not None:
            name_display.string = user.name

    def _render_guests(self, soup: BeautifulSoup, state: AppState) -> None:
        view = state.guests.render()
        for label in soup.find_all(attrs={GUESTS_SUMMARY_ATTR: True}):
            label.string = view.summary
        popover = soup.find(id="guest-popover")
        if popover is None:
            return
        popover.clear()
        popover.append(BeautifulSoup(view.body_html, "html.parser"))
        _set_hidden(popover, not view.is_open)
        if view.anchor:
            popover["data-anchor"] = view.anchor

    def _annotate_actions(self, soup: BeautifulSoup, state: AppState) -> None:
        """Resolve booking payloads at render time so clients never scrape button text."""
        for button in soup.find_all(attrs={ACTION_ATTR: Action.book.value}):
            card = _card_of(button)
            if card is None:
                continue
            title = card.find(["h2", "h3"])
            price = card.find(attrs={PRICE_ATTR: True})
            button["data-item-title"] = title.get_text(strip=True) if title else "Unknown Item"
            if price is not None:
                button["data-item-price"] = price.get_text(strip=True)
        for button in soup.find_all(attrs={ACTION_ATTR: Action.logout.value}):
            _set_hidden(button, state.user is None)

    def _render_toasts(self, soup: BeautifulSoup, state: AppState) -> None:
        toasts = state.notifier.active()
        if not toasts or soup.body is None:
            return
        region = soup.new_tag("div", id="toast-region")
        for toast in toasts:
            classes = f"toast toast-{toast.kind}"
            if toast.phase is ToastPhase.fading:
                classes += " toast-fading"
            region.append(BeautifulSoup(
                f'<div class="{classes}" role="status" data-toast-id="{toast.id}">'
                f"{escape(toast.message)}</div>",
                "html.parser",
            ))
        soup.body.append(region)
