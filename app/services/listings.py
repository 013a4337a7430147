"""Listing filter/sort engine.

The model (active tags, sort key) is kept apart from the page: ``project``
computes order and visibility from plain ``Listing`` values, and ``render``
writes that projection back onto a parsed document.
"""

import logging
import math

from bs4 import BeautifulSoup, Tag

from app.exceptions.custom import UnknownSortKeyError
from app.schemas.listing import SORT_LABELS, Listing, ListingView, SortKey
from app.services.notifier import Notifier

logger = logging.getLogger(__name__)

TAGS_ATTR = "data-tags"
FILTER_ATTR = "data-filter"
SORT_CONTROL_ATTR = "data-sort-control"
CONTAINER_ATTR = "data-listing-container"
CONTAINER_ID = "listings"

_SORT_ATTRS: dict[SortKey, str] = {
    SortKey.price_low: "data-price",
    SortKey.price_high: "data-price",
    SortKey.rating: "data-rating",
}


def parse_sort_key(key: str | None) -> SortKey | None:
    if key is None or key == "":
        return None
    try:
        return SortKey(key)
    except ValueError:
        raise UnknownSortKeyError(key) from None


def parse_tags(raw: str | None) -> frozenset[str]:
    if not raw:
        return frozenset()
    return frozenset(t.strip() for t in raw.split(",") if t.strip())


def _number(raw: str | None) -> float:
    """Numeric attribute value; missing or unparseable is 0."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0


def is_visible(listing: Listing, active: set[str] | frozenset[str]) -> bool:
    return not active or bool(listing.tags & active)


def sort_listings(listings: list[Listing], key: SortKey) -> list[Listing]:
    """Stable sort: equal keys keep their incoming relative order."""
    if key is SortKey.price_low:
        return sorted(listings, key=lambda item: item.price)
    if key is SortKey.price_high:
        return sorted(listings, key=lambda item: -item.price)
    return sorted(listings, key=lambda item: -item.rating)


def find_container(soup: BeautifulSoup) -> Tag | None:
    container = soup.find(attrs={CONTAINER_ATTR: True})
    if container is None:
        container = soup.find(id=CONTAINER_ID)
    return container


def _item_elements(container: Tag) -> list[Tag]:
    return [
        child for child in container.find_all(recursive=False)
        if child.has_attr(TAGS_ATTR)
    ]


def _listing_from_element(element: Tag, position: int) -> Listing:
    title = element.find(["h2", "h3"])
    return Listing(
        id=element.get("id") or f"listing-{position}",
        title=title.get_text(strip=True) if title else None,
        tags=parse_tags(element.get(TAGS_ATTR)),
        price=_number(element.get(_SORT_ATTRS[SortKey.price_low])),
        rating=_number(element.get(_SORT_ATTRS[SortKey.rating])),
        href=element.get("data-href"),
        position=position,
    )


def extract_listings(soup: BeautifulSoup) -> list[Listing]:
    container = find_container(soup)
    if container is None:
        return []
    return [
        _listing_from_element(element, position)
        for position, element in enumerate(_item_elements(container))
    ]


class FilterSortEngine:
    def __init__(self, notifier: Notifier | None = None) -> None:
        self._notifier = notifier
        self.active_tags: set[str] = set()
        self.sort_key: SortKey | None = None

    def _notify(self, message: str) -> None:
        if self._notifier is not None:
            self._notifier.notify(message, "info")

    def set_filter(self, tag: str, checked: bool) -> None:
        if checked:
            self.active_tags.add(tag)
        else:
            self.active_tags.discard(tag)

    def set_filters(self, tags: list[str]) -> None:
        self.active_tags = {t for t in tags if t}

    def configure(self, tags: list[str], sort: str | None) -> None:
        """Replace the whole model without user feedback."""
        key = parse_sort_key(sort)
        self.set_filters(tags)
        self.sort_key = key

    def apply_filters(self, listings: list[Listing]) -> list[ListingView]:
        views = [ListingView(listing=item, visible=is_visible(item, self.active_tags)) for item in listings]
        shown = sum(1 for v in views if v.visible)
        self._notify(f"Showing {shown} of {len(views)} stays")
        return views

    def apply_sort(self, listings: list[Listing], key: str | SortKey) -> list[Listing]:
        self.sort_key = parse_sort_key(key)
        if self.sort_key is None:
            return list(listings)
        self._notify(f"Sorted by {SORT_LABELS[self.sort_key]}")
        return sort_listings(listings, self.sort_key)

    def reset(self) -> None:
        self.active_tags.clear()
        self.sort_key = None
        self._notify("Filters reset")

    def project(self, listings: list[Listing]) -> list[ListingView]:
        """Current order and visibility; does not notify."""
        ordered = sorted(listings, key=lambda item: item.position)
        if self.sort_key is not None:
            ordered = sort_listings(ordered, self.sort_key)
        return [ListingView(listing=item, visible=is_visible(item, self.active_tags)) for item in ordered]

    def render(self, soup: BeautifulSoup) -> list[ListingView]:
        """Project the model onto the page. No-op when the page has no listings."""
        container = find_container(soup)
        if container is None:
            return []

        elements = _item_elements(container)
        listings = [_listing_from_element(el, pos) for pos, el in enumerate(elements)]
        views = self.project(listings)

        # Sorted listings go back into the slots listings held; other children stay put
        slots = []
        for element in elements:
            slot = soup.new_tag("template")
            element.replace_with(slot)
            slots.append(slot)
        for slot, view in zip(slots, views):
            element = elements[view.listing.position]
            classes = [c for c in element.get("class", []) if c != "hidden"]
            if view.visible:
                if element.has_attr("hidden"):
                    del element["hidden"]
            else:
                classes.append("hidden")
                element["hidden"] = ""
            if classes:
                element["class"] = classes
            elif element.has_attr("class"):
                del element["class"]
            slot.replace_with(element)

        for control in soup.find_all("input", attrs={FILTER_ATTR: True}):
            if control[FILTER_ATTR] in self.active_tags:
                control["checked"] = ""
            elif control.has_attr("checked"):
                del control["checked"]

        select = soup.find(attrs={SORT_CONTROL_ATTR: True})
        if select is not None:
            for option in select.find_all("option"):
                if option.has_attr("selected"):
                    del option["selected"]
                if self.sort_key is not None and option.get("value") == self.sort_key.value:
                    option["selected"] = ""

        return views
