from enum import StrEnum

from pydantic import BaseModel


class SortKey(StrEnum):
    price_low = "price-low"
    price_high = "price-high"
    rating = "rating"


SORT_LABELS: dict[SortKey, str] = {
    SortKey.price_low: "Price (Low to High)",
    SortKey.price_high: "Price (High to Low)",
    SortKey.rating: "Top Rated",
}


class Listing(BaseModel):
    id: str
    title: str | None = None
    tags: frozenset[str] = frozenset()
    price: float = 0.0
    rating: float = 0.0
    href: str | None = None
    position: int = 0


class ListingView(BaseModel):
    listing: Listing
    visible: bool


class ListingQuery(BaseModel):
    filters: list[str] = []
    sort: str | None = None
    reset: bool = False


class ListingsResponse(BaseModel):
    active_filters: list[str]
    sort: SortKey | None
    total: int
    shown: int
    items: list[ListingView]
