from enum import StrEnum

from pydantic import BaseModel


class GuestField(StrEnum):
    adults = "adults"
    children = "children"
    rooms = "rooms"


# Lower bound per counter; no upper bound.
GUEST_FLOORS: dict[GuestField, int] = {
    GuestField.adults: 1,
    GuestField.children: 0,
    GuestField.rooms: 1,
}


class GuestCounts(BaseModel):
    adults: int = 2
    children: int = 0
    rooms: int = 1


class GuestView(BaseModel):
    counts: GuestCounts
    summary: str
    is_open: bool
    anchor: str | None = None
    decrement_disabled: dict[GuestField, bool]
    body_html: str


class OpenRequest(BaseModel):
    trigger: str


class PointerRequest(BaseModel):
    target: str | None = None
    inside_popover: bool = False
