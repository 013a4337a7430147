from html import escape

from app.exceptions.custom import UnknownGuestFieldError
from app.schemas.guests import GUEST_FLOORS, GuestCounts, GuestField, GuestView

_LABELS: dict[GuestField, tuple[str, str]] = {
    GuestField.adults: ("adult", "adults"),
    GuestField.children: ("child", "children"),
    GuestField.rooms: ("room", "rooms"),
}


def _parse_field(field: str) -> GuestField:
    try:
        return GuestField(field)
    except ValueError:
        raise UnknownGuestFieldError(field) from None


def summarize(counts: GuestCounts) -> str:
    """e.g. ``2 adults · 1 child · 1 room``"""
    parts = []
    for field in GuestField:
        value = getattr(counts, field.value)
        singular, plural = _LABELS[field]
        parts.append(f"{value} {singular if value == 1 else plural}")
    return " · ".join(parts)


def render_body(counts: GuestCounts) -> str:
    rows = []
    for field in GuestField:
        value = getattr(counts, field.value)
        disabled = " disabled" if value <= GUEST_FLOORS[field] else ""
        label = escape(_LABELS[field][1].capitalize())
        rows.append(
            f'<div class="guest-row" data-guest-field="{field}">'
            f"<span>{label}</span>"
            f'<button type="button" data-guest-action="decrement" data-guest-field="{field}"{disabled}>-</button>'
            f'<span class="guest-count">{value}</span>'
            f'<button type="button" data-guest-action="increment" data-guest-field="{field}">+</button>'
            f"</div>"
        )
    rows.append('<button type="button" data-guest-action="done">Done</button>')
    return "".join(rows)


class GuestSelector:
    """Guest-count popover: bounded counters plus a single re-attachable panel."""

    def __init__(self, counts: GuestCounts | None = None) -> None:
        self.counts = counts or GuestCounts()
        self.is_open = False
        self.anchor: str | None = None

    def increment(self, field: str) -> GuestView:
        key = _parse_field(field)
        setattr(self.counts, key.value, getattr(self.counts, key.value) + 1)
        return self.render()

    def decrement(self, field: str) -> GuestView:
        key = _parse_field(field)
        value = getattr(self.counts, key.value)
        if value > GUEST_FLOORS[key]:
            setattr(self.counts, key.value, value - 1)
        return self.render()

    def open(self, trigger: str) -> GuestView:
        self.anchor = trigger
        self.is_open = True
        return self.render()

    def close(self) -> GuestView:
        self.is_open = False
        return self.render()

    def toggle(self, trigger: str) -> GuestView:
        # Another trigger takes the panel over instead of closing it
        if self.is_open and trigger == self.anchor:
            return self.close()
        return self.open(trigger)

    def pointer_down(self, target: str | None, inside_popover: bool = False) -> GuestView:
        if self.is_open and not inside_popover and target != self.anchor:
            self.is_open = False
        return self.render()

    def render(self) -> GuestView:
        return GuestView(
            counts=self.counts.model_copy(),
            summary=summarize(self.counts),
            is_open=self.is_open,
            anchor=self.anchor,
            decrement_disabled={
                field: getattr(self.counts, field.value) <= GUEST_FLOORS[field]
                for field in GuestField
            },
            body_html=render_body(self.counts),
        )
