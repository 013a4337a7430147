from datetime import date, datetime, timezone
from typing import Literal

from pydantic import BaseModel, Field, model_validator

from app.schemas.guests import GuestCounts


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class SearchEvent(BaseModel):
    type: Literal["search"] = "search"
    location: str
    check_in: date | None = None
    check_out: date | None = None
    guests: GuestCounts | None = None
    userCurrency: str
    timestamp: str = Field(default_factory=_now_iso)


class BookingAttemptEvent(BaseModel):
    type: Literal["booking_attempt"] = "booking_attempt"
    item: str
    price: str | None = None
    currency: str
    timestamp: str = Field(default_factory=_now_iso)


BeaconEvent = SearchEvent | BookingAttemptEvent


class BeaconResult(BaseModel):
    ok: bool
    status_code: int | None = None
    error: str | None = None


class SearchRequest(BaseModel):
    location: str = ""
    check_in: date | None = None
    check_out: date | None = None

    @model_validator(mode="after")
    def _check_dates(self) -> "SearchRequest":
        if self.check_in and self.check_out and self.check_out <= self.check_in:
            raise ValueError("check_out must be after check_in")
        return self

    @property
    def nights(self) -> int | None:
        if self.check_in and self.check_out:
            return (self.check_out - self.check_in).days
        return None


class BookingRequest(BaseModel):
    item: str | None = None
    price: str | None = None
