from __future__ import annotations

from pydantic import BaseModel

from app.schemas.currency import Currency
from app.schemas.guests import GuestView
from app.schemas.notification import ToastView
from app.schemas.user import User


class AuthOutcome(BaseModel):
    user: User | None
    notification: str
    redirect_to: str | None = None
    redirect_after_ms: int | None = None


class CurrencyResponse(BaseModel):
    currency: Currency
    symbol: str
    rate: float


class ActionResponse(BaseModel):
    notification: str
    redirect_to: str | None = None
    redirect_after_ms: int | None = None


class SearchResponse(ActionResponse):
    nights: int | None = None


class StateResponse(BaseModel):
    currency: Currency
    user: User | None
    guests: GuestView
    notifications: list[ToastView]
