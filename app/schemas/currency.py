from enum import StrEnum

from pydantic import BaseModel


class Currency(StrEnum):
    USD = "USD"
    EUR = "EUR"
    INR = "INR"


# USD-relative multipliers; USD is the pivot.
EXCHANGE_RATES: dict[Currency, float] = {
    Currency.USD: 1.0,
    Currency.EUR: 0.92,
    Currency.INR: 83.12,
}

SYMBOLS: dict[Currency, str] = {
    Currency.USD: "$",
    Currency.EUR: "€",
    Currency.INR: "₹",
}


class CurrencyRequest(BaseModel):
    currency: str
