import logging
import math
from decimal import ROUND_HALF_UP, Decimal, localcontext

from bs4 import BeautifulSoup

from app.exceptions.custom import UnknownCurrencyError
from app.schemas.currency import EXCHANGE_RATES, SYMBOLS, Currency
from app.services.notifier import Notifier
from app.storage import CURRENCY_KEY, KeyValueStore

logger = logging.getLogger(__name__)

PRICE_ATTR = "data-price-usd"


def parse_currency(code: str) -> Currency:
    try:
        return Currency(code.strip().upper())
    except (ValueError, AttributeError):
        raise UnknownCurrencyError(str(code)) from None


def convert(amount_usd: float, code: Currency) -> float:
    """USD amount expressed in *code*. rate[USD] is 1."""
    return amount_usd * EXCHANGE_RATES[code]


def format_price(amount_usd: float, code: Currency, decimals: int = 0) -> str:
    """Symbol + converted amount rounded half-up to *decimals* places."""
    quantum = Decimal(1).scaleb(-decimals)
    converted = Decimal(str(convert(amount_usd, code)))
    with localcontext() as ctx:
        # Enough digits for every integer place plus the requested decimals
        ctx.prec = max(ctx.prec, converted.adjusted() + decimals + 2)
        value = converted.quantize(quantum, rounding=ROUND_HALF_UP)
    return f"{SYMBOLS[code]}{value}"


def _parse_amount(raw: str | None) -> float | None:
    if raw is None:
        return None
    try:
        value = float(raw)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


class CurrencyService:
    def __init__(
        self,
        store: KeyValueStore,
        notifier: Notifier,
        default: Currency = Currency.INR,
        decimals: int = 0,
    ):
        self._store = store
        self._notifier = notifier
        self._default = default
        self._decimals = decimals

    @property
    def current(self) -> Currency:
        raw = self._store.get(CURRENCY_KEY)
        if raw is None:
            return self._default
        try:
            return Currency(raw)
        except ValueError:
            logger.warning("Ignoring stored currency %r, using %s", raw, self._default)
            return self._default

    def set_currency(self, code: str) -> Currency:
        currency = parse_currency(code)
        self._store.set(CURRENCY_KEY, currency.value)
        self._notifier.notify(f"Currency changed to {currency}")
        return currency

    def format(self, amount_usd: float) -> str:
        return format_price(amount_usd, self.current, self._decimals)

    def render_prices(self, soup: BeautifulSoup, code: Currency | None = None) -> int:
        """Rewrite every ``data-price-usd`` element. Returns how many changed."""
        code = code or self.current
        updated = 0
        for element in soup.find_all(attrs={PRICE_ATTR: True}):
            amount = _parse_amount(element.get(PRICE_ATTR))
            if amount is None:
                logger.debug("Skipping price element with base %r", element.get(PRICE_ATTR))
                continue
            element.string = format_price(amount, code, self._decimals)
            updated += 1
        return updated
