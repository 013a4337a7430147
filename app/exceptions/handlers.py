import logging

from fastapi import Request
from fastapi.responses import JSONResponse

from .custom import (
    PageNotFoundError,
    UnknownCurrencyError,
    UnknownGuestFieldError,
    UnknownSortKeyError,
)

logger = logging.getLogger(__name__)


async def unknown_currency_handler(_request: Request, exc: UnknownCurrencyError) -> JSONResponse:
    logger.warning("Rejected currency %r", exc.code)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def unknown_guest_field_handler(_request: Request, exc: UnknownGuestFieldError) -> JSONResponse:
    logger.warning("Rejected guest field %r", exc.field)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def unknown_sort_key_handler(_request: Request, exc: UnknownSortKeyError) -> JSONResponse:
    logger.warning("Rejected sort key %r", exc.key)
    return JSONResponse(status_code=400, content={"detail": exc.message})


async def page_not_found_handler(_request: Request, exc: PageNotFoundError) -> JSONResponse:
    logger.warning("Page not found: %s", exc.path)
    return JSONResponse(status_code=404, content={"detail": exc.message})
