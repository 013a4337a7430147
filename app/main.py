import logging
import sys
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI

from app.config import Settings
from app.exceptions.custom import (
    PageNotFoundError,
    UnknownCurrencyError,
    UnknownGuestFieldError,
    UnknownSortKeyError,
)
from app.exceptions.handlers import (
    page_not_found_handler,
    unknown_currency_handler,
    unknown_guest_field_handler,
    unknown_sort_key_handler,
)
from app.routers.account import router as account_router
from app.routers.actions import router as actions_router
from app.routers.guests import router as guests_router
from app.routers.listings import router as listings_router
from app.routers.site import router as site_router
from app.services.beacon import BeaconService
from app.services.page import PageRenderer
from app.state import SessionRegistry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = Settings()

    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stdout,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)

    async with httpx.AsyncClient(timeout=30.0) as client:
        beacon = BeaconService(client, settings.webhook_url)

        app.state.settings = settings
        app.state.sessions = SessionRegistry(settings)
        app.state.beacon = beacon
        app.state.renderer = PageRenderer(settings.site_dir)

        logger.info("Serving %s", settings.site_dir)
        yield

        await beacon.drain()


app = FastAPI(title="Travel Hub", lifespan=lifespan)

app.add_exception_handler(UnknownCurrencyError, unknown_currency_handler)
app.add_exception_handler(UnknownGuestFieldError, unknown_guest_field_handler)
app.add_exception_handler(UnknownSortKeyError, unknown_sort_key_handler)
app.add_exception_handler(PageNotFoundError, page_not_found_handler)

app.include_router(account_router)
app.include_router(guests_router)
app.include_router(listings_router)
app.include_router(actions_router)
# Catch-all page route goes last
app.include_router(site_router)
