import asyncio
import logging

from fastapi import APIRouter

from app.dependencies import AppStateDep, BeaconDep, SettingsDep
from app.schemas.beacon import BookingAttemptEvent, BookingRequest, SearchEvent, SearchRequest
from app.schemas.notification import ToastView
from app.schemas.responses import ActionResponse, SearchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.post("/search", response_model=SearchResponse)
async def submit_search(
    request: SearchRequest,
    state: AppStateDep,
    beacon: BeaconDep,
    settings: SettingsDep,
) -> SearchResponse:
    beacon.fire(SearchEvent(
        location=request.location,
        check_in=request.check_in,
        check_out=request.check_out,
        guests=state.guests.counts.model_copy(),
        userCurrency=state.selected_currency.value,
    ))

    # Simulated processing delay; independent of the beacon
    if settings.search_delay > 0:
        await asyncio.sleep(settings.search_delay)

    logger.info("Search for %r (nights=%s)", request.location, request.nights)
    message = "Search preferences saved!"
    state.notifier.notify(message)
    return SearchResponse(notification=message, nights=request.nights)


@router.post("/bookings", response_model=ActionResponse)
async def attempt_booking(
    request: BookingRequest,
    state: AppStateDep,
    beacon: BeaconDep,
) -> ActionResponse:
    title = request.item or "Unknown Item"
    beacon.fire(BookingAttemptEvent(
        item=title,
        price=request.price,
        currency=state.selected_currency.value,
    ))
    logger.info("Booking attempt for %s", title)
    message = f"Starting booking for {title}..."
    state.notifier.notify(message)
    return ActionResponse(notification=message)


@router.get("/notifications", response_model=list[ToastView])
async def list_notifications(state: AppStateDep) -> list[ToastView]:
    return state.notifier.active()
