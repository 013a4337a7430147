from fastapi import APIRouter

from app.dependencies import AppStateDep
from app.schemas.guests import GuestView, OpenRequest, PointerRequest

router = APIRouter(prefix="/api/guests")


@router.get("", response_model=GuestView)
async def get_guests(state: AppStateDep) -> GuestView:
    return state.guests.render()


@router.post("/open", response_model=GuestView)
async def open_popover(request: OpenRequest, state: AppStateDep) -> GuestView:
    return state.guests.open(request.trigger)


@router.post("/close", response_model=GuestView)
async def close_popover(state: AppStateDep) -> GuestView:
    return state.guests.close()


@router.post("/toggle", response_model=GuestView)
async def toggle_popover(request: OpenRequest, state: AppStateDep) -> GuestView:
    return state.guests.toggle(request.trigger)


@router.post("/pointer", response_model=GuestView)
async def pointer_down(request: PointerRequest, state: AppStateDep) -> GuestView:
    return state.guests.pointer_down(request.target, inside_popover=request.inside_popover)


@router.post("/{field}/increment", response_model=GuestView)
async def increment(field: str, state: AppStateDep) -> GuestView:
    return state.guests.increment(field)


@router.post("/{field}/decrement", response_model=GuestView)
async def decrement(field: str, state: AppStateDep) -> GuestView:
    return state.guests.decrement(field)
