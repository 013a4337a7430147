from fastapi import APIRouter

from app.dependencies import AppStateDep
from app.schemas.currency import EXCHANGE_RATES, SYMBOLS, CurrencyRequest
from app.schemas.responses import AuthOutcome, CurrencyResponse, StateResponse
from app.schemas.user import LoginRequest, RegisterRequest

router = APIRouter(prefix="/api")


@router.get("/state", response_model=StateResponse)
async def get_state(state: AppStateDep) -> StateResponse:
    return StateResponse(
        currency=state.selected_currency,
        user=state.user,
        guests=state.guests.render(),
        notifications=state.notifier.active(),
    )


@router.put("/currency", response_model=CurrencyResponse)
async def set_currency(request: CurrencyRequest, state: AppStateDep) -> CurrencyResponse:
    currency = state.currency.set_currency(request.currency)
    return CurrencyResponse(
        currency=currency,
        symbol=SYMBOLS[currency],
        rate=EXCHANGE_RATES[currency],
    )


@router.post("/auth/login", response_model=AuthOutcome)
async def login(request: LoginRequest, state: AppStateDep) -> AuthOutcome:
    return state.auth.login(request.email, request.password)


@router.post("/auth/register", response_model=AuthOutcome)
async def register(request: RegisterRequest, state: AppStateDep) -> AuthOutcome:
    return state.auth.register(
        request.full_name,
        request.email,
        request.password,
        from_register_page=request.from_register_page,
    )


@router.post("/auth/logout", response_model=AuthOutcome)
async def logout(state: AppStateDep) -> AuthOutcome:
    return state.auth.logout()
