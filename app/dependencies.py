from typing import Annotated

from fastapi import Depends, Request, Response

from app.config import Settings
from app.services.beacon import BeaconService
from app.services.page import PageRenderer
from app.state import AppState, SessionRegistry


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_beacon(request: Request) -> BeaconService:
    return request.app.state.beacon


def get_renderer(request: Request) -> PageRenderer:
    return request.app.state.renderer


def get_app_state(
    request: Request,
    response: Response,
    settings: Annotated[Settings, Depends(get_settings)],
    sessions: Annotated[SessionRegistry, Depends(get_sessions)],
) -> AppState:
    """The calling visitor's state, creating a session cookie on first contact."""
    session_id = request.cookies.get(settings.session_cookie)
    new_id, state = sessions.get_or_create(session_id)
    if new_id != session_id:
        response.set_cookie(settings.session_cookie, new_id, httponly=True, samesite="lax")
    return state


SettingsDep = Annotated[Settings, Depends(get_settings)]
SessionsDep = Annotated[SessionRegistry, Depends(get_sessions)]
BeaconDep = Annotated[BeaconService, Depends(get_beacon)]
RendererDep = Annotated[PageRenderer, Depends(get_renderer)]
AppStateDep = Annotated[AppState, Depends(get_app_state)]
