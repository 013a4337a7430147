import logging

from fastapi import APIRouter, Query, Request
from fastapi.responses import FileResponse, HTMLResponse, Response

from app.dependencies import RendererDep, SessionsDep, SettingsDep
from app.services.page import resolve_page

logger = logging.getLogger(__name__)

router = APIRouter()

NO_CACHE = "no-cache, no-store, must-revalidate"


@router.get("/", include_in_schema=False)
@router.get("/{path:path}", include_in_schema=False)
async def serve(
    request: Request,
    settings: SettingsDep,
    sessions: SessionsDep,
    renderer: RendererDep,
    path: str = "",
    filters: list[str] = Query(default=[], alias="filter"),
    sort: str | None = None,
) -> Response:
    file_path = resolve_page(settings.site_dir, path)

    if file_path.suffix != ".html":
        return FileResponse(
            file_path,
            headers={"Cache-Control": f"public, max-age={settings.static_max_age}"},
        )

    session_id = request.cookies.get(settings.session_cookie)
    new_id, state = sessions.get_or_create(session_id)
    html = renderer.render(path, state, filters=filters, sort=sort)
    logger.debug("Rendered %s", file_path.name)

    response = HTMLResponse(html, headers={"Cache-Control": NO_CACHE})
    if new_id != session_id:
        response.set_cookie(settings.session_cookie, new_id, httponly=True, samesite="lax")
    return response
