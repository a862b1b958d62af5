"""Page routes: dashboard."""

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from web.shared import templates
from web.deps import get_browse_session, get_view_state

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Dashboard: filters, channel chips, and the visible videos in grid or list layout."""
    session = get_browse_session(request)
    await session.ensure_loaded()
    view = get_view_state(request)
    return templates.TemplateResponse(request, "index.html", {
        **session.snapshot(),
        "view_mode": view.presentation_mode,
        "theme_mode": view.color_scheme,
    })
