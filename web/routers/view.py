"""Display preference routes: layout and color scheme toggles."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from web.deps import get_view_state

router = APIRouter()


@router.get("/api/view")
async def get_view(request: Request):
    return JSONResponse(get_view_state(request).to_dict())


@router.post("/api/view/toggle-mode")
async def toggle_mode(request: Request):
    """Switch between grid and list layout."""
    view = get_view_state(request)
    view.toggle_presentation()
    return JSONResponse(view.to_dict())


@router.post("/api/view/toggle-theme")
async def toggle_theme(request: Request):
    """Switch between light and dark color scheme."""
    view = get_view_state(request)
    view.toggle_color_scheme()
    return JSONResponse(view.to_dict())
