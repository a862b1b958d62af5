"""Filter routes: replace, toggle a channel, clear."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from web.deps import get_browse_session
from web.helpers import ChannelToggle, FilterUpdate, snapshot_to_json

router = APIRouter()


@router.put("/api/filters")
async def replace_filters(request: Request, body: FilterUpdate):
    """Set all four criteria in one step."""
    session = get_browse_session(request)
    session.filters.update(
        search=body.search,
        start_date=body.start_date,
        end_date=body.end_date,
        channels=body.channels,
    )
    return JSONResponse(snapshot_to_json(session.snapshot()))


@router.post("/api/filters/channels/toggle")
async def toggle_channel(request: Request, body: ChannelToggle):
    session = get_browse_session(request)
    session.filters.toggle_channel(body.channel)
    return JSONResponse(snapshot_to_json(session.snapshot()))


@router.post("/api/filters/clear")
async def clear_filters(request: Request):
    session = get_browse_session(request)
    session.filters.clear()
    return JSONResponse(snapshot_to_json(session.snapshot()))
