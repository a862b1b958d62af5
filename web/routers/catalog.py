"""Catalog API routes: accumulated video listing, load-more, reset."""

import logging

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from web.shared import limiter
from web.deps import get_browse_session
from web.helpers import snapshot_to_json

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/api/videos")
async def api_videos(request: Request):
    """Visible videos for the current filters plus fetch status.

    A fresh session triggers the first page load.
    """
    session = get_browse_session(request)
    await session.ensure_loaded()
    return JSONResponse(snapshot_to_json(session.snapshot()))


@router.post("/api/videos/more")
@limiter.limit("30/minute")
async def api_load_more(request: Request):
    """Fetch the next page. Does nothing while a fetch is already running."""
    session = get_browse_session(request)
    appended = await session.store.load_next()
    return JSONResponse({"appended": appended, **snapshot_to_json(session.snapshot())})


@router.post("/api/videos/reset")
@limiter.limit("10/minute")
async def api_reset(request: Request):
    """Drop the accumulated videos and reload the first page."""
    session = get_browse_session(request)
    session.store.reset()
    await session.store.wait_settled()
    await session.store.load_next()
    return JSONResponse(snapshot_to_json(session.snapshot()))
