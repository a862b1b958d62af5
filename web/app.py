"""FastAPI application: routers, rate limiting, template filters.

Dependencies (settings store, video source, view state, configs) are attached
to ``app.state`` by main.py before the server starts.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded

from version import __version__
from web.shared import limiter, register_filters
from web.routers.catalog import router as catalog_router
from web.routers.filters import router as filters_router
from web.routers.pages import router as pages_router
from web.routers.view import router as view_router

logger = logging.getLogger(__name__)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded):
    return JSONResponse({"error": "Too many requests. Please wait a moment and try again."},
                        status_code=429)


def create_app() -> FastAPI:
    """Build a FastAPI app with all routers. State and middleware are wired by the caller."""
    new_app = FastAPI(title="ytdash", version=__version__)
    new_app.state.limiter = limiter
    new_app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    new_app.include_router(pages_router)
    new_app.include_router(catalog_router)
    new_app.include_router(filters_router)
    new_app.include_router(view_router)
    register_filters()
    return new_app


app = create_app()
