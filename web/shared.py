"""Shared web infrastructure: Jinja2 templates + slowapi rate limiter.

Neutral module with no imports from web.*: safe for all web modules to import.
"""

from fastapi.templating import Jinja2Templates
from pathlib import Path
from slowapi import Limiter
from slowapi.util import get_remote_address

from version import __version__

templates_dir = Path(__file__).parent / "templates"

templates = Jinja2Templates(directory=str(templates_dir))
limiter = Limiter(key_func=get_remote_address)

# Template globals
templates.env.globals["app_version"] = __version__


def register_filters():
    """Register custom Jinja2 filters. Called once after helpers are importable."""
    from web.helpers import format_published
    templates.env.filters["format_published"] = format_published
