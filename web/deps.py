"""FastAPI dependency providers: read from app.state, set by main.py."""

from fastapi import Request

from data.view_state import ViewState
from web.sessions import BrowseSession, get_or_create_session, new_session_id


def get_settings_store(request: Request):
    """SettingsStore instance."""
    return request.app.state.settings_store


def get_video_source(request: Request):
    """VideoSource used for new browse sessions."""
    return request.app.state.video_source


def get_view_state(request: Request) -> ViewState:
    """Persisted display preferences."""
    return request.app.state.view_state


def get_web_config(request: Request):
    """WebConfig instance."""
    return request.app.state.web_config


def get_source_config(request: Request):
    """SourceConfig instance."""
    return request.app.state.source_config


def get_browse_session(request: Request) -> BrowseSession:
    """BrowseSession for the current cookie session, created on first use."""
    session_id = request.session.get("browse_id")
    if not session_id:
        session_id = new_session_id()
        request.session["browse_id"] = session_id
    return get_or_create_session(request.app.state, session_id)
