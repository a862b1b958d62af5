"""Browse sessions: one accumulated video list and one filter state per browser."""

import logging
import secrets
import time

from data.accumulation import AccumulationStore, STATUS_FAILED, STATUS_IDLE
from data.filters import FilterState, channel_index, visible_set

logger = logging.getLogger(__name__)

FETCH_ERROR_MESSAGE = "Failed to fetch videos. Please try again."

_SESSION_EVICT_AGE = 6 * 3600  # seconds without a request before a session is dropped


class BrowseSession:
    """Accumulation store + filter state for a single browser session."""

    def __init__(self, source):
        self.store = AccumulationStore(source)
        self.filters = FilterState()
        self.last_seen = time.monotonic()

    def touch(self) -> None:
        self.last_seen = time.monotonic()

    async def ensure_loaded(self) -> None:
        """Fetch the first page if nothing has been requested yet."""
        st = self.store
        if st.pages_loaded == 0 and st.status == STATUS_IDLE and st.cursor is None:
            await st.load_next()

    def snapshot(self) -> dict:
        """Everything the presentation layer needs, read from one consistent state."""
        records = self.store.records
        criteria = self.filters.criteria
        visible = visible_set(records, criteria)
        failed = self.store.status == STATUS_FAILED
        return {
            "videos": visible,
            "channels": channel_index(records),
            "criteria": criteria,
            "status": self.store.status,
            "error": FETCH_ERROR_MESSAGE if failed else None,
            "error_detail": self.store.error if failed else None,
            "has_more": self.store.has_more,
            "can_load_more": self.store.can_load_more(),
            "total": len(records),
            "visible": len(visible),
        }


# ---------------------------------------------------------------------------
# App state
# ---------------------------------------------------------------------------

def init_app_state(state):
    """Initialize session registry on app.state. Called by main.py after setting deps."""
    state.browse_sessions = {}


def new_session_id() -> str:
    return secrets.token_hex(16)


def evict_idle_sessions(state, max_age: float = _SESSION_EVICT_AGE) -> int:
    """Drop sessions not seen for ``max_age`` seconds. Returns the number removed."""
    cutoff = time.monotonic() - max_age
    stale = [sid for sid, s in state.browse_sessions.items() if s.last_seen < cutoff]
    for sid in stale:
        del state.browse_sessions[sid]
    if stale:
        logger.info("Evicted %d idle browse sessions", len(stale))
    return len(stale)


def get_or_create_session(state, session_id: str) -> BrowseSession:
    sessions = state.browse_sessions
    session = sessions.get(session_id)
    if session is None:
        evict_idle_sessions(state)
        session = BrowseSession(state.video_source)
        sessions[session_id] = session
        logger.debug("Created browse session %s", session_id[:8])
    session.touch()
    return session
