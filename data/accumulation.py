"""Accumulation store: every record fetched so far, in fetch order.

Pages are appended as they arrive and never reordered or deduplicated. At most
one page request is in flight at a time; a failed request leaves the records
and cursor exactly as they were so the same page can be retried.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

from data.errors import FetchError
from data.models import VideoRecord
from data.video_source import VideoSourceProtocol

logger = logging.getLogger(__name__)

STATUS_IDLE = "idle"
STATUS_LOADING = "loading"
STATUS_FAILED = "failed"


class AccumulationStore:
    """Client-side accumulated video list fed by a paginated source."""

    def __init__(self, source: VideoSourceProtocol):
        self.source = source
        self._records: tuple[VideoRecord, ...] = ()
        self._cursor: Optional[str] = None
        self._has_more = True
        self._status = STATUS_IDLE
        self._error: Optional[str] = None
        self._pages_loaded = 0
        self._generation = 0  # bumped by reset(); stale fetch results are dropped
        self._pending: Optional[asyncio.Future] = None  # outstanding fetch, survives reset()

    @property
    def records(self) -> tuple[VideoRecord, ...]:
        return self._records

    @property
    def cursor(self) -> Optional[str]:
        return self._cursor

    @property
    def has_more(self) -> bool:
        return self._has_more

    @property
    def status(self) -> str:
        return self._status

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def pages_loaded(self) -> int:
        return self._pages_loaded

    @property
    def in_flight(self) -> bool:
        return self._pending is not None

    def __len__(self) -> int:
        return len(self._records)

    def can_load_more(self) -> bool:
        return self._has_more and self._pending is None

    def reset(self) -> None:
        """Drop everything fetched so far. Used when the source itself changes."""
        self._generation += 1
        self._records = ()
        self._cursor = None
        self._has_more = True
        self._status = STATUS_IDLE
        self._error = None
        self._pages_loaded = 0

    async def wait_settled(self) -> None:
        """Wait until a fetch started before reset() has finished."""
        while self._pending is not None:
            await asyncio.wait([self._pending])

    async def load_next(self) -> bool:
        """Fetch the page after the current cursor and append it.

        Returns True if a page was appended. A call made while another fetch
        is in flight (including one started before reset()), or after the source
        reported no more pages, does nothing.
        FetchError is recorded on the store, not raised.
        """
        if self._pending is not None or not self._has_more:
            return False

        generation = self._generation
        cursor = self._cursor
        self._status = STATUS_LOADING
        self._error = None
        self._pending = asyncio.ensure_future(self.source.fetch_page(cursor))
        try:
            page = await self._pending
        except FetchError as e:
            if generation != self._generation:
                return False
            self._status = STATUS_FAILED
            self._error = e.message
            logger.warning("Page fetch failed (cursor=%r): %s", cursor, e.message)
            return False
        except asyncio.CancelledError:
            if generation == self._generation:
                self._status = STATUS_IDLE
            raise
        except Exception as e:
            if generation == self._generation:
                self._status = STATUS_FAILED
                self._error = f"Unexpected error: {e}"
            raise
        finally:
            self._pending = None

        if generation != self._generation:
            logger.debug("Discarding page fetched before reset (cursor=%r)", cursor)
            return False

        self._records = self._records + page.videos
        self._cursor = page.next_cursor
        self._has_more = page.has_more
        self._pages_loaded += 1
        self._status = STATUS_IDLE
        logger.info("Loaded page %d: %d videos (%d total, has_more=%s)",
                    self._pages_loaded, len(page.videos), len(self._records), page.has_more)
        return True
