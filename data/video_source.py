"""Data source adapter: fetches pages from the remote video listing API."""

from __future__ import annotations

import logging
from typing import Optional, Protocol, runtime_checkable

import httpx

from data.errors import FetchError
from data.models import PageResult, parse_page

logger = logging.getLogger(__name__)


@runtime_checkable
class VideoSourceProtocol(Protocol):
    """Anything that can hand out pages by cursor. Use for type hints and test fakes."""

    async def fetch_page(self, cursor: Optional[str] = None) -> PageResult: ...


class VideoSource:
    """HTTP adapter for ``GET <url>?limit=N&cursor=C``, satisfying VideoSourceProtocol.

    The cursor is passed through untouched; only a value previously returned as
    ``next_cursor`` (or None for the first page) is meaningful. No retries are
    made here: every failure surfaces as FetchError and the caller decides.
    """

    def __init__(self, url: str, page_size: int = 12, timeout: float = 10.0,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.url = url
        self.page_size = page_size
        self.timeout = timeout
        self._transport = transport

    @classmethod
    def from_config(cls, source_config) -> "VideoSource":
        return cls(source_config.url, page_size=source_config.page_size,
                   timeout=source_config.timeout)

    async def fetch_page(self, cursor: Optional[str] = None) -> PageResult:
        params: dict[str, str | int] = {"limit": self.page_size}
        if cursor:
            params["cursor"] = cursor
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.get(self.url, params=params)
                resp.raise_for_status()
                payload = resp.json()
        except httpx.HTTPStatusError as e:
            raise FetchError(
                f"Video listing returned HTTP {e.response.status_code}",
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise FetchError(f"Video listing request failed: {e}") from e
        except ValueError as e:
            raise FetchError("Video listing returned a non-JSON body") from e

        page = parse_page(payload)
        logger.debug("Fetched %d videos (cursor=%r, next=%r, has_more=%s)",
                     len(page.videos), cursor, page.next_cursor, page.has_more)
        return page
