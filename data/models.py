"""Video records and page results as returned by the listing API."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Optional

from data.errors import FetchError

_FRACTION_RE = re.compile(r"\.(\d+)")


@dataclass(frozen=True, slots=True)
class VideoRecord:
    """One video's metadata. Immutable once fetched.

    Attributes:
        id:            Unique, stable identifier.
        title:         Video title.
        description:   Free-text description (may be empty).
        thumbnail_url: Opaque thumbnail URI.
        published_at:  Timezone-aware publish time (naive input is taken as UTC).
        channel:       Channel identifier used for filtering (the API's channel_title).
        channel_id:    Upstream channel id, informational only.
    """
    id: str
    title: str
    description: str
    thumbnail_url: str
    published_at: datetime
    channel: str
    channel_id: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "thumbnail_url": self.thumbnail_url,
            "published_at": self.published_at.isoformat(),
            "channel_title": self.channel,
            "channel_id": self.channel_id,
        }


@dataclass(frozen=True, slots=True)
class PageResult:
    """One page from the source: records, continuation cursor, more-available flag."""
    videos: tuple[VideoRecord, ...]
    next_cursor: Optional[str]
    has_more: bool


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 timestamp into an aware datetime (UTC when no offset given)."""
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str) and value:
        raw = value.strip()
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        # fromisoformat on 3.10 takes exactly 3 or 6 fractional digits
        raw = _FRACTION_RE.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), raw, count=1)
        try:
            dt = datetime.fromisoformat(raw)
        except ValueError as e:
            raise FetchError(f"Invalid published_at timestamp: {value!r}") from e
    else:
        raise FetchError(f"Missing published_at timestamp: {value!r}")
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def parse_video(item: Any) -> VideoRecord:
    """Build a VideoRecord from one entry of the API's ``videos`` array."""
    if not isinstance(item, dict):
        raise FetchError(f"Video entry is not an object: {type(item).__name__}")
    video_id = item.get("id")
    if not video_id:
        raise FetchError("Video entry is missing 'id'")
    return VideoRecord(
        id=str(video_id),
        title=str(item.get("title") or ""),
        description=str(item.get("description") or ""),
        thumbnail_url=str(item.get("thumbnail_url") or ""),
        published_at=parse_timestamp(item.get("published_at")),
        channel=str(item.get("channel_title") or ""),
        channel_id=str(item.get("channel_id") or ""),
    )


def parse_page(payload: Any) -> PageResult:
    """Build a PageResult from the listing API's JSON body.

    Raises FetchError when the payload does not have the expected shape.
    """
    if not isinstance(payload, dict):
        raise FetchError("Malformed page payload: expected a JSON object")
    videos = payload.get("videos")
    if videos is None:
        videos = []
    if not isinstance(videos, list):
        raise FetchError("Malformed page payload: 'videos' is not a list")
    has_more = payload.get("has_more", False)
    if not isinstance(has_more, bool):
        raise FetchError("Malformed page payload: 'has_more' is not a boolean")
    next_cursor = payload.get("next_cursor") or None
    if next_cursor is not None:
        next_cursor = str(next_cursor)
    return PageResult(
        videos=tuple(parse_video(v) for v in videos),
        next_cursor=next_cursor,
        has_more=has_more,
    )
