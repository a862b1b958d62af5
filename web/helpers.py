"""Shared request models and serialization helpers used across web routers."""

from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel

from data.filters import FilterCriteria
from data.models import VideoRecord


class FilterUpdate(BaseModel):
    """Full replacement of the filter criteria. Omitted fields are unset."""
    search: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    channels: list[str] = []


class ChannelToggle(BaseModel):
    channel: str


def format_published(value: datetime) -> str:
    """Format a publish time like 'March 1, 2024, 10:30 AM'."""
    if not value:
        return ""
    hour = value.strftime("%I").lstrip("0") or "12"
    return f"{value.strftime('%B')} {value.day}, {value.year}, {hour}:{value.strftime('%M %p')}"


def video_to_dict(video: VideoRecord) -> dict:
    d = video.to_dict()
    d["published_display"] = format_published(video.published_at)
    return d


def criteria_to_dict(criteria: FilterCriteria) -> dict:
    return {
        "search": criteria.search,
        "start_date": criteria.start_date.isoformat() if criteria.start_date else None,
        "end_date": criteria.end_date.isoformat() if criteria.end_date else None,
        "channels": sorted(criteria.channels),
    }


def snapshot_to_json(snap: dict) -> dict:
    """JSON-safe form of BrowseSession.snapshot()."""
    return {
        **snap,
        "videos": [video_to_dict(v) for v in snap["videos"]],
        "criteria": criteria_to_dict(snap["criteria"]),
    }
