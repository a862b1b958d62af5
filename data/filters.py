"""Client-side filtering over the accumulated video list.

A record is visible when it passes all four criteria (search text, start
date, end date, channel set); each criterion passes trivially when unset.
Everything here is a pure function of (records, criteria), so it is safe to
recompute on every keystroke.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from datetime import date, datetime, time, timedelta, timezone
from typing import Iterable, Optional

from data.models import VideoRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FilterCriteria:
    """Current filter settings. An empty ``channels`` set means no channel restriction."""
    search: str = ""
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    channels: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not (self.search or self.start_date or self.end_date or self.channels)


def _day_start(day: date) -> datetime:
    return datetime.combine(day, time.min, tzinfo=timezone.utc)


def matches_search(record: VideoRecord, search: str) -> bool:
    if not search:
        return True
    needle = search.lower()
    return needle in record.title.lower() or needle in record.description.lower()


def matches_start(record: VideoRecord, start_date: Optional[date]) -> bool:
    if start_date is None:
        return True
    return record.published_at >= _day_start(start_date)


def matches_end(record: VideoRecord, end_date: Optional[date]) -> bool:
    """Inclusive of the whole end day, not just its first instant.

    A video published at 23:59 UTC on ``end_date`` passes; a bound that stopped
    at midnight would exclude everything published later that day.
    """
    if end_date is None:
        return True
    return record.published_at < _day_start(end_date + timedelta(days=1))


def matches_channel(record: VideoRecord, channels: frozenset[str]) -> bool:
    if not channels:
        return True
    return record.channel in channels


def evaluate(record: VideoRecord, criteria: FilterCriteria) -> bool:
    """True if the record passes every criterion."""
    return (
        matches_search(record, criteria.search)
        and matches_start(record, criteria.start_date)
        and matches_end(record, criteria.end_date)
        and matches_channel(record, criteria.channels)
    )


def visible_set(records: Iterable[VideoRecord], criteria: FilterCriteria) -> list[VideoRecord]:
    """Records passing ``criteria``, in their original order."""
    if criteria.is_empty:
        return list(records)
    return [r for r in records if evaluate(r, criteria)]


def channel_index(records: Iterable[VideoRecord]) -> list[str]:
    """Distinct channel identifiers across ``records``, sorted."""
    return sorted({r.channel for r in records})


class FilterState:
    """Owner of the current FilterCriteria.

    Every mutator swaps in a new immutable criteria object with one
    assignment, so readers only ever see a complete before or after state.
    """

    def __init__(self, criteria: Optional[FilterCriteria] = None):
        self.criteria = criteria or FilterCriteria()

    def set_search(self, text: str) -> FilterCriteria:
        self.criteria = replace(self.criteria, search=text or "")
        return self.criteria

    def set_start_date(self, day: Optional[date]) -> FilterCriteria:
        self.criteria = replace(self.criteria, start_date=day)
        return self.criteria

    def set_end_date(self, day: Optional[date]) -> FilterCriteria:
        self.criteria = replace(self.criteria, end_date=day)
        return self.criteria

    def set_channels(self, channels: Iterable[str]) -> FilterCriteria:
        self.criteria = replace(self.criteria, channels=frozenset(channels))
        return self.criteria

    def toggle_channel(self, channel: str) -> FilterCriteria:
        """Select ``channel`` if unselected, otherwise deselect it."""
        current = self.criteria.channels
        if channel in current:
            channels = current - {channel}
        else:
            channels = current | {channel}
        self.criteria = replace(self.criteria, channels=channels)
        return self.criteria

    def update(self, **fields) -> FilterCriteria:
        """Replace several criteria at once (search, start_date, end_date, channels)."""
        if "channels" in fields:
            fields["channels"] = frozenset(fields["channels"] or ())
        if "search" in fields:
            fields["search"] = fields["search"] or ""
        self.criteria = replace(self.criteria, **fields)
        return self.criteria

    def clear(self) -> FilterCriteria:
        """Reset all four criteria in a single step."""
        self.criteria = FilterCriteria()
        logger.debug("Filters cleared")
        return self.criteria

    def apply(self, records: Iterable[VideoRecord]) -> list[VideoRecord]:
        return visible_set(records, self.criteria)
