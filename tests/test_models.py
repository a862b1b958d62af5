"""Tests for data/models.py: payload parsing."""

from datetime import datetime, timedelta, timezone

import pytest

from data.errors import FetchError
from data.models import parse_page, parse_timestamp, parse_video


def _item(**overrides):
    item = {
        "id": "vid1",
        "title": "Go Tutorial",
        "description": "Learn Go",
        "thumbnail_url": "https://i.ytimg.com/vi/vid1/hqdefault.jpg",
        "published_at": "2024-03-01T10:30:00Z",
        "channel_title": "Acme",
        "channel_id": "UCacme",
    }
    item.update(overrides)
    return item


class TestParseTimestamp:
    def test_zulu_suffix(self):
        dt = parse_timestamp("2024-03-01T10:30:00Z")
        assert dt == datetime(2024, 3, 1, 10, 30, tzinfo=timezone.utc)

    def test_offset_preserved(self):
        dt = parse_timestamp("2024-03-01T10:30:00+02:00")
        assert dt.utcoffset() == timedelta(hours=2)

    def test_naive_taken_as_utc(self):
        assert parse_timestamp("2024-03-01T10:30:00").tzinfo == timezone.utc

    def test_nanosecond_fraction(self):
        dt = parse_timestamp("2024-03-01T10:30:00.123456789Z")
        assert dt == datetime(2024, 3, 1, 10, 30, 0, 123456, tzinfo=timezone.utc)

    def test_single_digit_fraction(self):
        dt = parse_timestamp("2024-03-01T10:30:00.5+00:00")
        assert dt.microsecond == 500000

    @pytest.mark.parametrize("bad", ["", None, "yesterday", 12345])
    def test_invalid_raises_fetch_error(self, bad):
        with pytest.raises(FetchError):
            parse_timestamp(bad)


class TestParseVideo:
    def test_maps_api_fields(self):
        v = parse_video(_item())
        assert v.id == "vid1"
        assert v.title == "Go Tutorial"
        assert v.channel == "Acme"
        assert v.channel_id == "UCacme"
        assert v.published_at.year == 2024

    def test_missing_optional_text_becomes_empty(self):
        v = parse_video(_item(description=None, channel_id=None))
        assert v.description == ""
        assert v.channel_id == ""

    def test_missing_id_raises(self):
        with pytest.raises(FetchError, match="missing 'id'"):
            parse_video(_item(id=""))

    def test_non_object_raises(self):
        with pytest.raises(FetchError):
            parse_video(["not", "a", "dict"])

    def test_record_is_immutable(self):
        v = parse_video(_item())
        with pytest.raises(AttributeError):
            v.title = "changed"

    def test_to_dict_uses_api_names(self):
        d = parse_video(_item()).to_dict()
        assert d["channel_title"] == "Acme"
        assert d["published_at"] == "2024-03-01T10:30:00+00:00"


class TestParsePage:
    def test_full_page(self):
        page = parse_page({"videos": [_item(), _item(id="vid2")], "next_cursor": "abc", "has_more": True})
        assert [v.id for v in page.videos] == ["vid1", "vid2"]
        assert page.next_cursor == "abc"
        assert page.has_more is True

    def test_empty_cursor_normalised_to_none(self):
        page = parse_page({"videos": [], "next_cursor": "", "has_more": False})
        assert page.next_cursor is None
        assert page.videos == ()

    def test_null_videos_is_empty_page(self):
        assert parse_page({"videos": None, "has_more": False}).videos == ()

    @pytest.mark.parametrize("payload", [
        [],
        "text",
        {"videos": {"id": "x"}},
        {"videos": [], "has_more": "false"},
        {"videos": [], "has_more": 1},
    ])
    def test_malformed_payload_raises(self, payload):
        with pytest.raises(FetchError):
            parse_page(payload)

    def test_missing_has_more_means_last_page(self):
        assert parse_page({"videos": []}).has_more is False
