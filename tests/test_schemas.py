"""
Tests for input schemas: date parsing and blank-field handling.
"""

from datetime import datetime, timezone

import pytest
from pydantic import ValidationError

from eventdesk.schemas.event import EventCreate, EventUpdate, parse_event_date


@pytest.mark.parametrize(
    "text, expected",
    [
        ("01.01.2030 10:00", datetime(2030, 1, 1, 10, 0)),
        (" 01.01.2030 10:00:30 ", datetime(2030, 1, 1, 10, 0, 30)),
        ("01.01.2030", datetime(2030, 1, 1)),
        ("2030-01-01T10:00", datetime(2030, 1, 1, 10, 0)),
    ],
)
def test_parse_event_date(text, expected):
    assert parse_event_date(text) == expected


@pytest.mark.parametrize("text", ["", "tomorrow", "32.01.2030 10:00", "01/01/2030"])
def test_parse_event_date_rejects(text):
    with pytest.raises(ValueError):
        parse_event_date(text)


def test_event_create_requires_valid_date():
    with pytest.raises(ValidationError):
        EventCreate(title="Workshop", date="not a date", location="Room 5")


def test_event_create_placeholders():
    event = EventCreate(title=None, date="01.01.2030 10:00", location="   ")
    assert event.title == "Untitled"
    assert event.location == "Unspecified"


def test_event_update_blank_and_bad_values_become_none():
    changes = EventUpdate(title=" ", date="whenever", location="Room 7")
    assert changes.title is None
    assert changes.date is None
    assert changes.location == "Room 7"
    assert changes.model_dump(exclude_none=True) == {"location": "Room 7"}


@pytest.mark.parametrize("text", ["2030-01-01T10:00+05:00", "2030-01-01T10:00Z"])
def test_parse_event_date_rejects_utc_offset(text):
    with pytest.raises(ValueError):
        parse_event_date(text)


def test_event_create_rejects_aware_datetime():
    with pytest.raises(ValidationError):
        EventCreate(title="Remote", date=datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc), location="Online")


def test_event_update_drops_aware_date():
    changes = EventUpdate(date=datetime(2030, 1, 1, 10, 0, tzinfo=timezone.utc))
    assert changes.date is None
