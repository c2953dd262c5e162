"""
Tests for the event catalog service.
"""

from datetime import datetime

import pytest

from eventdesk.core.exceptions import Forbidden, NotFound, ValidationError
from eventdesk.services import event_service


def test_list_events_sorted_by_date(store, guest):
    """Anyone can list events; soonest first."""
    titles = [e.title for e in event_service.list_events(store)]
    assert titles == ["AI Hackathon", "FinTech Conference", "Symphony Orchestra Concert"]


def test_add_event(store, admin):
    """Admin adds an event with a dd.mm.yyyy hh:mm date."""
    event = event_service.add_event(store, admin, "Workshop", "01.01.2030 10:00", "Room 5")

    assert len(store.list_events()) == 4
    assert event.id == 4
    assert event.title == "Workshop"
    assert event.date == datetime(2030, 1, 1, 10, 0)
    assert event.location == "Room 5"


def test_add_event_blank_fields_get_placeholders(store, admin):
    event = event_service.add_event(store, admin, "  ", "01.01.2030 10:00", "")
    assert event.title == "Untitled"
    assert event.location == "Unspecified"


@pytest.mark.parametrize("user_fixture", ["guest", "ivan"])
def test_add_event_requires_admin(request, store, user_fixture):
    """Non-admins are refused and the catalog is untouched."""
    user = request.getfixturevalue(user_fixture)
    with pytest.raises(Forbidden):
        event_service.add_event(store, user, "Workshop", "01.01.2030 10:00", "Room 5")
    assert len(store.list_events()) == 3


def test_add_event_invalid_date(store, admin):
    with pytest.raises(ValidationError):
        event_service.add_event(store, admin, "Workshop", "next tuesday", "Room 5")
    assert len(store.list_events()) == 3


def test_edit_event_blank_title_keeps_title(store, admin):
    """Only the date changes when title and location are blank."""
    event = event_service.edit_event(store, admin, 1, title="", date="15.03.2031 18:30", location=" ")

    assert event.date == datetime(2031, 3, 15, 18, 30)
    assert event.title == "FinTech Conference"
    assert event.location == "Astana IT University"


def test_edit_event_bad_date_is_ignored(store, admin):
    """An unparseable date is dropped; the other fields still apply."""
    original_date = store.get_event(2).date
    event = event_service.edit_event(store, admin, 2, title="Gala Concert", date="soon")

    assert event.title == "Gala Concert"
    assert event.date == original_date


def test_edit_event_not_found(store, admin):
    with pytest.raises(NotFound):
        event_service.edit_event(store, admin, 99, title="Ghost")


def test_edit_event_requires_admin(store, ivan):
    with pytest.raises(Forbidden):
        event_service.edit_event(store, ivan, 1, title="Hijacked")
    assert store.get_event(1).title == "FinTech Conference"


def test_delete_event(store, admin):
    deleted = event_service.delete_event(store, admin, 2)
    assert deleted.id == 2
    assert store.get_event(2) is None
    assert [e.id for e in store.list_events()] == [1, 3]


def test_delete_missing_event_leaves_catalog(store, admin):
    before = [(e.id, e.title, e.date, e.location) for e in store.list_events()]
    with pytest.raises(NotFound):
        event_service.delete_event(store, admin, 99)
    after = [(e.id, e.title, e.date, e.location) for e in store.list_events()]
    assert after == before


def test_delete_event_keeps_bookings(store, admin, ivan):
    """Deleting an event does not touch bookings that reference it."""
    booking = store.add_booking(user_id=ivan.id, event_id=1)
    event_service.delete_event(store, admin, 1)
    assert store.get_booking(booking.id).event_id == 1


def test_get_event_not_found(store):
    with pytest.raises(NotFound):
        event_service.get_event(store, 99)
