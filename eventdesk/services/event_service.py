"""
Event catalog service: listing for everyone, add/edit/delete for admins.
"""

from typing import Optional, Union
from datetime import datetime
from pydantic import ValidationError as SchemaValidationError

from eventdesk.core.access import Gate, require_access
from eventdesk.core.exceptions import NotFound, ValidationError
from eventdesk.core.logging import get_logger
from eventdesk.db.store import InMemoryStore
from eventdesk.models.event import Event
from eventdesk.models.user import User
from eventdesk.schemas.event import EventCreate, EventUpdate

logger = get_logger(__name__)

DateInput = Union[str, datetime, None]


def list_events(store: InMemoryStore) -> list[Event]:
    """All events, soonest first. Open to every role."""
    return store.list_events(order_by=lambda e: e.date)


def get_event(store: InMemoryStore, event_id: int) -> Event:
    event = store.get_event(event_id)
    if event is None:
        raise NotFound(f"Event {event_id} not found")
    return event


def add_event(
    store: InMemoryStore,
    user: User,
    title: Optional[str],
    date: DateInput,
    location: Optional[str],
) -> Event:
    """
    Add an event to the catalog. Admin only.
    Blank title/location fall back to placeholders; an unparseable date fails.
    """
    require_access(user, Gate.ADMIN)

    try:
        event_data = EventCreate(title=title, date=date, location=location)
    except SchemaValidationError:
        logger.warning("event_create_rejected", reason="invalid_date", date=str(date))
        raise ValidationError("Invalid date format, expected dd.mm.yyyy hh:mm") from None

    event = store.add_event(
        title=event_data.title,
        date=event_data.date,
        location=event_data.location,
    )
    logger.info("event_created", event_id=event.id, title=event.title, admin_id=user.id)
    return event


def edit_event(
    store: InMemoryStore,
    user: User,
    event_id: int,
    title: Optional[str] = None,
    date: DateInput = None,
    location: Optional[str] = None,
) -> Event:
    """
    Update an event in place. Admin only.

    Partial success is intended: blank fields are skipped, and a date that
    does not parse is dropped while the other fields still apply.
    """
    require_access(user, Gate.ADMIN)

    changes = EventUpdate(title=title, date=date, location=location)
    if date is not None and str(date).strip() and changes.date is None:
        logger.info("event_edit_date_ignored", event_id=event_id, date=str(date))

    with store.transaction():
        event = store.update_event(
            event_id,
            title=changes.title,
            date=changes.date,
            location=changes.location,
        )
        if event is None:
            raise NotFound(f"Event {event_id} not found")

    logger.info(
        "event_updated",
        event_id=event.id,
        fields=sorted(changes.model_dump(exclude_none=True)),
        admin_id=user.id,
    )
    return event


def delete_event(store: InMemoryStore, user: User, event_id: int) -> Event:
    """
    Remove an event. Admin only.
    Bookings that reference the event are left as they are.
    """
    require_access(user, Gate.ADMIN)

    with store.transaction():
        event = store.remove_event(event_id)
        if event is None:
            raise NotFound(f"Event {event_id} not found")
        orphaned = len(store.list_bookings(where=lambda b: b.event_id == event_id))

    if orphaned:
        logger.warning("event_deleted_with_bookings", event_id=event_id, bookings=orphaned)
    logger.info("event_deleted", event_id=event_id, admin_id=user.id)
    return event
