"""
Booking service: the booking lifecycle for non-guest users.

Lifecycle:
  create_booking appends an Active booking. cancel_booking moves one of the
  caller's own Active bookings to Cancelled. Nothing moves a booking back,
  and bookings are never removed.

Visibility:
  cancel_booking only sees the caller's Active bookings. Someone else's
  booking and an already-cancelled one both surface as NotFound, so a
  second cancel of the same booking cannot flip its status again.

Duplicates:
  There is no (user, event) uniqueness check. Booking the same event twice
  yields two bookings.
"""

from eventdesk.core.access import Gate, require_access
from eventdesk.core.exceptions import NotFound
from eventdesk.core.logging import get_logger
from eventdesk.db.store import InMemoryStore
from eventdesk.models.booking import Booking, BookingStatus
from eventdesk.models.user import User

logger = get_logger(__name__)


def create_booking(store: InMemoryStore, user: User, event_id: int) -> Booking:
    require_access(user, Gate.MEMBER)

    with store.transaction():
        if store.get_event(event_id) is None:
            logger.warning("booking_failed_no_event", user_id=user.id, event_id=event_id)
            raise NotFound(f"Event {event_id} not found")
        booking = store.add_booking(user_id=user.id, event_id=event_id)

    logger.info("booking_created", booking_id=booking.id, user_id=user.id, event_id=event_id)
    return booking


def cancel_booking(store: InMemoryStore, user: User, booking_id: int) -> Booking:
    require_access(user, Gate.MEMBER)

    with store.transaction():
        candidates = {b.id: b for b in list_user_bookings(store, user, active_only=True)}
        if booking_id not in candidates:
            logger.warning("booking_cancel_failed", user_id=user.id, booking_id=booking_id)
            raise NotFound(f"Booking {booking_id} not found")
        booking = store.set_booking_status(booking_id, BookingStatus.CANCELLED)

    logger.info(
        "booking_cancelled",
        booking_id=booking.id,
        user_id=user.id,
        event_id=booking.event_id,
    )
    return booking


def list_user_bookings(store: InMemoryStore, user: User, active_only: bool = False) -> list[Booking]:
    """Bookings owned by `user`, oldest first."""
    return store.list_bookings(
        where=lambda b: b.user_id == user.id and (b.is_active or not active_only)
    )


def list_all_bookings(store: InMemoryStore, user: User) -> list[Booking]:
    """Every booking in the store, oldest first. Admin only."""
    require_access(user, Gate.ADMIN)
    return store.list_bookings()
