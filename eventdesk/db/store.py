"""
In-memory state store for events, users and bookings.

One store instance is owned by one BookingSystem and handed to the services
explicitly; nothing here is module-global, so every test can build its own.

ID allocation:
  Event and booking IDs come from counters that only move forward. Deleting
  an event never frees its ID for reuse. Users keep the fixed IDs they were
  seeded with.

Locking:
  The console drives the store from a single thread. Services still wrap
  each check-then-mutate sequence in transaction() so the lookup and the
  write happen as one critical section.
"""

import threading
from contextlib import contextmanager
from datetime import datetime
from itertools import count
from typing import Callable, Iterator, Optional

from eventdesk.models.booking import Booking, BookingStatus
from eventdesk.models.event import Event
from eventdesk.models.user import User


class InMemoryStore:
    def __init__(self) -> None:
        self._events: dict[int, Event] = {}
        self._users: dict[int, User] = {}
        self._bookings: dict[int, Booking] = {}
        self._event_ids = count(1)
        self._booking_ids = count(1)
        self._lock = threading.RLock()

    @contextmanager
    def transaction(self) -> Iterator["InMemoryStore"]:
        with self._lock:
            yield self

    # Events

    def add_event(self, title: str, date: datetime, location: str) -> Event:
        with self._lock:
            event = Event(id=next(self._event_ids), title=title, date=date, location=location)
            self._events[event.id] = event
            return event

    def get_event(self, event_id: int) -> Optional[Event]:
        return self._events.get(event_id)

    def list_events(self, order_by: Optional[Callable[[Event], object]] = None) -> list[Event]:
        events = list(self._events.values())
        if order_by is not None:
            # sorted() is stable, so equal keys keep insertion (ID) order
            events = sorted(events, key=order_by)
        return events

    def update_event(
        self,
        event_id: int,
        title: Optional[str] = None,
        date: Optional[datetime] = None,
        location: Optional[str] = None,
    ) -> Optional[Event]:
        """Apply the given fields in place. None leaves a field untouched."""
        with self._lock:
            event = self._events.get(event_id)
            if event is None:
                return None
            if title is not None:
                event.title = title
            if date is not None:
                event.date = date
            if location is not None:
                event.location = location
            return event

    def remove_event(self, event_id: int) -> Optional[Event]:
        with self._lock:
            return self._events.pop(event_id, None)

    # Users

    def add_user(self, user: User) -> User:
        with self._lock:
            if user.id in self._users:
                raise ValueError(f"User {user.id} already exists")
            self._users[user.id] = user
            return user

    def get_user(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    def list_users(self) -> list[User]:
        return sorted(self._users.values(), key=lambda u: u.id)

    # Bookings

    def add_booking(self, user_id: int, event_id: int) -> Booking:
        with self._lock:
            booking = Booking(id=next(self._booking_ids), user_id=user_id, event_id=event_id)
            self._bookings[booking.id] = booking
            return booking

    def get_booking(self, booking_id: int) -> Optional[Booking]:
        return self._bookings.get(booking_id)

    def list_bookings(self, where: Optional[Callable[[Booking], bool]] = None) -> list[Booking]:
        bookings = sorted(self._bookings.values(), key=lambda b: b.id)
        if where is not None:
            bookings = [b for b in bookings if where(b)]
        return bookings

    def set_booking_status(self, booking_id: int, status: BookingStatus) -> Optional[Booking]:
        with self._lock:
            booking = self._bookings.get(booking_id)
            if booking is None:
                return None
            if status is BookingStatus.CANCELLED:
                booking.cancel()
            elif booking.status is not status:
                raise ValueError(f"Booking {booking_id} cannot move back to {status.value}")
            return booking
