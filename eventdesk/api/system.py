"""
Operation boundary between the presentation layer and the services.

Every method takes raw input (IDs may be typed-in text) and returns an
OperationResult. Service errors are caught here and nowhere else; anything
that is not an EventDeskError still propagates.
"""

from typing import Callable, Optional, TypeVar, Union

from eventdesk.core.access import Gate, require_access
from eventdesk.core.exceptions import EventDeskError, ValidationError
from eventdesk.core.logging import get_logger
from eventdesk.core.metrics import record_operation
from eventdesk.db.store import InMemoryStore
from eventdesk.models.booking import Booking
from eventdesk.models.user import User
from eventdesk.schemas.booking import BookingResponse
from eventdesk.schemas.event import EventResponse
from eventdesk.schemas.result import OperationResult
from eventdesk.schemas.user import UserResponse
from eventdesk.services import auth_service, booking_service, event_service

logger = get_logger(__name__)

T = TypeVar("T")
IdInput = Union[int, str]


def parse_id(value: IdInput, label: str = "ID") -> int:
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid {label}: {value!r}") from None


class BookingSystem:
    def __init__(self, store: InMemoryStore):
        self.store = store

    def _execute(self, operation: str, action: Callable[[], T], detail: str = "") -> OperationResult[T]:
        try:
            data = action()
        except EventDeskError as exc:
            logger.info("operation_failed", operation=operation, status=exc.code, detail=exc.detail)
            record_operation(operation, exc.code)
            return OperationResult.failure(exc)

        record_operation(operation, "ok")
        return OperationResult.success(data, detail)

    def _user(self, user_id: IdInput) -> User:
        return auth_service.login(self.store, parse_id(user_id, "user ID"))

    def _gated_user(self, user_id: IdInput, gate: Gate) -> User:
        # The gate is checked before any other input is parsed
        user = self._user(user_id)
        require_access(user, gate)
        return user

    def _booking_view(self, booking: Booking) -> BookingResponse:
        user = self.store.get_user(booking.user_id)
        event = self.store.get_event(booking.event_id)
        return BookingResponse.model_validate(booking).model_copy(
            update={
                "user_name": user.name if user else None,
                "event_title": event.title if event else None,
            }
        )

    # Session

    def list_users(self) -> OperationResult[list[UserResponse]]:
        return self._execute(
            "list_users",
            lambda: [UserResponse.model_validate(u) for u in auth_service.list_users(self.store)],
        )

    def login(self, user_id: IdInput) -> OperationResult[UserResponse]:
        def action():
            return UserResponse.model_validate(self._user(user_id))

        return self._execute("login", action)

    def authorize(self, user_id: IdInput, gate: Gate) -> OperationResult[UserResponse]:
        """Check a gate up front so the console can refuse before prompting."""

        def action():
            return UserResponse.model_validate(self._gated_user(user_id, gate))

        return self._execute("authorize", action)

    # Catalog

    def list_events(self) -> OperationResult[list[EventResponse]]:
        return self._execute(
            "list_events",
            lambda: [EventResponse.model_validate(e) for e in event_service.list_events(self.store)],
        )

    def get_event(self, event_id: IdInput) -> OperationResult[EventResponse]:
        def action():
            event = event_service.get_event(self.store, parse_id(event_id, "event ID"))
            return EventResponse.model_validate(event)

        return self._execute("get_event", action)

    def add_event(
        self,
        user_id: IdInput,
        title: Optional[str],
        date: Optional[str],
        location: Optional[str],
    ) -> OperationResult[EventResponse]:
        def action():
            event = event_service.add_event(self.store, self._user(user_id), title, date, location)
            return EventResponse.model_validate(event)

        return self._execute("add_event", action, "Event added")

    def edit_event(
        self,
        user_id: IdInput,
        event_id: IdInput,
        title: Optional[str] = None,
        date: Optional[str] = None,
        location: Optional[str] = None,
    ) -> OperationResult[EventResponse]:
        def action():
            user = self._gated_user(user_id, Gate.ADMIN)
            event = event_service.edit_event(
                self.store, user, parse_id(event_id, "event ID"), title, date, location
            )
            return EventResponse.model_validate(event)

        return self._execute("edit_event", action, "Event updated")

    def delete_event(self, user_id: IdInput, event_id: IdInput) -> OperationResult[EventResponse]:
        def action():
            user = self._gated_user(user_id, Gate.ADMIN)
            event = event_service.delete_event(self.store, user, parse_id(event_id, "event ID"))
            return EventResponse.model_validate(event)

        return self._execute("delete_event", action, "Event deleted")

    # Bookings

    def create_booking(self, user_id: IdInput, event_id: IdInput) -> OperationResult[BookingResponse]:
        def action():
            user = self._gated_user(user_id, Gate.MEMBER)
            booking = booking_service.create_booking(self.store, user, parse_id(event_id, "event ID"))
            return self._booking_view(booking)

        return self._execute("create_booking", action, "Booking created")

    def cancel_booking(self, user_id: IdInput, booking_id: IdInput) -> OperationResult[BookingResponse]:
        def action():
            user = self._gated_user(user_id, Gate.MEMBER)
            booking = booking_service.cancel_booking(self.store, user, parse_id(booking_id, "booking ID"))
            return self._booking_view(booking)

        return self._execute("cancel_booking", action, "Booking cancelled")

    def list_user_bookings(
        self, user_id: IdInput, active_only: bool = False
    ) -> OperationResult[list[BookingResponse]]:
        def action():
            bookings = booking_service.list_user_bookings(self.store, self._user(user_id), active_only)
            return [self._booking_view(b) for b in bookings]

        return self._execute("list_user_bookings", action)

    def list_all_bookings(self, user_id: IdInput) -> OperationResult[list[BookingResponse]]:
        def action():
            bookings = booking_service.list_all_bookings(self.store, self._user(user_id))
            return [self._booking_view(b) for b in bookings]

        return self._execute("list_all_bookings", action)
