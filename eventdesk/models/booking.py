"""
Booking model representing a user's reservation for an event.

Key design decisions:
- user_id / event_id are stored identifiers, resolved through the store;
  an event may be deleted while bookings for it still exist
- Status field allows cancellation without deleting records
- No uniqueness on (user_id, event_id): the same user may book an event twice
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional


class BookingStatus(str, Enum):
    ACTIVE = "Active"
    CANCELLED = "Cancelled"


@dataclass
class Booking:
    id: int
    user_id: int
    event_id: int
    status: BookingStatus = BookingStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.now)
    cancelled_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        return self.status is BookingStatus.ACTIVE

    def cancel(self) -> None:
        # Active -> Cancelled is the only transition
        if not self.is_active:
            raise ValueError(f"Booking {self.id} is already cancelled")
        self.status = BookingStatus.CANCELLED
        self.cancelled_at = datetime.now()

    def __repr__(self) -> str:
        return f"<Booking(id={self.id}, user={self.user_id}, event={self.event_id}, status={self.status.value})>"
