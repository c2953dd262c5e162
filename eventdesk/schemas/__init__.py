from eventdesk.schemas.user import UserResponse
from eventdesk.schemas.event import EventCreate, EventUpdate, EventResponse
from eventdesk.schemas.booking import BookingResponse
from eventdesk.schemas.result import OperationResult

__all__ = [
    "UserResponse",
    "EventCreate", "EventUpdate", "EventResponse",
    "BookingResponse",
    "OperationResult",
]
