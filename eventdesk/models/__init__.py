from eventdesk.models.user import Role, User
from eventdesk.models.event import Event
from eventdesk.models.booking import Booking, BookingStatus

__all__ = ["Role", "User", "Event", "Booking", "BookingStatus"]
