"""
Pydantic schemas for booking responses.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel

from eventdesk.models.booking import BookingStatus


class BookingResponse(BaseModel):
    id: int
    user_id: int
    event_id: int
    status: BookingStatus
    created_at: datetime
    cancelled_at: Optional[datetime] = None

    # Resolved through the store; event_title is None once the event is deleted
    user_name: Optional[str] = None
    event_title: Optional[str] = None

    model_config = {"from_attributes": True}
