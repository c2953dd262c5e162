"""
Event model for the in-memory catalog.

Dates are naive local datetimes, matching how they are typed in at the console.
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Event:
    id: int
    title: str
    date: datetime
    location: str

    def __repr__(self) -> str:
        return f"<Event(id={self.id}, title={self.title}, date={self.date.isoformat()})>"
