"""
Pydantic schemas for event-related input parsing and responses.

Dates arrive as console text. Accepted forms are dd.mm.yyyy hh:mm (with
optional seconds), a bare dd.mm.yyyy, and ISO 8601 without a UTC offset.
"""

from datetime import datetime
from typing import Any, Optional
from pydantic import BaseModel, ValidationInfo, field_validator

DEFAULT_TITLE = "Untitled"
DEFAULT_LOCATION = "Unspecified"

DATE_FORMATS = ("%d.%m.%Y %H:%M", "%d.%m.%Y %H:%M:%S", "%d.%m.%Y")


def parse_event_date(value: str) -> datetime:
    text = value.strip()
    for fmt in DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        raise ValueError(f"Invalid date {value!r}, expected dd.mm.yyyy hh:mm") from None
    return _require_naive(parsed)


def _require_naive(value: datetime) -> datetime:
    # Catalog dates are naive local times and must stay comparable
    if value.tzinfo is not None:
        raise ValueError(f"Date {value.isoformat()} carries a UTC offset, expected local time")
    return value


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class EventCreate(BaseModel):
    title: str = DEFAULT_TITLE
    date: datetime
    location: str = DEFAULT_LOCATION

    @field_validator("title", "location", mode="before")
    @classmethod
    def blank_to_placeholder(cls, value: Any, info: ValidationInfo) -> Any:
        if _is_blank(value):
            return DEFAULT_TITLE if info.field_name == "title" else DEFAULT_LOCATION
        return value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, value: Any) -> Any:
        if isinstance(value, str):
            return parse_event_date(value)
        return value

    @field_validator("date")
    @classmethod
    def date_is_naive(cls, value: datetime) -> datetime:
        return _require_naive(value)


class EventUpdate(BaseModel):
    """
    Partial update. A blank field means "keep the current value", and so
    does a date that cannot be parsed or that carries a UTC offset.
    """

    title: Optional[str] = None
    date: Optional[datetime] = None
    location: Optional[str] = None

    @field_validator("title", "location", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        return None if _is_blank(value) else value

    @field_validator("date", mode="before")
    @classmethod
    def parse_date_or_skip(cls, value: Any) -> Any:
        if _is_blank(value):
            return None
        if isinstance(value, str):
            try:
                return parse_event_date(value)
            except ValueError:
                return None
        return value

    @field_validator("date")
    @classmethod
    def drop_aware_date(cls, value: Optional[datetime]) -> Optional[datetime]:
        if value is not None and value.tzinfo is not None:
            return None
        return value


class EventResponse(BaseModel):
    id: int
    title: str
    date: datetime
    location: str

    model_config = {"from_attributes": True}
