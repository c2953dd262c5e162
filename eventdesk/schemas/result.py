"""
Discriminated result returned by every BookingSystem operation.
"""

from typing import Generic, Literal, Optional, TypeVar
from pydantic import BaseModel

from eventdesk.core.exceptions import EventDeskError

T = TypeVar("T")

ResultStatus = Literal["ok", "forbidden", "not_found", "validation_error"]


class OperationResult(BaseModel, Generic[T]):
    status: ResultStatus = "ok"
    detail: str = ""
    data: Optional[T] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"

    @classmethod
    def success(cls, data: Optional[T] = None, detail: str = "") -> "OperationResult[T]":
        return cls(status="ok", detail=detail, data=data)

    @classmethod
    def failure(cls, error: EventDeskError) -> "OperationResult[T]":
        return cls(status=error.code, detail=error.detail)
