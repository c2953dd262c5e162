"""
Error taxonomy shared by services and the operation boundary.

Services raise these; BookingSystem converts them into OperationResult
values so no failure reaches the console loop.
"""


class EventDeskError(Exception):
    code = "error"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class Forbidden(EventDeskError):
    """The user's role does not pass the required gate."""

    code = "forbidden"


class NotFound(EventDeskError):
    """The referenced ID is absent or not visible to the caller."""

    code = "not_found"


class ValidationError(EventDeskError):
    """Unparseable date or malformed numeric ID."""

    code = "validation_error"
