"""
Role gates for booking and catalog operations.

Two gates exist and neither implies the other:
- MEMBER admits every role except Guest (booking, cancelling)
- ADMIN admits Admin only (catalog management, all-bookings view)
"""

from enum import Enum

from eventdesk.core.exceptions import Forbidden
from eventdesk.core.logging import get_logger
from eventdesk.core.metrics import record_access_denied
from eventdesk.models.user import Role, User

logger = get_logger(__name__)


class Gate(str, Enum):
    MEMBER = "member"
    ADMIN = "admin"


_ALLOWED_ROLES = {
    Gate.MEMBER: frozenset({Role.USER, Role.ADMIN}),
    Gate.ADMIN: frozenset({Role.ADMIN}),
}

_DENIED_DETAIL = {
    Gate.MEMBER: "Guests cannot book or cancel events. Please register.",
    Gate.ADMIN: "Access denied: administrator role required.",
}


def check_access(user: User, gate: Gate) -> bool:
    """Return whether `user` passes `gate`, recording the denial if not."""
    if user.role in _ALLOWED_ROLES[gate]:
        return True

    logger.warning("access_denied", user_id=user.id, role=user.role.value, gate=gate.value)
    record_access_denied(gate.value)
    return False


def require_access(user: User, gate: Gate) -> None:
    if not check_access(user, gate):
        raise Forbidden(_DENIED_DETAIL[gate])
