"""
Session login. Selecting a seeded user ID is the whole authentication step.
"""

from eventdesk.core.exceptions import NotFound
from eventdesk.core.logging import get_logger
from eventdesk.db.store import InMemoryStore
from eventdesk.models.user import User

logger = get_logger(__name__)


def list_users(store: InMemoryStore) -> list[User]:
    return store.list_users()


def login(store: InMemoryStore, user_id: int) -> User:
    user = store.get_user(user_id)
    if user is None:
        logger.warning("login_failed", user_id=user_id)
        raise NotFound(f"User {user_id} not found")

    logger.info("user_logged_in", user_id=user.id, role=user.role.value)
    return user
