"""
Seed data loaded at startup: one user per role and a small event catalog.
"""

from datetime import datetime, timedelta
from typing import Optional

from eventdesk.core.config import get_settings
from eventdesk.core.logging import get_logger
from eventdesk.db.store import InMemoryStore
from eventdesk.models.user import Role, User

logger = get_logger(__name__)

SEED_USERS = (
    User(id=1, name="Guest", role=Role.GUEST),
    User(id=2, name="Ivan", role=Role.USER),
    User(id=3, name="Admin", role=Role.ADMIN),
)

SEED_EVENTS = (
    ("FinTech Conference", "Astana IT University"),
    ("Symphony Orchestra Concert", "City Theatre"),
    ("AI Hackathon", "Tech Hub"),
)


def seed_store(store: InMemoryStore, now: Optional[datetime] = None) -> InMemoryStore:
    """Populate an empty store. Event dates are offset from `now`."""
    settings = get_settings()
    now = now or datetime.now()

    for (title, location), days in zip(SEED_EVENTS, settings.SEED_EVENT_OFFSETS_DAYS, strict=True):
        store.add_event(title=title, date=now + timedelta(days=days), location=location)

    for user in SEED_USERS:
        store.add_user(user)

    logger.info("store_seeded", events=len(store.list_events()), users=len(store.list_users()))
    return store
