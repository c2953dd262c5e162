"""
Event Desk - application assembly.

Builds a fresh store (seeded unless configured otherwise) and the
BookingSystem that fronts it.
"""

from typing import Optional

from eventdesk.api.system import BookingSystem
from eventdesk.core.config import get_settings
from eventdesk.core.logging import get_logger
from eventdesk.db.seed import seed_store
from eventdesk.db.store import InMemoryStore


def create_system(seed: Optional[bool] = None) -> BookingSystem:
    settings = get_settings()
    logger = get_logger(__name__)

    if seed is None:
        seed = settings.SEED_DATA

    store = InMemoryStore()
    if seed:
        seed_store(store)

    logger.info(
        "application_starting",
        app=settings.APP_NAME,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )
    return BookingSystem(store)
