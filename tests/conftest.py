"""
Pytest fixtures: an isolated seeded store per test and the three seed users.

Seed event dates are pinned to a fixed `now`, so ordering is deterministic:
FinTech Conference (+7d), Symphony Orchestra Concert (+14d), AI Hackathon (+3d).
"""

import logging
from datetime import datetime

import pytest
import structlog

from eventdesk.api.system import BookingSystem
from eventdesk.db.seed import seed_store
from eventdesk.db.store import InMemoryStore
from eventdesk.models.user import User

SEED_NOW = datetime(2030, 6, 1, 12, 0)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by CLI runs so later tests never log to a closed stream."""
    yield
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root_logger.removeHandler(handler)


@pytest.fixture
def seed_now() -> datetime:
    return SEED_NOW


@pytest.fixture
def store() -> InMemoryStore:
    return seed_store(InMemoryStore(), now=SEED_NOW)


@pytest.fixture
def empty_store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def guest(store: InMemoryStore) -> User:
    return store.get_user(1)


@pytest.fixture
def ivan(store: InMemoryStore) -> User:
    return store.get_user(2)


@pytest.fixture
def admin(store: InMemoryStore) -> User:
    return store.get_user(3)


@pytest.fixture
def system(store: InMemoryStore) -> BookingSystem:
    return BookingSystem(store)
