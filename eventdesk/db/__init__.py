from eventdesk.db.store import InMemoryStore
from eventdesk.db.seed import seed_store

__all__ = ["InMemoryStore", "seed_store"]
