# backend/tripgenius/db/store.py

import threading
from typing import Optional

from tripgenius.core.config_loader import settings
from tripgenius.core.logger import get_logger
from tripgenius.core.security import get_password_hash
from tripgenius.db.base import DuplicateEmailError, TripStore
from tripgenius.db.memory_store import MemoryStore
from tripgenius.db.sqlite_store import SQLiteStore

log = get_logger("store")

DEMO_USER_ID = "demo-user-1"
DEMO_EMAIL = "demo@tripgenius.com"
DEMO_PASSWORD = "Demo@123"

_store: Optional[TripStore] = None
_store_lock = threading.Lock()


def build_store(backend: str) -> TripStore:
    if backend == "sqlite":
        log.info(f"Using SQLite store at {settings.DB_PATH}")
        return SQLiteStore(settings.DB_PATH)
    if backend != "memory":
        raise ValueError(f"Unknown storage backend: {backend!r}")
    log.info("Using in-memory store (data is lost on restart)")
    return MemoryStore()


def seed_demo_user(store: TripStore) -> None:
    if store.get_user_by_email(DEMO_EMAIL):
        return
    try:
        store.create_user(
            email=DEMO_EMAIL,
            name="Demo User",
            password_hash=get_password_hash(DEMO_PASSWORD),
            email_verified=True,
            user_id=DEMO_USER_ID,
        )
        log.info(f"Demo user seeded: {DEMO_EMAIL}")
    except DuplicateEmailError:
        pass


def get_store() -> TripStore:
    """Process-wide store, created (and seeded) on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = build_store(settings.storage_backend)
            if settings.seed_demo_user:
                seed_demo_user(_store)
        return _store


def reset_store(store: Optional[TripStore] = None) -> None:
    """Swap the process-wide store; None means rebuild lazily from settings."""
    global _store
    with _store_lock:
        _store = store
