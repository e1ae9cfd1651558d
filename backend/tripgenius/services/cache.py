# backend/tripgenius/services/cache.py

import threading
import time
from typing import Any, Dict, Optional, Tuple


class MemoryCache:
    """Thread-safe key/value cache with a fixed TTL per entry."""

    def __init__(self, ttl_seconds: float) -> None:
        self.ttl_seconds = ttl_seconds
        self._store: Dict[str, Tuple[Any, float]] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        now = time.monotonic()
        with self._lock:
            hit = self._store.get(key)
            if not hit:
                return None
            value, expires_at = hit
            if now >= expires_at:
                self._store.pop(key, None)
                return None
            return value

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._store[key] = (value, time.monotonic() + self.ttl_seconds)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()
