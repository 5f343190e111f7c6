"""In-memory cache store, the engine's default."""

import threading
from typing import Dict, List

from localekit.cache.store import CacheStore
from localekit.errors import CacheKeyNotFoundError
from localekit.models import Translation


class MemoryCacheStore(CacheStore):
    """Process-local cache store.

    Entries are kept as JSON snapshots so callers never share mutable
    Translation instances with the store. A lock guards every access.
    """

    def __init__(self) -> None:
        self._store: Dict[str, str] = {}
        self._lock = threading.Lock()

    def set(self, key: str, translation: Translation) -> None:
        snapshot = translation.to_json()
        with self._lock:
            self._store[key] = snapshot

    def get(self, key: str) -> Translation:
        with self._lock:
            snapshot = self._store.get(key)
        if snapshot is None:
            raise CacheKeyNotFoundError(key)
        return Translation.from_json(snapshot)

    def delete(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def keys(self) -> List[str]:
        with self._lock:
            return list(self._store.keys())

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)
