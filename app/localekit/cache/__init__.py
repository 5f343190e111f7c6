"""Translation cache stores.

Usage:

    from localekit.cache import MemoryCacheStore

    store = MemoryCacheStore()
    store.set("en-US/hello", Translation(key="hello", locale="en-US", value="Hello"))
    store.get("en-US/hello").value  # "Hello"
"""

from localekit.cache.memory import MemoryCacheStore
from localekit.cache.redis_store import RedisCacheStore
from localekit.cache.store import CacheStore
from localekit.errors import CacheKeyNotFoundError, CacheStoreError

__all__ = [
    "CacheStore",
    "MemoryCacheStore",
    "RedisCacheStore",
    "CacheKeyNotFoundError",
    "CacheStoreError",
]
