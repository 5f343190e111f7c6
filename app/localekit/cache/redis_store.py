"""Redis-backed cache store.

Lets several processes share one translation cache. Unlike the in-memory
store, every operation may fail with an I/O error; those failures surface
as CacheStoreError so the engine can treat them as cache misses.
"""

import json
from typing import List, Optional

from redis import ConnectionPool, Redis, RedisError  # type: ignore

from localekit.cache.store import CacheStore
from localekit.configuration import RedisSettings
from localekit.errors import CacheKeyNotFoundError, CacheStoreError
from localekit.logging import get_module_logger
from localekit.models import Translation

logger = get_module_logger()


def create_redis_client(settings: RedisSettings) -> Redis:
    """Create a Redis client with connection pooling.

    Args:
        settings: Redis connection settings.

    Returns:
        Redis: Client returning decoded strings.
    """
    pool = ConnectionPool(
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
        decode_responses=True,
        max_connections=10,
        socket_timeout=settings.REDIS_SOCKET_TIMEOUT,
        socket_connect_timeout=settings.REDIS_SOCKET_TIMEOUT,
        retry_on_timeout=True,
        health_check_interval=30,
    )
    logger.info(
        "redis_connection_pool_created",
        host=settings.REDIS_HOST,
        port=settings.REDIS_PORT,
        db=settings.REDIS_DB,
    )
    return Redis(connection_pool=pool)


class RedisCacheStore(CacheStore):
    """Cache store keeping JSON snapshots in Redis.

    Attributes:
        key_prefix: Prefix added to every cache key, so the translation
            cache can share a Redis database with other data.
    """

    def __init__(
        self,
        client: Optional[Redis] = None,
        key_prefix: str = "i18n:",
        settings: Optional[RedisSettings] = None,
    ):
        """Initialize the store.

        Args:
            client: Pre-configured Redis client. Created from settings when
                omitted.
            key_prefix: Prefix for every stored key.
            settings: Connection settings used when no client is given.
        """
        if client is None:
            client = create_redis_client(settings or RedisSettings())
        self._client = client
        self.key_prefix = key_prefix

    def _full_key(self, key: str) -> str:
        return f"{self.key_prefix}{key}"

    def set(self, key: str, translation: Translation) -> None:
        try:
            self._client.set(self._full_key(key), translation.to_json())
        except RedisError as e:
            logger.error("redis_cache_set_error", key=key, error=str(e))
            raise CacheStoreError(f"Error setting key {key}: {e}") from e

    def get(self, key: str) -> Translation:
        try:
            raw = self._client.get(self._full_key(key))
        except RedisError as e:
            logger.error("redis_cache_get_error", key=key, error=str(e))
            raise CacheStoreError(f"Error getting key {key}: {e}") from e

        if raw is None:
            raise CacheKeyNotFoundError(key)

        try:
            return Translation.from_json(raw)
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.error("redis_cache_corrupt_entry", key=key, error=str(e))
            raise CacheStoreError(f"Corrupt cache entry for key {key}") from e

    def delete(self, key: str) -> None:
        try:
            self._client.delete(self._full_key(key))
        except RedisError as e:
            logger.error("redis_cache_delete_error", key=key, error=str(e))
            raise CacheStoreError(f"Error deleting key {key}: {e}") from e

    def keys(self) -> List[str]:
        try:
            full_keys = list(self._client.scan_iter(match=f"{self.key_prefix}*"))
        except RedisError as e:
            raise CacheStoreError(f"Error listing keys: {e}") from e
        return [full_key[len(self.key_prefix):] for full_key in full_keys]

    def clear(self) -> None:
        logger.warning("redis_cache_clear_called", key_prefix=self.key_prefix)
        try:
            full_keys = list(self._client.scan_iter(match=f"{self.key_prefix}*"))
            if full_keys:
                self._client.delete(*full_keys)
        except RedisError as e:
            raise CacheStoreError(f"Error clearing cache: {e}") from e
