"""Tests for localekit.cache.redis_store module."""

from unittest.mock import MagicMock, patch

import pytest
from redis import ConnectionError as RedisConnectionError

from localekit.cache import CacheKeyNotFoundError, CacheStoreError, RedisCacheStore
from localekit.cache.redis_store import create_redis_client
from localekit.configuration import RedisSettings

pytestmark = pytest.mark.unit


@pytest.fixture
def store(mock_redis_client):
    return RedisCacheStore(client=mock_redis_client, key_prefix="test:")


class TestCreateRedisClient:
    """Tests for create_redis_client()."""

    @patch("localekit.cache.redis_store.Redis")
    @patch("localekit.cache.redis_store.ConnectionPool")
    def test_pool_uses_settings(self, mock_pool, mock_redis):
        settings = RedisSettings(
            REDIS_HOST="cache.internal", REDIS_PORT=6380, REDIS_DB=2, REDIS_SOCKET_TIMEOUT=3
        )

        client = create_redis_client(settings)

        kwargs = mock_pool.call_args.kwargs
        assert kwargs["host"] == "cache.internal"
        assert kwargs["port"] == 6380
        assert kwargs["db"] == 2
        assert kwargs["socket_timeout"] == 3
        assert kwargs["decode_responses"] is True
        mock_redis.assert_called_once_with(connection_pool=mock_pool.return_value)
        assert client is mock_redis.return_value


class TestRedisCacheStore:
    """Tests for RedisCacheStore."""

    def test_set_writes_prefixed_json(self, store, mock_redis_client, make_translation):
        store.set("en-US/greeting.hello", make_translation())

        mock_redis_client.set.assert_called_once_with(
            "test:en-US/greeting.hello",
            '{"key": "greeting.hello", "locale": "en-US", "value": "Hello"}',
        )

    def test_get_decodes_json(self, store, mock_redis_client, make_translation):
        mock_redis_client.get.return_value = make_translation().to_json()

        cached = store.get("en-US/greeting.hello")

        mock_redis_client.get.assert_called_once_with("test:en-US/greeting.hello")
        assert cached == make_translation()

    def test_get_missing_raises_not_found(self, store):
        with pytest.raises(CacheKeyNotFoundError):
            store.get("en-US/missing")

    def test_get_empty_value(self, store, mock_redis_client, make_translation):
        mock_redis_client.get.return_value = make_translation(value="").to_json()
        assert store.get("en-US/greeting.hello").value == ""

    def test_get_corrupt_entry(self, store, mock_redis_client):
        mock_redis_client.get.return_value = "not json"

        with pytest.raises(CacheStoreError) as exc_info:
            store.get("en-US/greeting.hello")
        assert not isinstance(exc_info.value, CacheKeyNotFoundError)

    @pytest.mark.parametrize("method", ["set", "get", "delete"])
    def test_redis_errors_are_wrapped(self, store, mock_redis_client, make_translation, method):
        getattr(mock_redis_client, method).side_effect = RedisConnectionError("down")
        args = ["en-US/greeting.hello"]
        if method == "set":
            args.append(make_translation())

        with pytest.raises(CacheStoreError):
            getattr(store, method)(*args)

    def test_delete(self, store, mock_redis_client):
        store.delete("en-US/greeting.hello")
        mock_redis_client.delete.assert_called_once_with("test:en-US/greeting.hello")

    def test_keys_strip_prefix(self, store, mock_redis_client):
        mock_redis_client.scan_iter.return_value = iter(["test:en-US/a", "test:fr-FR/b"])

        assert store.keys() == ["en-US/a", "fr-FR/b"]
        mock_redis_client.scan_iter.assert_called_once_with(match="test:*")

    def test_clear_deletes_prefixed_keys(self, store, mock_redis_client):
        mock_redis_client.scan_iter.return_value = iter(["test:en-US/a", "test:fr-FR/b"])

        store.clear()

        mock_redis_client.delete.assert_called_once_with("test:en-US/a", "test:fr-FR/b")

    def test_clear_empty(self, store, mock_redis_client):
        store.clear()
        mock_redis_client.delete.assert_not_called()

    def test_keys_error(self, store, mock_redis_client):
        mock_redis_client.scan_iter.side_effect = RedisConnectionError("down")
        with pytest.raises(CacheStoreError):
            store.keys()

    @patch("localekit.cache.redis_store.create_redis_client")
    def test_client_created_from_settings(self, mock_create):
        mock_create.return_value = MagicMock()
        settings = RedisSettings()

        store = RedisCacheStore(settings=settings)

        mock_create.assert_called_once_with(settings)
        assert store.key_prefix == "i18n:"
