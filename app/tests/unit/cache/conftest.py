"""Fixtures for cache store tests."""

from unittest.mock import MagicMock

import pytest


@pytest.fixture
def mock_redis_client():
    """Redis client mock with an empty keyspace."""
    client = MagicMock()
    client.get.return_value = None
    client.scan_iter.return_value = iter([])
    return client
