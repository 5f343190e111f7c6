"""Shared fixtures for localekit tests."""

import pytest

from localekit.backends import MemoryBackend
from localekit.cache import MemoryCacheStore
from localekit.models import Translation


@pytest.fixture
def make_translation():
    """Factory for Translation records."""

    def _make(key="greeting.hello", locale="en-US", value="Hello", backend=None):
        return Translation(key=key, locale=locale, value=value, backend=backend)

    return _make


@pytest.fixture
def memory_cache_store():
    """Fresh in-memory cache store."""
    return MemoryCacheStore()


@pytest.fixture
def primary_backend():
    """Highest priority backend with English and French greetings."""
    return MemoryBackend(
        [
            Translation(key="greeting.hello", locale="en-US", value="Hello"),
            Translation(key="greeting.hello", locale="fr-FR", value="Bonjour"),
            Translation(key="greeting.named", locale="en-US", value="Hello {{name}}"),
        ]
    )


@pytest.fixture
def secondary_backend():
    """Lower priority backend that overlaps the primary backend."""
    return MemoryBackend(
        [
            Translation(key="greeting.hello", locale="en-US", value="Hi there"),
            Translation(key="greeting.bye", locale="en-US", value="Goodbye"),
            Translation(key="greeting.bye", locale="de-DE", value="Auf Wiedersehen"),
        ]
    )
