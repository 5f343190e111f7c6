"""Concurrency tests for the I18n engine."""

from concurrent.futures import ThreadPoolExecutor

import pytest

from localekit.backends import MemoryBackend
from localekit.i18n import I18n
from localekit.models import Translation

pytestmark = pytest.mark.unit


class TestConcurrentTranslate:
    """Concurrent lookups must not corrupt the cache or the backends."""

    def test_concurrent_hits(self):
        """Parallel lookups of existing keys all resolve."""
        backend = MemoryBackend(
            [
                Translation(key=f"item.{i}", locale="en-US", value=f"Item {i}")
                for i in range(20)
            ]
        )
        engine = I18n(backend)

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(
                executor.map(lambda i: engine.t("en-US", f"item.{i % 20}"), range(200))
            )

        assert results == [f"Item {i % 20}" for i in range(200)]

    def test_concurrent_misses_leave_single_record(self):
        """Racing misses for one key upsert a single placeholder record."""
        backend = MemoryBackend()
        engine = I18n(backend)

        with ThreadPoolExecutor(max_workers=16) as executor:
            results = list(
                executor.map(lambda _: engine.t("fr-FR", "race.key"), range(100))
            )

        assert set(results) == {"race.key"}
        assert len(backend) == 1
        assert engine.cache_store.get("fr-FR/race.key").value == ""

    def test_concurrent_saves_and_reads(self):
        """Writers and readers interleave without raising."""
        backend = MemoryBackend([Translation(key="counter", locale="en-US", value="0")])
        engine = I18n(backend)

        def write(i):
            engine.save_translation(
                Translation(key="counter", locale="en-US", value=str(i))
            )
            return engine.t("en-US", "counter")

        with ThreadPoolExecutor(max_workers=8) as executor:
            results = list(executor.map(write, range(1, 101)))

        assert all(result.isdigit() for result in results)
        assert len(backend) == 1
