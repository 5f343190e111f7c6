"""Tests for localekit.models.translation module."""

import json

import pytest

from localekit.backends import MemoryBackend
from localekit.models import Translation, cache_key

pytestmark = pytest.mark.unit


class TestCacheKey:
    """Tests for the composite cache key."""

    def test_cache_key_format(self):
        assert cache_key("en-US", "greeting.hello") == "en-US/greeting.hello"

    def test_translation_cache_key(self, make_translation):
        assert make_translation(locale="fr-FR").cache_key == "fr-FR/greeting.hello"


class TestTranslation:
    """Tests for the Translation record."""

    def test_defaults(self):
        translation = Translation(key="k", locale="en-US")
        assert translation.value == ""
        assert translation.backend is None
        assert not translation.is_translated

    def test_is_translated(self, make_translation):
        assert make_translation().is_translated

    def test_equality_ignores_backend(self, make_translation):
        assert make_translation(backend=MemoryBackend()) == make_translation()

    def test_to_dict_excludes_backend(self, make_translation):
        data = make_translation(backend=MemoryBackend()).to_dict()
        assert data == {"key": "greeting.hello", "locale": "en-US", "value": "Hello"}

    def test_from_dict(self):
        translation = Translation.from_dict({"key": "k", "locale": "en-US", "value": "v"})
        assert translation == Translation(key="k", locale="en-US", value="v")

    @pytest.mark.parametrize("data", [{"key": "k", "locale": "en-US"}, {"key": "k", "locale": "en-US", "value": None}])
    def test_from_dict_missing_value(self, data):
        assert Translation.from_dict(data).value == ""

    def test_from_dict_requires_key_and_locale(self):
        with pytest.raises(KeyError):
            Translation.from_dict({"key": "k"})

    def test_json_keeps_unicode(self, make_translation):
        raw = make_translation(value="Déjà vu").to_json()
        assert "Déjà vu" in raw
        assert json.loads(raw)["value"] == "Déjà vu"

    def test_from_json(self):
        raw = '{"key": "k", "locale": "fr-FR", "value": "Salut"}'
        assert Translation.from_json(raw) == Translation(key="k", locale="fr-FR", value="Salut")

    def test_repr_hides_backend(self, make_translation):
        assert "backend" not in repr(make_translation(backend=MemoryBackend()))
