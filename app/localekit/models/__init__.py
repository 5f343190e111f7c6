"""Data models shared across localekit."""

from localekit.models.translation import CACHE_KEY_SEPARATOR, Translation, cache_key

__all__ = ["Translation", "cache_key", "CACHE_KEY_SEPARATOR"]
