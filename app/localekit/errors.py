"""Exceptions raised by localekit components."""


class LocaleKitError(Exception):
    """Base class for localekit errors."""


class CacheStoreError(LocaleKitError):
    """Cache store I/O failure (out-of-process stores only)."""


class CacheKeyNotFoundError(CacheStoreError, KeyError):
    """No entry is stored under the requested cache key."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Cache key not found: {self.key}"


class FormatError(LocaleKitError, ValueError):
    """A template could not be rendered with the supplied arguments."""


class TranslationFileError(LocaleKitError, ValueError):
    """A translation file parsed but does not hold a mapping of messages."""
