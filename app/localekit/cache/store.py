"""Cache store abstract base class."""

from abc import ABC, abstractmethod
from typing import List

from localekit.models import Translation


class CacheStore(ABC):
    """Abstract base class for translation cache stores.

    A cache store maps composite keys ("<locale>/<key>") to serialized
    Translation snapshots. Implementations are responsible for their own
    thread safety; the engine performs no locking around cache calls.
    """

    @abstractmethod
    def set(self, key: str, translation: Translation) -> None:
        """Store a snapshot of the translation, overwriting any prior value.

        Raises:
            CacheStoreError: On I/O failure (out-of-process stores).
        """
        pass

    @abstractmethod
    def get(self, key: str) -> Translation:
        """Return a fresh copy of the stored translation.

        A stored translation with an empty value is returned normally.

        Raises:
            CacheKeyNotFoundError: If nothing is stored under key.
            CacheStoreError: On I/O failure (out-of-process stores).
        """
        pass

    @abstractmethod
    def delete(self, key: str) -> None:
        """Delete the entry for key. Deleting a missing key is not an error.

        Raises:
            CacheStoreError: On I/O failure (out-of-process stores).
        """
        pass

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys (diagnostics and testing)."""
        pass

    @abstractmethod
    def clear(self) -> None:
        """Remove every entry (testing only)."""
        pass
