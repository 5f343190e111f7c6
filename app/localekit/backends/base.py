"""Translation backend interface."""

from abc import ABC, abstractmethod
from typing import List

from localekit.models import Translation
from localekit.operations import OperationResult


class Backend(ABC):
    """Abstract base for translation storage backends.

    Backends are the source of truth for translation records. An engine
    holds several of them in priority order (index 0 = highest). Backends
    are shared collaborators: more than one engine may read the same
    backend, so implementations must not assume exclusive ownership.

    Saves are expected to be upserts keyed by (locale, key); concurrent
    lookups may save the same placeholder record more than once.
    """

    @abstractmethod
    def load_translations(self) -> List[Translation]:
        """Return every translation currently held by this backend.

        May be expensive; the engine calls it at construction and when the
        cache store is replaced. Whatever is returned (including an empty
        list after an internal failure) is taken as this backend's content.
        """
        pass

    @abstractmethod
    def save_translation(self, translation: Translation) -> OperationResult:
        """Insert or update one translation.

        Returns:
            OperationResult: SUCCESS when persisted, an error status otherwise.
        """
        pass

    @abstractmethod
    def delete_translation(self, translation: Translation) -> OperationResult:
        """Delete one translation. Best effort.

        Returns:
            OperationResult: SUCCESS when deleted, NOT_FOUND when absent, an
            error status otherwise.
        """
        pass

    @property
    def name(self) -> str:
        """Backend name used in log events."""
        return type(self).__name__
