"""In-memory translation backend."""

import threading
from typing import Dict, Iterable, List, Optional, Tuple

from localekit.backends.base import Backend
from localekit.models import Translation
from localekit.operations import OperationResult


class MemoryBackend(Backend):
    """Process-local backend keyed by (locale, key).

    Suitable for tests, development, and as a read-only seed of bundled
    defaults placed behind a persistent backend.

    Attributes:
        read_only: When True every save and delete is rejected.
    """

    def __init__(
        self,
        translations: Optional[Iterable[Translation]] = None,
        read_only: bool = False,
    ) -> None:
        self._records: Dict[Tuple[str, str], Translation] = {}
        self._lock = threading.Lock()
        self.read_only = read_only
        for translation in translations or []:
            self._records[(translation.locale, translation.key)] = self._copy(
                translation
            )

    def _copy(self, translation: Translation) -> Translation:
        return Translation(
            key=translation.key,
            locale=translation.locale,
            value=translation.value,
            backend=self,
        )

    def load_translations(self) -> List[Translation]:
        with self._lock:
            return [self._copy(record) for record in self._records.values()]

    def save_translation(self, translation: Translation) -> OperationResult:
        if self.read_only:
            return OperationResult.permanent_error(
                "Backend is read-only", error_code="READ_ONLY"
            )
        with self._lock:
            self._records[(translation.locale, translation.key)] = self._copy(
                translation
            )
        return OperationResult.success(message="Translation saved")

    def delete_translation(self, translation: Translation) -> OperationResult:
        if self.read_only:
            return OperationResult.permanent_error(
                "Backend is read-only", error_code="READ_ONLY"
            )
        with self._lock:
            removed = self._records.pop((translation.locale, translation.key), None)
        if removed is None:
            return OperationResult.not_found(
                f"Translation not found: {translation.cache_key}"
            )
        return OperationResult.success(message="Translation deleted")

    def get(self, locale: str, key: str) -> Optional[Translation]:
        """Return the stored record for (locale, key), if any."""
        with self._lock:
            record = self._records.get((locale, key))
        return self._copy(record) if record else None

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)
