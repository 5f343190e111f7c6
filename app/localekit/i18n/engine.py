"""Translation engine.

The I18n engine loads translations from an ordered chain of backends into a
cache store, resolves lookups through a locale fallback chain, synthesizes
placeholder records for missing keys, and keeps backends and cache in step
on writes and deletes.
"""

import copy
from typing import Any, Dict, List, Optional

from localekit.backends.base import Backend
from localekit.cache.memory import MemoryCacheStore
from localekit.cache.store import CacheStore
from localekit.errors import CacheKeyNotFoundError, CacheStoreError
from localekit.i18n.formatter import Formatter, InterpolationFormatter
from localekit.logging import get_module_logger
from localekit.models import Translation, cache_key
from localekit.operations import OperationResult

logger = get_module_logger()

DEFAULT_LOCALE = "en-US"


class I18n:
    """Translation resolution and caching engine.

    Backends are held in priority order: index 0 is the highest priority
    and wins whenever several backends define the same (locale, key). The
    engine owns its cache store reference; backends are shared.

    No locking is done here. The cache store is responsible for safe
    concurrent access, and backends are expected to upsert, so concurrent
    misses for the same key may both synthesize and save a placeholder.

    Attributes:
        backends: Backends in priority order.
        default_locale: Locale used for empty requests and as the last
            fallback of every lookup.
        fallback_locales: Mapping of locale -> ordered fallback locales.
        formatter: Renders resolved values with caller arguments.
    """

    resource_name = "Translation"

    def __init__(
        self,
        *backends: Backend,
        default_locale: str = DEFAULT_LOCALE,
        fallback_locales: Optional[Dict[str, List[str]]] = None,
        cache_store: Optional[CacheStore] = None,
        formatter: Optional[Formatter] = None,
        scope: str = "",
        value: str = "",
    ):
        """Initialize the engine and load every backend into the cache store.

        Args:
            *backends: Backends in priority order (first = highest).
            default_locale: Process-wide default locale.
            fallback_locales: Mapping of locale -> ordered fallback locales.
            cache_store: Cache store to populate. Defaults to a new
                MemoryCacheStore.
            formatter: Formatter for resolved values. Defaults to
                InterpolationFormatter.
            scope: Namespace prefix for synthesized keys.
            value: Value given to synthesized records.
        """
        self.backends: List[Backend] = list(backends)
        self.default_locale = default_locale
        self.fallback_locales: Dict[str, List[str]] = dict(fallback_locales or {})
        self.formatter = formatter or InterpolationFormatter()
        self._scope = scope
        self._value = value
        self._instance_fallbacks: List[str] = []
        self._cache_store: CacheStore = cache_store or MemoryCacheStore()
        self._load_to_cache_store()

    @property
    def cache_store(self) -> CacheStore:
        return self._cache_store

    def set_cache_store(self, cache_store: CacheStore) -> None:
        """Replace the cache store and reload every backend into it."""
        self._cache_store = cache_store
        self._load_to_cache_store()

    def _load_to_cache_store(self) -> None:
        # Lowest priority first, so higher priority backends overwrite
        loaded = 0
        failed = 0
        for backend in reversed(self.backends):
            for translation in backend.load_translations():
                try:
                    self.add_translation(translation)
                    loaded += 1
                except CacheStoreError as e:
                    failed += 1
                    logger.debug(
                        "cache_add_failed",
                        cache_key=translation.cache_key,
                        error=str(e),
                    )

        if failed:
            logger.error(
                "translations_cache_load_incomplete",
                loaded=loaded,
                failed=failed,
            )
        logger.info(
            "translations_loaded",
            backend_count=len(self.backends),
            translation_count=loaded,
        )

    def load_translations(self) -> Dict[str, Dict[str, Translation]]:
        """Build a locale -> key -> Translation snapshot from the backends.

        Uses the same precedence as the cache store: the highest priority
        backend's record wins per (locale, key). Independent of the cache.
        """
        translations: Dict[str, Dict[str, Translation]] = {}
        for backend in reversed(self.backends):
            for translation in backend.load_translations():
                translations.setdefault(translation.locale, {})[
                    translation.key
                ] = translation
        return translations

    def add_translation(self, translation: Translation) -> None:
        """Write one translation into the cache store.

        Raises:
            CacheStoreError: If the cache store fails.
        """
        self._cache_store.set(translation.cache_key, translation)

    def save_translation(self, translation: Translation) -> OperationResult:
        """Persist a translation to the first backend that accepts it.

        Backends are tried strictly in priority order. On the first success
        the translation is mirrored into the cache store. When every
        backend refuses, nothing is cached.

        Returns:
            OperationResult: SUCCESS with the translation as data, or a
            PERMANENT_ERROR with error_code "SAVE_FAILED".
        """
        for backend in self.backends:
            try:
                result = backend.save_translation(translation)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning(
                    "backend_save_error",
                    backend=backend.name,
                    cache_key=translation.cache_key,
                    error=str(e),
                    exc_info=True,
                )
                continue

            if result.is_success:
                try:
                    self.add_translation(translation)
                except CacheStoreError as e:
                    logger.warning(
                        "cache_mirror_failed",
                        cache_key=translation.cache_key,
                        error=str(e),
                    )
                return OperationResult.success(
                    data=translation,
                    message=f"Translation saved to {backend.name}",
                )

            logger.debug(
                "backend_save_rejected",
                backend=backend.name,
                cache_key=translation.cache_key,
                status=result.status.value,
                message=result.message,
            )

        logger.warning(
            "translation_save_failed",
            cache_key=translation.cache_key,
            backend_count=len(self.backends),
        )
        return OperationResult.permanent_error(
            "failed to save translation", error_code="SAVE_FAILED"
        )

    def delete_translation(self, translation: Translation) -> OperationResult:
        """Delete a translation from every backend and from the cache store.

        Every backend is asked to delete, since the record may live in more
        than one. Backend outcomes are logged only; the returned result
        reflects the cache deletion.
        """
        for backend in self.backends:
            try:
                result = backend.delete_translation(translation)
            except Exception as e:  # pylint: disable=broad-except
                logger.warning(
                    "backend_delete_error",
                    backend=backend.name,
                    cache_key=translation.cache_key,
                    error=str(e),
                    exc_info=True,
                )
                continue
            if not result.is_success:
                logger.debug(
                    "backend_delete_failed",
                    backend=backend.name,
                    cache_key=translation.cache_key,
                    status=result.status.value,
                )

        try:
            self._cache_store.delete(translation.cache_key)
        except CacheStoreError as e:
            logger.error(
                "cache_delete_failed",
                cache_key=translation.cache_key,
                error=str(e),
            )
            return OperationResult.transient_error(
                f"Failed to delete cache entry {translation.cache_key}: {e}",
                error_code="CACHE_ERROR",
            )
        return OperationResult.success(message="Translation deleted")

    def translate(
        self, locale: Optional[str], key: str, /, *args: Any, **kwargs: Any
    ) -> str:
        """Resolve, format and return the display string for (locale, key).

        Resolution order: requested locale, instance fallbacks, configured
        fallbacks for the locale, default locale. When nothing has a value,
        a placeholder record is synthesized and saved through the backend
        chain. Never raises; a missing value displays as the key itself.

        Args:
            locale: Requested locale. Empty or None means the default locale.
            key: Translation key. Probes always use the bare key; only a
                synthesized record carries the scoped key.
            *args: Positional formatter arguments.
            **kwargs: Named formatter arguments. locale and key are
                positional-only, so templates may use them as variable names.

        Returns:
            Non-empty display string.
        """
        locale = locale or self.default_locale

        fallback_locales = list(self._instance_fallbacks)
        fallback_locales.extend(self.fallback_locales.get(locale, []))
        fallback_locales.append(self.default_locale)

        translation_key = f"{self._scope}.{key}" if self._scope else key

        translation = self._probe(locale, key)
        if translation is None:
            for fallback_locale in fallback_locales:
                translation = self._probe(fallback_locale, key)
                if translation is not None:
                    break

        if translation is None:
            translation = self._probe(self.default_locale, key)

        if translation is None:
            translation = self._synthesize(locale, translation_key)

        value = translation.value or key

        try:
            return self.formatter.render(locale, value, *args, **kwargs)
        except Exception as e:  # pylint: disable=broad-except
            logger.debug(
                "translation_format_failed",
                locale=locale,
                key=key,
                error=str(e),
            )
            return value

    t = translate

    def _probe(self, locale: str, key: str) -> Optional[Translation]:
        """Return the cached translation when it exists and has a value."""
        try:
            translation = self._cache_store.get(cache_key(locale, key))
        except CacheKeyNotFoundError:
            return None
        except CacheStoreError as e:
            logger.warning(
                "cache_probe_failed",
                locale=locale,
                key=key,
                error=str(e),
            )
            return None
        return translation if translation.is_translated else None

    def _synthesize(self, locale: str, translation_key: str) -> Translation:
        default_backend = self.backends[0] if self.backends else None
        translation = Translation(
            key=translation_key,
            locale=locale,
            value=self._value,
            backend=default_backend,
        )
        result = self.save_translation(translation)
        logger.info(
            "translation_synthesized",
            locale=locale,
            key=translation_key,
            saved=result.is_success,
        )
        return translation

    def _derive(self, **attributes: Any) -> "I18n":
        # Shares backends, fallback map and cache store; no reload
        derived = copy.copy(self)
        derived._instance_fallbacks = list(self._instance_fallbacks)
        for name, value in attributes.items():
            setattr(derived, name, value)
        return derived

    def scope(self, scope: str) -> "I18n":
        """Return a view whose synthesized keys are prefixed with scope."""
        return self._derive(_scope=scope)

    def default(self, value: str) -> "I18n":
        """Return a view whose synthesized records carry value."""
        return self._derive(_value=value)

    def fallbacks(self, *locales: str) -> "I18n":
        """Return a view that tries locales before the configured fallbacks."""
        return self._derive(_instance_fallbacks=list(locales))

    @property
    def current_scope(self) -> str:
        return self._scope

    def available_locales(self) -> List[str]:
        """Locales present in the backends, sorted."""
        return sorted(self.load_translations().keys())

    def __repr__(self) -> str:
        return (
            f"I18n(backends={[backend.name for backend in self.backends]}, "
            f"default_locale={self.default_locale!r}, scope={self._scope!r})"
        )

