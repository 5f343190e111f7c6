"""Factory functions for creating a configured I18n engine."""

from pathlib import Path
from typing import List, Optional, Sequence

from localekit.backends import Backend, DynamoDBBackend, MemoryBackend, YAMLBackend
from localekit.cache import CacheStore, MemoryCacheStore, RedisCacheStore
from localekit.configuration import Settings, get_settings
from localekit.i18n.engine import I18n
from localekit.i18n.formatter import Formatter
from localekit.logging import get_module_logger

logger = get_module_logger()


def create_backend(name: str, settings: Settings) -> Backend:
    """Create one backend by its configured name.

    Args:
        name: "memory", "yaml" or "dynamodb".
        settings: Application settings.

    Raises:
        ValueError: For an unknown name, or "yaml" without
            I18N_TRANSLATIONS_DIR.
    """
    if name == "memory":
        return MemoryBackend()
    if name == "yaml":
        translations_dir = settings.i18n.I18N_TRANSLATIONS_DIR
        if not translations_dir:
            raise ValueError("I18N_TRANSLATIONS_DIR is required for the yaml backend")
        return YAMLBackend(Path(translations_dir), create=True)
    if name == "dynamodb":
        return DynamoDBBackend(settings=settings.dynamodb)
    raise ValueError(f"Unknown translation backend: {name}")


def create_cache_store(settings: Settings) -> CacheStore:
    """Create the cache store selected by I18N_CACHE_BACKEND."""
    if settings.i18n.I18N_CACHE_BACKEND == "redis":
        return RedisCacheStore(
            key_prefix=settings.redis.REDIS_KEY_PREFIX,
            settings=settings.redis,
        )
    return MemoryCacheStore()


def create_i18n(
    settings: Optional[Settings] = None,
    backends: Optional[Sequence[Backend]] = None,
    cache_store: Optional[CacheStore] = None,
    formatter: Optional[Formatter] = None,
) -> I18n:
    """Create and configure an I18n engine.

    Args:
        settings: Settings to use (default: get_settings()).
        backends: Backends in priority order. Built from I18N_BACKENDS when
            omitted.
        cache_store: Cache store. Built from I18N_CACHE_BACKEND when omitted.
        formatter: Optional formatter override.

    Returns:
        I18n: Engine with every backend loaded into the cache store.

    Usage:
        # Use environment configuration
        i18n = create_i18n()

        # Explicit backends
        i18n = create_i18n(backends=[YAMLBackend(Path("locales"))])
    """
    settings = settings or get_settings()
    i18n_settings = settings.i18n

    if backends is None:
        chain: List[Backend] = [
            create_backend(name, settings) for name in i18n_settings.I18N_BACKENDS
        ]
    else:
        chain = list(backends)

    engine = I18n(
        *chain,
        default_locale=i18n_settings.I18N_DEFAULT_LOCALE,
        fallback_locales=i18n_settings.I18N_FALLBACK_LOCALES,
        cache_store=cache_store or create_cache_store(settings),
        formatter=formatter,
        scope=i18n_settings.I18N_SCOPE,
        value=i18n_settings.I18N_PLACEHOLDER_VALUE,
    )
    logger.info(
        "i18n_created",
        backends=[backend.name for backend in chain],
        cache_store=type(engine.cache_store).__name__,
        default_locale=i18n_settings.I18N_DEFAULT_LOCALE,
    )
    return engine
