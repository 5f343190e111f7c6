"""Configuration module - public API.

Centralized configuration using Pydantic BaseSettings with domain-based
organization.

Exports:
    get_settings: Cached Settings singleton accessor
    Settings: Main settings class (for testing/overrides)
    I18nSettings, RedisSettings, DynamoDBSettings: Section classes

Example:
    ```python
    from localekit.configuration import get_settings

    settings = get_settings()
    fallbacks = settings.i18n.I18N_FALLBACK_LOCALES
    ```
"""

from localekit.configuration.dynamodb import DynamoDBSettings
from localekit.configuration.i18n import I18nSettings
from localekit.configuration.redis import RedisSettings
from localekit.configuration.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
    "I18nSettings",
    "RedisSettings",
    "DynamoDBSettings",
]
