"""localekit configuration settings - main aggregator."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from localekit.configuration.dynamodb import DynamoDBSettings
from localekit.configuration.i18n import I18nSettings
from localekit.configuration.redis import RedisSettings


class Settings(BaseSettings):
    """Main settings aggregator.

    Settings are organized by concern:

    - **i18n**: translation engine behavior (default locale, fallbacks, backends)
    - **redis**: out-of-process cache store connection
    - **dynamodb**: DynamoDB translation backend table

    Environment Variables:
        PREFIX: Environment prefix; empty means production
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR)

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()
        if settings.i18n.I18N_CACHE_BACKEND == "redis":
            host = settings.redis.REDIS_HOST
        ```
    """

    PREFIX: str = ""
    LOG_LEVEL: str = "INFO"

    i18n: I18nSettings
    redis: RedisSettings
    dynamodb: DynamoDBSettings

    @property
    def is_production(self) -> bool:
        """Check if running in production.

        Returns:
            True if PREFIX is empty (production), False otherwise.
        """
        return not bool(self.PREFIX)

    def __init__(self, **kwargs):
        """Initialize Settings with automatic subsettings instantiation.

        Args:
            **kwargs: Optional overrides for specific settings sections.
        """
        settings_map = {
            "i18n": I18nSettings,
            "redis": RedisSettings,
            "dynamodb": DynamoDBSettings,
        }

        for setting_name, setting_class in settings_map.items():
            if setting_name not in kwargs:
                kwargs[setting_name] = setting_class()

        super().__init__(**kwargs)

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings singleton.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()
