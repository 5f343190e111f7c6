"""Redis cache store settings."""

from pydantic import Field

from localekit.configuration.base import IntegrationSettings


class RedisSettings(IntegrationSettings):
    """Redis connection used by the out-of-process cache store.

    Environment Variables:
        REDIS_HOST: Redis host (default: localhost)
        REDIS_PORT: Redis port (default: 6379)
        REDIS_DB: Database index (default: 0)
        REDIS_KEY_PREFIX: Prefix for every cache key (default: "i18n:")
        REDIS_SOCKET_TIMEOUT: Socket timeout in seconds (default: 5)
    """

    REDIS_HOST: str = Field(default="localhost", alias="REDIS_HOST")
    REDIS_PORT: int = Field(default=6379, alias="REDIS_PORT")
    REDIS_DB: int = Field(default=0, alias="REDIS_DB")
    REDIS_KEY_PREFIX: str = Field(default="i18n:", alias="REDIS_KEY_PREFIX")
    REDIS_SOCKET_TIMEOUT: int = Field(default=5, alias="REDIS_SOCKET_TIMEOUT")
