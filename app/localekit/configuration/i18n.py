"""Translation engine settings."""

from typing import Dict, List, Optional

from pydantic import Field, field_validator

from localekit.configuration.base import FeatureSettings

SUPPORTED_BACKENDS = ("memory", "yaml", "dynamodb")
SUPPORTED_CACHE_BACKENDS = ("memory", "redis")


class I18nSettings(FeatureSettings):
    """Translation engine configuration.

    Environment Variables:
        I18N_DEFAULT_LOCALE: Locale used when none is requested and as the
            last fallback of every lookup (default: en-US)
        I18N_FALLBACK_LOCALES: JSON mapping of locale to ordered fallback
            locales, e.g. '{"fr-CA": ["fr-FR"]}'
        I18N_SCOPE: Namespace prefix applied to synthesized keys
        I18N_PLACEHOLDER_VALUE: Value stored on synthesized records
        I18N_BACKENDS: JSON list of backend names in priority order
            ('memory', 'yaml', 'dynamodb')
        I18N_CACHE_BACKEND: Cache store type - 'memory' or 'redis'
        I18N_TRANSLATIONS_DIR: Directory of <locale>.yml files for the YAML backend

    Example:
        ```python
        from localekit.configuration import get_settings

        settings = get_settings()
        default_locale = settings.i18n.I18N_DEFAULT_LOCALE
        ```
    """

    I18N_DEFAULT_LOCALE: str = Field(default="en-US", alias="I18N_DEFAULT_LOCALE")
    I18N_FALLBACK_LOCALES: Dict[str, List[str]] = Field(
        default_factory=dict,
        alias="I18N_FALLBACK_LOCALES",
    )
    I18N_SCOPE: str = Field(default="", alias="I18N_SCOPE")
    I18N_PLACEHOLDER_VALUE: str = Field(default="", alias="I18N_PLACEHOLDER_VALUE")
    I18N_BACKENDS: List[str] = Field(
        default_factory=lambda: ["memory"],
        alias="I18N_BACKENDS",
    )
    I18N_CACHE_BACKEND: str = Field(default="memory", alias="I18N_CACHE_BACKEND")
    I18N_TRANSLATIONS_DIR: Optional[str] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )

    @field_validator("I18N_BACKENDS")
    @classmethod
    def validate_backends(cls, value: List[str]) -> List[str]:
        unknown = [name for name in value if name not in SUPPORTED_BACKENDS]
        if unknown:
            raise ValueError(f"Unsupported translation backends: {unknown}")
        return value

    @field_validator("I18N_CACHE_BACKEND")
    @classmethod
    def validate_cache_backend(cls, value: str) -> str:
        if value not in SUPPORTED_CACHE_BACKENDS:
            raise ValueError(f"Unsupported cache backend: {value}")
        return value
