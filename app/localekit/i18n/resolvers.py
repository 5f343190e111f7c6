"""Locale resolution for incoming requests.

Determines which locale a lookup should use from request context or an
HTTP Accept-Language header.
"""

from collections.abc import Mapping
from typing import Any, List, Optional, Sequence

from localekit.logging import get_module_logger

logger = get_module_logger()


def locale_from_context(context: Any, default_locale: str) -> str:
    """Return the locale carried by a request context, or the default.

    The context may be a mapping with a "locale" entry or an object with a
    ``locale`` attribute. Empty values fall back to default_locale.
    """
    if context is None:
        return default_locale
    if isinstance(context, Mapping):
        locale = context.get("locale")
    else:
        locale = getattr(context, "locale", None)
    return locale or default_locale


class LocaleResolver:
    """Resolves a request locale from an Accept-Language header.

    Attributes:
        default_locale: Locale returned when no preference matches.
        supported_locales: Locales the application can serve.
    """

    def __init__(
        self,
        default_locale: str,
        supported_locales: Optional[Sequence[str]] = None,
    ):
        self.default_locale = default_locale
        self.supported_locales: List[str] = list(supported_locales or [default_locale])
        self.log = logger.bind(default_locale=default_locale)

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_locales: Optional[Sequence[str]] = None,
    ) -> str:
        """Resolve locale from an HTTP Accept-Language header.

        Preferences are ordered by quality; each is matched exactly first,
        then by language only ("en" matches "en-US").

        Args:
            accept_language: Header value, e.g. "fr-CA,fr;q=0.9,en;q=0.8".
            supported_locales: Overrides the resolver's supported locales.

        Returns:
            Best supported locale, or the default when none match.
        """
        if not accept_language:
            return self.default_locale

        supported = list(supported_locales or self.supported_locales)

        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range:
                continue
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            preferences.append((lang_range, quality))

        # sorted() is stable, equal qualities keep header order
        ranked = [
            lang_range
            for lang_range, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
        ]
        match = LanguageNegotiator.find_best_match(ranked, supported)
        if match:
            self.log.debug("resolved_from_header", locale=match)
            return match

        self.log.debug("no_matching_locale_in_header", header=accept_language)
        return self.default_locale


class LanguageNegotiator:
    """Language range matching (e.g., "pt-BR" requested, "pt" available)."""

    @staticmethod
    def matches_language(requested: str, available: str, strict: bool = False) -> bool:
        """Check whether an available tag satisfies a requested tag.

        Args:
            requested: Requested tag (e.g., "en-US").
            available: Available tag (e.g., "en").
            strict: Require an exact (case-insensitive) match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: Sequence[str],
        available: Sequence[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find the best available tag for a preference-ordered request list."""
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=True):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(req_lang, avail_lang, strict=False):
                    return avail_lang

        return default
