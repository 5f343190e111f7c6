"""i18n engine - translation resolution with locale fallback and caching.

Main components:
- engine: I18n engine (load, translate, save, delete)
- formatter: Formatter interface and InterpolationFormatter
- resolvers: LocaleResolver, LanguageNegotiator and locale_from_context
- permissions: LocaleAccess resolution for admin principals
- factory: create_i18n() wiring from settings
"""

from localekit.i18n.engine import DEFAULT_LOCALE, I18n
from localekit.i18n.factory import create_i18n
from localekit.i18n.formatter import Formatter, InterpolationFormatter
from localekit.i18n.permissions import (
    LocaleAccess,
    LocaleAccessKind,
    get_editable_locales,
    get_viewable_locales,
    resolve_locale_access,
)
from localekit.i18n.resolvers import (
    LanguageNegotiator,
    LocaleResolver,
    locale_from_context,
)

__all__ = [
    "DEFAULT_LOCALE",
    "I18n",
    "create_i18n",
    "Formatter",
    "InterpolationFormatter",
    "LocaleAccess",
    "LocaleAccessKind",
    "resolve_locale_access",
    "get_viewable_locales",
    "get_editable_locales",
    "LocaleResolver",
    "LanguageNegotiator",
    "locale_from_context",
]
