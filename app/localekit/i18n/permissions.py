"""Locale permission lookups for admin surfaces.

A principal (the current user of an admin UI) may expose any of these
optional methods, each returning a list of locale tags:

    viewable_locales()   locales the principal may read
    editable_locales()   locales the principal may change
    available_locales()  shared fallback for both

The capabilities are resolved once per request into a LocaleAccess value;
callers then read its lists instead of inspecting the principal again.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Tuple


class LocaleAccessKind(str, Enum):
    """Which capability a principal provided."""

    VIEWABLE = "viewable"
    EDITABLE = "editable"
    VIEWABLE_AND_EDITABLE = "viewable_and_editable"
    AVAILABLE = "available"
    DEFAULT = "default"


@dataclass(frozen=True)
class LocaleAccess:
    """Resolved locale permissions for one principal.

    Attributes:
        kind: Capability the principal provided.
        viewable: Locales the principal may view.
        editable: Locales the principal may edit.
    """

    kind: LocaleAccessKind
    viewable: Tuple[str, ...]
    editable: Tuple[str, ...]

    def can_view(self, locale: str) -> bool:
        return locale in self.viewable

    def can_edit(self, locale: str) -> bool:
        return locale in self.editable


def _lookup(principal: Any, name: str) -> Optional[Callable[[], List[str]]]:
    method = getattr(principal, name, None)
    return method if callable(method) else None


def resolve_locale_access(principal: Any, default_locale: str) -> LocaleAccess:
    """Resolve a principal's locale permissions.

    Viewable locales come from viewable_locales(), else available_locales(),
    else [default_locale]. Editable locales come from editable_locales(),
    else available_locales(), else [default_locale].

    Args:
        principal: Current user object, or None.
        default_locale: Locale granted when the principal provides nothing.

    Returns:
        LocaleAccess for the principal.
    """
    viewable_lookup = _lookup(principal, "viewable_locales")
    editable_lookup = _lookup(principal, "editable_locales")
    available_lookup = _lookup(principal, "available_locales")

    available = list(available_lookup()) if available_lookup else None
    fallback = available if available is not None else [default_locale]

    viewable = list(viewable_lookup()) if viewable_lookup else fallback
    editable = list(editable_lookup()) if editable_lookup else fallback

    if viewable_lookup and editable_lookup:
        kind = LocaleAccessKind.VIEWABLE_AND_EDITABLE
    elif viewable_lookup:
        kind = LocaleAccessKind.VIEWABLE
    elif editable_lookup:
        kind = LocaleAccessKind.EDITABLE
    elif available_lookup:
        kind = LocaleAccessKind.AVAILABLE
    else:
        kind = LocaleAccessKind.DEFAULT

    return LocaleAccess(kind=kind, viewable=tuple(viewable), editable=tuple(editable))


def get_viewable_locales(principal: Any, default_locale: str) -> List[str]:
    return list(resolve_locale_access(principal, default_locale).viewable)


def get_editable_locales(principal: Any, default_locale: str) -> List[str]:
    return list(resolve_locale_access(principal, default_locale).editable)
