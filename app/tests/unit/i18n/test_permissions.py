"""Tests for localekit.i18n.permissions module."""

import pytest

from localekit.i18n import (
    LocaleAccessKind,
    get_editable_locales,
    get_viewable_locales,
    resolve_locale_access,
)

pytestmark = pytest.mark.unit


class Principal:
    """Admin user exposing the given locale capabilities."""

    def __init__(self, viewable=None, editable=None, available=None):
        if viewable is not None:
            self.viewable_locales = lambda: viewable
        if editable is not None:
            self.editable_locales = lambda: editable
        if available is not None:
            self.available_locales = lambda: available


class TestResolveLocaleAccess:
    """Tests for resolve_locale_access()."""

    def test_viewable_and_editable(self):
        """Both capabilities are used as provided."""
        access = resolve_locale_access(
            Principal(viewable=["en-US", "fr-FR"], editable=["fr-FR"]), "en-US"
        )
        assert access.kind == LocaleAccessKind.VIEWABLE_AND_EDITABLE
        assert access.viewable == ("en-US", "fr-FR")
        assert access.editable == ("fr-FR",)

    def test_viewable_only_falls_back_for_editable(self):
        """Editable locales fall back to available_locales()."""
        access = resolve_locale_access(
            Principal(viewable=["en-US"], available=["de-DE"]), "en-US"
        )
        assert access.kind == LocaleAccessKind.VIEWABLE
        assert access.editable == ("de-DE",)

    def test_editable_only_falls_back_to_default(self):
        """Without available_locales() the default locale is granted."""
        access = resolve_locale_access(Principal(editable=["fr-FR"]), "en-US")
        assert access.kind == LocaleAccessKind.EDITABLE
        assert access.viewable == ("en-US",)
        assert access.editable == ("fr-FR",)

    def test_available_only(self):
        """available_locales() serves both lists."""
        access = resolve_locale_access(Principal(available=["en-US", "es-ES"]), "en-US")
        assert access.kind == LocaleAccessKind.AVAILABLE
        assert access.viewable == access.editable == ("en-US", "es-ES")

    @pytest.mark.parametrize("principal", [None, object(), Principal()])
    def test_no_capabilities_uses_default(self, principal):
        """A principal with no capabilities gets the default locale."""
        access = resolve_locale_access(principal, "fr-FR")
        assert access.kind == LocaleAccessKind.DEFAULT
        assert access.viewable == access.editable == ("fr-FR",)

    def test_non_callable_attribute_is_ignored(self):
        """Attributes that are not callable are not capabilities."""
        principal = Principal()
        principal.viewable_locales = ["fr-FR"]
        access = resolve_locale_access(principal, "en-US")
        assert access.kind == LocaleAccessKind.DEFAULT

    def test_can_view_and_can_edit(self):
        """LocaleAccess answers membership questions."""
        access = resolve_locale_access(
            Principal(viewable=["en-US", "fr-FR"], editable=["fr-FR"]), "en-US"
        )
        assert access.can_view("en-US")
        assert not access.can_edit("en-US")
        assert access.can_edit("fr-FR")


class TestLocaleListHelpers:
    """Tests for get_viewable_locales() and get_editable_locales()."""

    def test_helpers_return_lists(self):
        principal = Principal(viewable=["en-US"], editable=["fr-FR"])
        assert get_viewable_locales(principal, "en-US") == ["en-US"]
        assert get_editable_locales(principal, "en-US") == ["fr-FR"]

    def test_helpers_default(self):
        assert get_viewable_locales(None, "en-US") == ["en-US"]
        assert get_editable_locales(None, "en-US") == ["en-US"]
