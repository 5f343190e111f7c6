"""Tests for localekit.i18n.formatter module."""

import pytest

from localekit.errors import FormatError
from localekit.i18n import InterpolationFormatter

pytestmark = pytest.mark.unit


@pytest.fixture
def formatter():
    return InterpolationFormatter()


class TestInterpolationFormatter:
    """Tests for InterpolationFormatter.render()."""

    def test_plain_template_unchanged(self, formatter):
        """Templates without placeholders are returned as-is."""
        assert formatter.render("en-US", "Hello world") == "Hello world"

    def test_double_brace_named(self, formatter):
        """{{name}} placeholders use keyword arguments."""
        assert formatter.render("en-US", "Hi {{name}}", name="Ada") == "Hi Ada"

    def test_single_brace_named(self, formatter):
        """{name} placeholders use keyword arguments."""
        assert formatter.render("en-US", "Hi {name}", name="Ada") == "Hi Ada"

    def test_positional(self, formatter):
        """{{$n}} placeholders use 1-based positional arguments."""
        result = formatter.render("en-US", "{{$2}} then {{$1}}", "first", "second")
        assert result == "second then first"

    def test_mapping_argument(self, formatter):
        """A single mapping argument supplies named variables."""
        result = formatter.render("en-US", "{{count}} items", {"count": 3})
        assert result == "3 items"

    def test_kwargs_override_mapping(self, formatter):
        """Keyword arguments take precedence over the mapping."""
        result = formatter.render("en-US", "{{name}}", {"name": "a"}, name="b")
        assert result == "b"

    def test_non_string_values_are_converted(self, formatter):
        """Values are converted with str()."""
        assert formatter.render("en-US", "{{n}}", n=4.5) == "4.5"

    def test_values_are_not_reinterpolated(self, formatter):
        """Substituted values are never treated as placeholders."""
        result = formatter.render("en-US", "{{a}} {{b}}", a="{{b}}", b="x")
        assert result == "{{b}} x"

    def test_variables_named_like_parameters(self, formatter):
        """locale and template are usable as variable names."""
        result = formatter.render("en-US", "{template} in {locale}", template="t", locale="fr")
        assert result == "t in fr"

    def test_missing_named_variable_raises(self, formatter):
        """A missing named variable raises FormatError."""
        with pytest.raises(FormatError, match="name"):
            formatter.render("en-US", "Hi {{name}}")

    def test_missing_positional_argument_raises(self, formatter):
        """A missing positional argument raises FormatError."""
        with pytest.raises(FormatError):
            formatter.render("en-US", "{{$2}}", "only")

    def test_format_error_is_value_error(self, formatter):
        """FormatError can be caught as ValueError."""
        with pytest.raises(ValueError):
            formatter.render("en-US", "{missing}")
