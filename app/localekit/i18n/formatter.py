"""Template formatting for resolved translations.

The engine hands every resolved value to a Formatter together with the
caller's arguments. Formatting failures raise FormatError; the engine
treats them as non-fatal and returns the unformatted value.
"""

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Dict, Tuple

from localekit.errors import FormatError
from localekit.logging import get_module_logger

logger = get_module_logger()

# {{$1}} positional, {{name}} and {name} named
PLACEHOLDER_PATTERN = re.compile(r"\{\{\$(\d+)\}\}|\{\{(\w+)\}\}|\{(\w+)\}")


class Formatter(ABC):
    """Renders a template with locale-aware rules."""

    @abstractmethod
    def render(self, locale: str, template: str, /, *args: Any, **kwargs: Any) -> str:
        """Render template with the given arguments.

        Raises:
            FormatError: If the template cannot be rendered.
        """
        pass


class InterpolationFormatter(Formatter):
    """Variable interpolation formatter.

    Supported placeholders:
        - ``{{$1}}``, ``{{$2}}``: positional arguments (1-based)
        - ``{{name}}`` and ``{name}``: keyword arguments, or keys of a single
          mapping passed as the only positional argument

    Substitution is a single pass, so argument values are never
    re-interpreted as placeholders. A placeholder without a value raises
    FormatError.
    """

    def render(self, locale: str, template: str, /, *args: Any, **kwargs: Any) -> str:
        variables: Dict[str, Any] = {}
        if len(args) == 1 and isinstance(args[0], Mapping):
            variables.update(args[0])
            args = ()
        variables.update(kwargs)

        def replace(match: "re.Match[str]") -> str:
            position, double_name, single_name = match.groups()
            if position is not None:
                return self._positional(position, args)
            name = double_name or single_name
            if name not in variables:
                logger.debug(
                    "missing_interpolation_variable",
                    locale=locale,
                    variable=name,
                    available_variables=list(variables.keys()),
                )
                raise FormatError(f"Missing interpolation variable: {name}")
            return str(variables[name])

        return PLACEHOLDER_PATTERN.sub(replace, template)

    @staticmethod
    def _positional(position: str, args: Tuple[Any, ...]) -> str:
        index = int(position) - 1
        if index < 0 or index >= len(args):
            raise FormatError(f"Missing positional argument: ${position}")
        return str(args[index])
