"""Translation record model.

A Translation is the unit of data moved between backends and the cache
store. The owning backend is kept on the instance but never serialized.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from localekit.backends.base import Backend

CACHE_KEY_SEPARATOR = "/"


def cache_key(locale: str, key: str) -> str:
    """Build the composite cache key for a (locale, key) pair.

    Returns:
        Key such as "en-US/greeting.hello".
    """
    return CACHE_KEY_SEPARATOR.join([locale, key])


@dataclass
class Translation:
    """A translated message for one locale.

    Attributes:
        key: Message identifier, optionally scoped ("admin.greeting").
        locale: Locale tag (e.g., "en-US").
        value: Template text. Empty means untranslated.
        backend: Backend that owns this record. Not serialized, ignored by
            equality.
    """

    key: str
    locale: str
    value: str = ""
    backend: Optional["Backend"] = field(default=None, compare=False, repr=False)

    @property
    def cache_key(self) -> str:
        return cache_key(self.locale, self.key)

    @property
    def is_translated(self) -> bool:
        return self.value != ""

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "locale": self.locale, "value": self.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Translation":
        """Build a Translation from serialized data.

        Raises:
            KeyError: If "key" or "locale" is missing.
        """
        return cls(
            key=data["key"],
            locale=data["locale"],
            value=data.get("value") or "",
        )

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_json(cls, raw: str) -> "Translation":
        return cls.from_dict(json.loads(raw))
