"""Translation storage backends.

Backends are listed in priority order when building an engine; the first
backend wins when several define the same (locale, key).

Usage:

    from localekit.backends import MemoryBackend, YAMLBackend

    backends = [YAMLBackend(Path("locales")), MemoryBackend(defaults, read_only=True)]
"""

from localekit.backends.base import Backend
from localekit.backends.dynamodb import DynamoDBBackend
from localekit.backends.memory import MemoryBackend
from localekit.backends.yaml_file import YAMLBackend

__all__ = [
    "Backend",
    "MemoryBackend",
    "YAMLBackend",
    "DynamoDBBackend",
]
