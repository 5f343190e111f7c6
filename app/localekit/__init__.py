"""localekit - translation resolution and caching engine.

Translations flow from an ordered chain of storage backends into a cache
store; lookups resolve through a locale fallback chain and missing entries
are synthesized and persisted for later translation.

Main components:
- i18n: I18n engine, formatter, locale resolution, permission helpers
- backends: Backend interface and memory/YAML/DynamoDB adapters
- cache: CacheStore interface and memory/Redis stores
- models: Translation record
"""

__version__ = "0.1.0"
