"""YAML file translation backend.

Expects one or more files per locale in a directory, named either
``<locale>.yml`` or ``<domain>.<locale>.yml``. Nested mappings are
flattened into dotted keys:

    greeting:
      hello: Hello
      bye: Goodbye

yields ``greeting.hello`` and ``greeting.bye``.

``<locale>.yml`` is the override file of its locale: it is read after the
domain files, and every save goes there, so a saved value always wins over
one shipped in a domain file. Deletes remove the key from every file of
the locale.
"""

import threading
from pathlib import Path
from typing import Any, Dict, List, Tuple

import yaml

from localekit.backends.base import Backend
from localekit.errors import TranslationFileError
from localekit.logging import get_module_logger
from localekit.models import Translation
from localekit.operations import OperationResult

logger = get_module_logger()

YAML_SUFFIX = ".yml"

# Raised while reading a file that exists but cannot be used
READ_ERRORS = (yaml.YAMLError, TranslationFileError, UnicodeDecodeError, OSError)


def flatten_messages(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten nested mappings into dotted keys.

    Args:
        data: Parsed YAML mapping.
        prefix: Key prefix of the current nesting level.

    Returns:
        Dict of dotted key -> string value.
    """
    flat: Dict[str, str] = {}
    for name, value in data.items():
        full_key = f"{prefix}.{name}" if prefix else str(name)
        if isinstance(value, dict):
            flat.update(flatten_messages(value, full_key))
        elif value is None:
            flat[full_key] = ""
        else:
            flat[full_key] = str(value)
    return flat


def _set_key(data: Dict[str, Any], key: str, value: str) -> None:
    if isinstance(data.get(key), dict):
        raise TranslationFileError(f"{key} names a group of messages, not a message")
    # Follow an existing nested path when there is one, else store flat
    if key not in data:
        for name, child in data.items():
            if isinstance(child, dict) and key.startswith(f"{name}."):
                _set_key(child, key[len(name) + 1:], value)
                return
    data[key] = value


def _remove_key(data: Dict[str, Any], key: str) -> bool:
    removed = False
    if key in data and not isinstance(data[key], dict):
        del data[key]
        removed = True
    for name, child in list(data.items()):
        if isinstance(child, dict) and key.startswith(f"{name}."):
            if _remove_key(child, key[len(name) + 1:]):
                removed = True
                if not child:
                    del data[name]
    return removed


class YAMLBackend(Backend):
    """Backend reading and writing YAML translation files.

    Attributes:
        translations_dir: Directory containing the YAML files.
    """

    def __init__(self, translations_dir: Path, create: bool = False):
        """Initialize the YAML backend.

        Args:
            translations_dir: Directory with YAML translation files.
            create: Create the directory when missing instead of failing.

        Raises:
            ValueError: If the directory does not exist and create is False.
        """
        self.translations_dir = Path(translations_dir)
        self._lock = threading.Lock()

        if not self.translations_dir.exists():
            if not create:
                raise ValueError(
                    f"Translations directory not found: {self.translations_dir}"
                )
            self.translations_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "initialized_yaml_backend",
            translations_dir=str(self.translations_dir),
        )

    def _locale_file(self, locale: str) -> Path:
        return self.translations_dir / f"{locale}{YAML_SUFFIX}"

    @staticmethod
    def _locale_from_path(path: Path) -> str:
        # "incident.en-US.yml" -> "en-US", "en-US.yml" -> "en-US"
        return path.stem.split(".")[-1]

    def _translation_files(self) -> List[Path]:
        """Every YAML file, with the <locale>.yml override files last."""

        def order(path: Path) -> Tuple[bool, str]:
            return path.stem == self._locale_from_path(path), path.name

        return sorted(self.translations_dir.glob(f"*{YAML_SUFFIX}"), key=order)

    def _read_mapping(self, path: Path) -> Dict[str, Any]:
        """Parse one file.

        Raises:
            yaml.YAMLError: Invalid YAML.
            TranslationFileError: Top level is not a mapping.
            UnicodeDecodeError: File is not UTF-8.
            OSError: File cannot be read.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise TranslationFileError(
                f"{path.name} must contain a mapping, got {type(data).__name__}"
            )
        return data

    def _write_mapping(self, path: Path, data: Dict[str, Any]) -> None:
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, allow_unicode=True, default_flow_style=False)

    @staticmethod
    def _file_error(path: Path, error: Exception) -> OperationResult:
        if isinstance(error, OSError):
            logger.error("yaml_io_error", file=str(path), error=str(error))
            return OperationResult.transient_error(
                f"Failed to access {path}: {error}", error_code="IO_ERROR"
            )
        logger.error("yaml_file_invalid", file=str(path), error=str(error))
        return OperationResult.permanent_error(
            f"Cannot update {path}: {error}", error_code="YAML_ERROR"
        )

    def load_translations(self) -> List[Translation]:
        """Load every translation from the directory.

        Files that cannot be read or parsed are logged and skipped. Each
        (locale, key) appears once; the override file wins.
        """
        records: Dict[Tuple[str, str], Translation] = {}
        with self._lock:
            for path in self._translation_files():
                locale = self._locale_from_path(path)
                try:
                    messages = flatten_messages(self._read_mapping(path))
                except READ_ERRORS as e:
                    logger.error("yaml_file_skipped", file=str(path), error=str(e))
                    continue
                for key, value in messages.items():
                    records[(locale, key)] = Translation(
                        key=key, locale=locale, value=value, backend=self
                    )

        logger.info(
            "loaded_yaml_translations",
            translations_dir=str(self.translations_dir),
            count=len(records),
        )
        return list(records.values())

    def save_translation(self, translation: Translation) -> OperationResult:
        path = self._locale_file(translation.locale)
        with self._lock:
            try:
                data = self._read_mapping(path) if path.exists() else {}
                _set_key(data, translation.key, translation.value)
                self._write_mapping(path, data)
            except READ_ERRORS as e:
                return self._file_error(path, e)

        return OperationResult.success(message="Translation saved")

    def delete_translation(self, translation: Translation) -> OperationResult:
        removed = False
        with self._lock:
            for path in self._translation_files():
                if self._locale_from_path(path) != translation.locale:
                    continue
                try:
                    data = self._read_mapping(path)
                    if _remove_key(data, translation.key):
                        self._write_mapping(path, data)
                        removed = True
                except READ_ERRORS as e:
                    return self._file_error(path, e)

        if not removed:
            return OperationResult.not_found(
                f"Translation not found: {translation.cache_key}"
            )
        return OperationResult.success(message="Translation deleted")
