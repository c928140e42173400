"""Locale registry holding one translation table per language.

Lookups may fall back to other registered languages when the requested
language lacks a key: the requested language is searched first, then every
other language in registration order. Setting `strict_usage` disables the
fallback.

The registry is not thread-safe. Build it at startup and share it read-only,
or go through `LocalizationService`, which serializes access.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Sequence, Union

from localization.errors import (
    EmptyRegistryError,
    LanguageAlreadyRegisteredError,
    LanguageNotFoundError,
    LocalizationError,
    TranslationLoadError,
    TranslationNotFoundError,
)
from localization.language import LanguageTable
from localization.loader import find_translation_files, read_translation_files
from localization.logging import get_module_logger
from localization.models import TranslationEntry, TranslationFile

logger = get_module_logger(__name__)


class LocaleRegistry:
    """Registry of language tables with optional cross-language fallback.

    Attributes:
        strict_usage: If True, a key missing in the requested language is an
            error. If False, other languages are searched as backup.

    Usage:
        registry = LocaleRegistry("en", "lv", strict_usage=False)
        registry.load_yaml_files("en", "locales/common.yml")
        registry.value("lv", "greeting")
    """

    def __init__(self, *languages: str, strict_usage: bool = False):
        """Initialize registry and register the given languages.

        Args:
            *languages: Language keywords to register ("en", "lv", ...).
            strict_usage: Restrict lookups to the requested language.

        Raises:
            LanguageAlreadyRegisteredError: If `languages` repeats a keyword.
        """
        self.strict_usage = strict_usage
        self._tables: List[LanguageTable] = []
        self.register(*languages)

    def __repr__(self) -> str:
        return (
            f"LocaleRegistry(languages={self.enabled_languages()!r}, "
            f"strict_usage={self.strict_usage!r})"
        )

    def __len__(self) -> int:
        return len(self._tables)

    def register(self, *languages: str) -> None:
        """Register new languages, all or nothing.

        Raises:
            LanguageAlreadyRegisteredError: If a keyword is already registered
                or repeats within `languages`. The registry is left unchanged.
        """
        if not languages:
            return

        seen = set()
        for language in languages:
            if self.has_language(language):
                raise LanguageAlreadyRegisteredError(
                    f"language '{language}' already exists"
                )

            folded = language.casefold()
            if folded in seen:
                raise LanguageAlreadyRegisteredError(
                    f"language '{language}' redefined in passed languages"
                )
            seen.add(folded)

        self._tables.extend(LanguageTable(language) for language in languages)
        logger.info(
            "registered_languages",
            languages=list(languages),
            language_count=len(self._tables),
        )

    def get(self, language: str) -> LanguageTable:
        """Get the table for a language keyword (case-insensitive).

        Raises:
            LanguageNotFoundError: If the language is not registered.
        """
        for table in self._tables:
            if table.matches(language):
                return table

        raise LanguageNotFoundError(language)

    def has_language(self, language: str) -> bool:
        return any(table.matches(language) for table in self._tables)

    def enabled_languages(self) -> Optional[List[str]]:
        """Get registered language keywords in registration order.

        Returns:
            List of keywords, or None when no language is registered.
        """
        if not self._tables:
            return None

        return [table.keyword for table in self._tables]

    def set_value(self, language: str, key: str, value: str, plural: str = "") -> None:
        """Set singular and plural text of a key for a language.

        An empty key is ignored by the table without raising; validate keys
        upstream when a hard failure is needed.

        Raises:
            EmptyRegistryError: If no language is registered.
            LanguageNotFoundError: If the language is not registered.
        """
        if not self._tables:
            raise EmptyRegistryError("language list is empty")

        self.get(language).set_value(key, value, plural)

    def value(self, language: str, key: str) -> str:
        """Get singular text, falling back to other languages unless strict.

        Raises:
            LanguageNotFoundError: If the language is not registered.
            TranslationNotFoundError: If no searched language has the key.
        """
        return self._lookup(language, key, plural=False)

    def value_plural(self, language: str, key: str) -> str:
        """Get plural text, falling back to other languages unless strict.

        Raises:
            LanguageNotFoundError: If the language is not registered.
            TranslationNotFoundError: If no searched language has the key.
        """
        return self._lookup(language, key, plural=True)

    def value_or_empty(self, language: str, key: str) -> str:
        """Like `value()` but returns "" instead of raising."""
        try:
            return self.value(language, key)
        except LocalizationError:
            return ""

    def value_plural_or_empty(self, language: str, key: str) -> str:
        """Like `value_plural()` but returns "" instead of raising."""
        try:
            return self.value_plural(language, key)
        except LocalizationError:
            return ""

    def add_translations(self, entries: Iterable[TranslationEntry]) -> None:
        """Apply translation entries in order, stopping at the first failure.

        Entries applied before the failing one stay in place.

        Raises:
            TranslationLoadError: Carrying the index of the failing entry.
        """
        count = 0
        for index, entry in enumerate(entries):
            try:
                self.set_value(entry.language, entry.key, entry.value, entry.plural)
            except LocalizationError as e:
                logger.error(
                    "translation_entry_rejected",
                    index=index,
                    key=entry.key,
                    language=entry.language,
                    error=str(e),
                )
                raise TranslationLoadError(
                    f"translation index={index}: {e}", index=index
                ) from e
            count += 1

        logger.debug("added_translations", entry_count=count)

    def add_translation_files(self, files: Iterable[TranslationFile]) -> None:
        """Apply decoded translation files in order.

        Raises:
            TranslationLoadError: Carrying the failing file path and entry index.
        """
        for file in files:
            try:
                self.add_translations(file.entries)
            except TranslationLoadError as e:
                raise TranslationLoadError(
                    f"'{file.file_path}': {e}",
                    index=e.index,
                    file_path=file.file_path,
                ) from e

    def load_yaml_files(
        self, default_language: str, *paths: Union[str, Path]
    ) -> None:
        """Read, decode and apply YAML translation files.

        Every file is read and decoded before any translation is applied;
        the first file that fails aborts the batch.

        Args:
            default_language: Language for flat `key: "text"` values.
            *paths: YAML file paths.

        Raises:
            TranslationLoadError: If a file cannot be read, decoded or applied.
        """
        files = read_translation_files(default_language, *paths)
        self.add_translation_files(files)
        logger.info(
            "loaded_yaml_files",
            file_count=len(files),
            entry_count=sum(len(file) for file in files),
        )

    def load_yaml_glob(self, default_language: str, pattern: str) -> List[Path]:
        """Load every YAML file matching a glob pattern.

        Examples: "file.yml", "*.yaml", "locales/*", "locales/**/*.yml".

        Returns:
            The matched paths, in load order.

        Raises:
            TranslationLoadError: If a matched file fails to load.
        """
        paths = find_translation_files(pattern)
        logger.info("matched_translation_files", pattern=pattern, file_count=len(paths))
        self.load_yaml_files(default_language, *paths)
        return paths

    def _lookup(self, language: str, key: str, plural: bool) -> str:
        table = self.get(language)

        for candidate in self._search_order(table):
            if candidate.has_key(key):
                if plural:
                    return candidate.value_plural(key)
                return candidate.value(key)

        logger.debug(
            "translation_not_found",
            language=language,
            key=key,
            strict_usage=self.strict_usage,
        )
        if self.strict_usage:
            raise TranslationNotFoundError(
                f"language '{language}' does not contain key '{key}'",
                language=language,
                key=key,
            )

        raise TranslationNotFoundError(
            f"none of the languages contain key '{key}'", language=language, key=key
        )

    def _search_order(self, table: LanguageTable) -> Sequence[LanguageTable]:
        """Requested table first, then the others in registration order."""
        if self.strict_usage:
            return [table]

        return [table] + [other for other in self._tables if other is not table]
