"""Localization service for request handling code.

Provides a class-based interface over a `LocaleRegistry` so request
handlers and template engines can share one registry safely.
"""

import threading
from functools import partial
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from localization import formatting
from localization.accept_language import negotiate_language
from localization.logging import get_module_logger
from localization.models import TranslationEntry
from localization.registry import LocaleRegistry

logger = get_module_logger(__name__)


class LocalizationService:
    """Thread-safe facade over a LocaleRegistry.

    All registry access goes through one lock, so translations can be added
    while other threads look up text.

    Usage:
        service = LocalizationService(registry, default_language="en")

        language = service.resolve_language(request.headers.get("Accept-Language"))
        title = service.text(language, "title")
        items = service.text_plural_from_count(language, "items", 3)

    Attributes:
        default_language: Language used when negotiation finds no match.
    """

    def __init__(self, registry: LocaleRegistry, default_language: str):
        """Initialize localization service.

        Args:
            registry: Registry to serve lookups from.
            default_language: Fallback language for negotiation and `*`.
        """
        self._registry = registry
        self._lock = threading.Lock()
        self.default_language = default_language

    @property
    def registry(self) -> LocaleRegistry:
        """Access the underlying registry.

        Direct use bypasses the service lock.
        """
        return self._registry

    def enabled_languages(self) -> Optional[List[str]]:
        with self._lock:
            return self._registry.enabled_languages()

    def resolve_language(self, accept_language: Optional[str]) -> str:
        """Pick the best enabled language for an Accept-Language header.

        Args:
            accept_language: Raw header value, may be None.

        Returns:
            Enabled language matching the header, or `default_language`.
        """
        with self._lock:
            enabled = self._registry.enabled_languages()

        return negotiate_language(accept_language, enabled, self.default_language)

    def text(self, language: str, key: str) -> str:
        with self._lock:
            return formatting.text(self._registry, language, key)

    def text_plural(self, language: str, key: str, is_plural: bool) -> str:
        with self._lock:
            return formatting.text_plural(self._registry, language, key, is_plural)

    def textf(self, language: str, key: str, *args: Any) -> str:
        with self._lock:
            return formatting.textf(self._registry, language, key, *args)

    def text_pluralf(
        self, language: str, key: str, is_plural: bool, *args: Any
    ) -> str:
        with self._lock:
            return formatting.text_pluralf(
                self._registry, language, key, is_plural, *args
            )

    def text_plural_from_count(self, language: str, key: str, *args: Any) -> str:
        with self._lock:
            return formatting.text_plural_from_count(
                self._registry, language, key, *args
            )

    def add_translations(self, entries: Iterable[TranslationEntry]) -> None:
        """Apply translation entries, see `LocaleRegistry.add_translations`."""
        with self._lock:
            self._registry.add_translations(entries)

    def load_yaml_files(self, *paths: Union[str, Path]) -> None:
        """Load YAML files using `default_language` for flat values."""
        with self._lock:
            self._registry.load_yaml_files(self.default_language, *paths)

    def template_functions(self, language: str) -> Dict[str, Callable[..., str]]:
        """Lookup callables bound to a language, for template globals.

        Example:
            env.globals.update(service.template_functions("lv"))
            # {{ textf("greeting", user.name) }}
        """
        return {
            "text": partial(self.text, language),
            "text_plural": partial(self.text_plural, language),
            "textf": partial(self.textf, language),
            "text_pluralf": partial(self.text_pluralf, language),
            "text_plural_from_count": partial(self.text_plural_from_count, language),
        }
