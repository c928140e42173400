"""localization - YAML-backed translations with Accept-Language negotiation.

Main components:
- models: TranslationEntry, TranslationFile
- decoder: decode_translations for YAML translation documents
- loader: reading translation files from disk
- language / registry: LanguageTable and LocaleRegistry with fallback lookups
- accept_language: parse_accept_language, AcceptLanguages, negotiate_language
- formatting: text, text_plural, textf, text_pluralf, text_plural_from_count
- service / factory: LocalizationService and settings-driven construction
"""

from localization.accept_language import (
    AcceptLanguages,
    PriorityGroup,
    negotiate_language,
    parse_accept_language,
)
from localization.decoder import decode_translations
from localization.errors import (
    DynamicNotIntError,
    EmptyRegistryError,
    InterpolationError,
    LanguageAlreadyRegisteredError,
    LanguageNotFoundError,
    LocalizationError,
    TranslationDecodeError,
    TranslationLoadError,
    TranslationNotFoundError,
)
from localization.factory import create_registry, create_service
from localization.formatting import (
    text,
    text_plural,
    text_plural_from_count,
    text_pluralf,
    textf,
)
from localization.language import LanguageTable
from localization.loader import read_translation_file, read_translation_files
from localization.logging import configure_logging
from localization.models import TranslationEntry, TranslationFile
from localization.registry import LocaleRegistry
from localization.service import LocalizationService

__all__ = [
    "AcceptLanguages",
    "PriorityGroup",
    "parse_accept_language",
    "negotiate_language",
    "decode_translations",
    "read_translation_file",
    "read_translation_files",
    "TranslationEntry",
    "TranslationFile",
    "LanguageTable",
    "LocaleRegistry",
    "LocalizationService",
    "create_registry",
    "create_service",
    "configure_logging",
    "text",
    "text_plural",
    "textf",
    "text_pluralf",
    "text_plural_from_count",
    "LocalizationError",
    "LanguageAlreadyRegisteredError",
    "LanguageNotFoundError",
    "EmptyRegistryError",
    "TranslationDecodeError",
    "TranslationLoadError",
    "TranslationNotFoundError",
    "DynamicNotIntError",
    "InterpolationError",
]
