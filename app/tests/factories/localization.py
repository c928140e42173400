"""Test data factories for localization testing.

Provides deterministic test data builders for:
- TranslationEntry
- LocaleRegistry (with preloaded translations)
- PriorityGroup / AcceptLanguages
"""

from typing import List, Optional, Sequence

from localization import (
    AcceptLanguages,
    LocaleRegistry,
    PriorityGroup,
    TranslationEntry,
)


def make_translation_entry(
    key: str = "greeting",
    language: str = "en",
    value: str = "Hello",
    plural: str = "",
) -> TranslationEntry:
    """Create a TranslationEntry instance.

    Args:
        key: Text key.
        language: Language keyword.
        value: Singular text.
        plural: Plural text.

    Returns:
        TranslationEntry instance.
    """
    return TranslationEntry(key=key, language=language, value=value, plural=plural)


def make_translation_entries() -> List[TranslationEntry]:
    """Create a small en/lv translation set with one plural key."""
    return [
        make_translation_entry("greeting", "en", "Hello"),
        make_translation_entry("greeting", "lv", "Sveiki"),
        make_translation_entry("farewell", "en", "Goodbye, %s"),
        make_translation_entry("items", "en", "%d item", "%d items"),
        make_translation_entry("items", "lv", "%d lieta", "%d lietas"),
    ]


def make_registry(
    languages: Sequence[str] = ("en", "lv"),
    strict_usage: bool = False,
    entries: Optional[List[TranslationEntry]] = None,
) -> LocaleRegistry:
    """Create a LocaleRegistry with languages registered and entries applied.

    Args:
        languages: Languages to register, in priority order.
        strict_usage: Registry strict usage flag.
        entries: Entries to add (default: make_translation_entries()).

    Returns:
        LocaleRegistry instance.
    """
    registry = LocaleRegistry(*languages, strict_usage=strict_usage)
    registry.add_translations(
        make_translation_entries() if entries is None else entries
    )
    return registry


def make_accept_languages(*groups: PriorityGroup) -> AcceptLanguages:
    """Create AcceptLanguages from groups (kept in the given order)."""
    return AcceptLanguages(groups=list(groups))


def make_priority_group(weight: float, *languages: str) -> PriorityGroup:
    """Create a PriorityGroup instance."""
    return PriorityGroup(weight=weight, languages=list(languages))
