"""Test data factories for deterministic test data generation."""

from tests.factories.localization import (
    make_accept_languages,
    make_priority_group,
    make_registry,
    make_translation_entries,
    make_translation_entry,
)

__all__ = [
    "make_accept_languages",
    "make_priority_group",
    "make_registry",
    "make_translation_entries",
    "make_translation_entry",
]
