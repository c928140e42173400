"""Feature-level fixtures for localization tests.

Provides translation files on disk, prebuilt registries and sample
Accept-Language headers.
"""

import pytest

from tests.factories.localization import make_registry


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML translation files.

    Returns a directory structure like:
    - common.yml           (flat values and language lists)
    - items.yml            (plural pairs)
    - nested/extra.yml     (picked up by recursive globs only)
    """
    (tmp_path / "common.yml").write_text(
        'title: "Localization"\n'
        "greeting:\n"
        '  - en: "Hello"\n'
        '  - lv: "Sveiki"\n'
        "farewell:\n"
        '  - en: "Goodbye, %s"\n',
        encoding="utf-8",
    )
    (tmp_path / "items.yml").write_text(
        "items:\n"
        "  - en:\n"
        '      - "%d item"\n'
        '      - "%d items"\n'
        "  - lv:\n"
        '      - "%d lieta"\n'
        '      - "%d lietas"\n',
        encoding="utf-8",
    )
    nested = tmp_path / "nested"
    nested.mkdir()
    (nested / "extra.yml").write_text(
        "extra:\n" '  - lv: "Papildus"\n',
        encoding="utf-8",
    )
    return tmp_path


@pytest.fixture
def invalid_translation_file(tmp_path):
    """YAML file with a plural list longer than two entries."""
    path = tmp_path / "invalid.yml"
    path.write_text(
        "items:\n" "  - en:\n" '      - "a"\n' '      - "b"\n' '      - "c"\n',
        encoding="utf-8",
    )
    return path


@pytest.fixture
def registry():
    """Registry with en/lv registered and sample entries, fallback enabled."""
    return make_registry()


@pytest.fixture
def strict_registry():
    """Registry with en/lv registered and sample entries, strict usage."""
    return make_registry(strict_usage=True)


@pytest.fixture
def accept_language_headers():
    """Collection of Accept-Language headers for testing."""
    return {
        "simple": "en-US,en;q=0.5",
        "weighted": "fr-CH, fr;q=0.9, en;q=0.8, de;q=0.7, *;q=0",
        "wildcard": "*",
        "wildcard_zero": "*;q=0",
        "invalid_quality": "en;q=0.9.1",
        "duplicate_weights": "lv;q=0.5, en;q=0.5",
    }
