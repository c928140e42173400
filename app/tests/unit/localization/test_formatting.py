"""Tests for localization.formatting module."""

import pytest

from localization import (
    DynamicNotIntError,
    InterpolationError,
    LanguageNotFoundError,
    TranslationNotFoundError,
    text,
    text_plural,
    text_plural_from_count,
    text_pluralf,
    textf,
)
from localization.formatting import is_count_plural
from tests.factories.localization import make_registry, make_translation_entry


class TestText:
    """Tests for text() and text_plural()."""

    def test_text(self, registry):
        assert text(registry, "lv", "greeting") == "Sveiki"

    def test_text_missing_key(self, strict_registry):
        with pytest.raises(TranslationNotFoundError):
            text(strict_registry, "lv", "farewell")

    def test_text_unknown_language(self, registry):
        with pytest.raises(LanguageNotFoundError):
            text(registry, "ru", "greeting")

    def test_text_plural_singular(self, registry):
        assert text_plural(registry, "en", "items", False) == "%d item"

    def test_text_plural_plural(self, registry):
        assert text_plural(registry, "en", "items", True) == "%d items"


class TestTextf:
    """Tests for textf() and text_pluralf()."""

    def test_textf(self, registry):
        assert textf(registry, "en", "farewell", "John") == "Goodbye, John"

    def test_textf_falls_back(self, registry):
        """Interpolation applies to fallback text too."""
        assert textf(registry, "lv", "farewell", "Janis") == "Goodbye, Janis"

    def test_textf_without_args_returns_template(self, registry):
        assert textf(registry, "en", "farewell") == "Goodbye, %s"

    def test_textf_arg_mismatch(self, registry):
        """Too many arguments for the template raise InterpolationError."""
        with pytest.raises(InterpolationError, match="farewell"):
            textf(registry, "en", "farewell", "John", "Jane")

    def test_textf_wrong_type(self, registry):
        with pytest.raises(InterpolationError):
            text_pluralf(registry, "en", "items", False, "one")

    def test_text_pluralf(self, registry):
        assert text_pluralf(registry, "lv", "items", True, 5) == "5 lietas"
        assert text_pluralf(registry, "lv", "items", False, 1) == "1 lieta"


class TestTextPluralFromCount:
    """Tests for text_plural_from_count()."""

    @pytest.fixture
    def registry(self):
        return make_registry(
            ("en",),
            entries=[make_translation_entry("items", "en", "%d item %s", "%d items %s")],
        )

    def test_one_selects_singular(self, registry):
        assert text_plural_from_count(registry, "en", "items", 1, ":)") == "1 item :)"

    def test_two_selects_plural(self, registry):
        assert text_plural_from_count(registry, "en", "items", 2, ":)") == "2 items :)"

    @pytest.mark.parametrize("count", [0, -3])
    def test_zero_and_negative_select_singular(self, registry, count):
        assert text_plural_from_count(registry, "en", "items", count, "!") == (
            f"{count} item !"
        )

    def test_no_args(self, registry):
        with pytest.raises(DynamicNotIntError, match="plural dynamic input must be int"):
            text_plural_from_count(registry, "en", "items")

    @pytest.mark.parametrize("count", ["2", 2.0, True, None])
    def test_non_int_first_arg(self, registry, count):
        with pytest.raises(DynamicNotIntError):
            text_plural_from_count(registry, "en", "items", count, ":)")


class TestIsCountPlural:
    """Tests for is_count_plural()."""

    @pytest.mark.parametrize(
        "args,expected",
        [((1,), False), ((2,), True), ((0,), False), ((100, "x"), True)],
    )
    def test_plural_selection(self, args, expected):
        assert is_count_plural(args) is expected

    def test_empty(self):
        with pytest.raises(DynamicNotIntError):
            is_count_plural(())
