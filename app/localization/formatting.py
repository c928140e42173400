"""Formatting helpers for template rendering.

Combine registry lookups with printf-style interpolation and a binary
singular/plural choice.

Example:
    # items:
    #   - en:
    #       - "%d item %s"
    #       - "%d items %s"
    text_plural_from_count(registry, "en", "items", 1, ":)")  # "1 item :)"
    text_plural_from_count(registry, "en", "items", 2, ":)")  # "2 items :)"
"""

from typing import Any, Sequence

from localization.errors import DynamicNotIntError, InterpolationError
from localization.logging import get_module_logger
from localization.registry import LocaleRegistry

logger = get_module_logger(__name__)


def text(registry: LocaleRegistry, language: str, key: str) -> str:
    """Get singular text for a key."""
    return registry.value(language, key)


def text_plural(
    registry: LocaleRegistry, language: str, key: str, is_plural: bool
) -> str:
    """Get plural text if `is_plural`, singular text otherwise."""
    if is_plural:
        return registry.value_plural(language, key)

    return registry.value(language, key)


def textf(registry: LocaleRegistry, language: str, key: str, *args: Any) -> str:
    """Get singular text and interpolate positional arguments.

    Example:
        # greeting: "Hello, %s"
        textf(registry, "en", "greeting", "John")  # "Hello, John"
    """
    return _interpolate(key, registry.value(language, key), args)


def text_pluralf(
    registry: LocaleRegistry,
    language: str,
    key: str,
    is_plural: bool,
    *args: Any,
) -> str:
    """Get plural or singular text and interpolate positional arguments."""
    return _interpolate(key, text_plural(registry, language, key, is_plural), args)


def text_plural_from_count(
    registry: LocaleRegistry, language: str, key: str, *args: Any
) -> str:
    """Choose plural text from the first argument and interpolate all arguments.

    The plural form is used when the first argument is greater than 1.

    Raises:
        DynamicNotIntError: If no argument is given or the first one is not
            an int.
    """
    is_plural = is_count_plural(args)
    return _interpolate(key, text_plural(registry, language, key, is_plural), args)


def is_count_plural(args: Sequence[Any]) -> bool:
    """Check whether the first argument selects the plural form.

    Raises:
        DynamicNotIntError: If `args` is empty or `args[0]` is not an int.
    """
    if not args:
        raise DynamicNotIntError()

    count = args[0]
    # bool is an int subclass but not a count
    if isinstance(count, bool) or not isinstance(count, int):
        raise DynamicNotIntError()

    return count > 1


def _interpolate(key: str, template: str, args: Sequence[Any]) -> str:
    if not args:
        return template

    try:
        return template % tuple(args)
    except (TypeError, ValueError) as e:
        logger.error(
            "interpolation_failed",
            key=key,
            template=template,
            arg_count=len(args),
            error=str(e),
        )
        raise InterpolationError(f"failed to format key '{key}': {e}") from e
