"""Custom exceptions for the localization system.

Configuration, decode, lookup and formatting failures each get their own
type so callers can tell a missing translation apart from a broken file.
"""

from typing import Optional


class LocalizationError(Exception):
    """Base exception for all localization errors.

    Example:
        try:
            registry.value("en", "greeting")
        except LocalizationError as e:
            logger.error("localization_error", error=str(e))
    """

    pass


class LanguageAlreadyRegisteredError(LocalizationError):
    """Raised when a language keyword is registered twice.

    Example:
        >>> registry.register("en", "lv", "lv")
        Traceback (most recent call last):
        ...
        LanguageAlreadyRegisteredError: language 'lv' redefined in passed languages
    """

    pass


class LanguageNotFoundError(LocalizationError):
    """Raised when a language keyword is not registered."""

    def __init__(self, language: str):
        self.language = language
        super().__init__(f"language '{language}' does not exist")


class EmptyRegistryError(LocalizationError):
    """Raised when writing to a registry that has no languages."""

    pass


class TranslationDecodeError(LocalizationError):
    """Raised when YAML content cannot be turned into translation entries."""

    pass


class TranslationLoadError(LocalizationError):
    """Raised when a batch of translations or files fails to load.

    Attributes:
        index: Position of the failing entry in the batch, if known.
        file_path: Source file of the failing batch, if known.
    """

    def __init__(
        self,
        message: str,
        index: Optional[int] = None,
        file_path: Optional[str] = None,
    ):
        self.index = index
        self.file_path = file_path
        super().__init__(message)


class TranslationNotFoundError(LocalizationError):
    """Raised when a text key cannot be resolved.

    Attributes:
        language: Requested language keyword.
        key: Requested text key.
    """

    def __init__(self, message: str, language: str, key: str):
        self.language = language
        self.key = key
        super().__init__(message)


class DynamicNotIntError(LocalizationError):
    """Raised when the count argument for plural selection is not an int."""

    def __init__(self, message: str = "plural dynamic input must be int"):
        super().__init__(message)


class InterpolationError(LocalizationError):
    """Raised when a translation template cannot be formatted with given args."""

    pass
