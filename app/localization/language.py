"""Per-language translation table."""

from typing import Dict, List, Tuple

from localization.errors import TranslationNotFoundError
from localization.logging import get_module_logger

logger = get_module_logger(__name__)


class LanguageTable:
    """Singular and plural translations for one language.

    Attributes:
        keyword: Language keyword (e.g., "en", "lv", "en-US"). Compared
            case-insensitively by the registry.
    """

    def __init__(self, keyword: str):
        self.keyword = keyword
        self._entries: Dict[str, Tuple[str, str]] = {}

    def __repr__(self) -> str:
        return f"LanguageTable(keyword={self.keyword!r}, keys={len(self._entries)})"

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def matches(self, keyword: str) -> bool:
        """Case-insensitive keyword comparison."""
        return self.keyword.casefold() == keyword.casefold()

    def has_key(self, key: str) -> bool:
        return key in self._entries

    def keys(self) -> List[str]:
        return list(self._entries)

    def set_value(self, key: str, value: str, plural: str = "") -> None:
        """Set singular and plural text for a key.

        Empty keys are ignored and the table is left unchanged.
        """
        if not key:
            logger.debug("ignored_empty_text_key", language=self.keyword)
            return

        self._entries[key] = (value, plural)

    def value(self, key: str) -> str:
        """Get singular text for a key.

        Raises:
            TranslationNotFoundError: If the key does not exist.
        """
        return self._get(key)[0]

    def value_plural(self, key: str) -> str:
        """Get plural text for a key.

        Raises:
            TranslationNotFoundError: If the key does not exist.
        """
        return self._get(key)[1]

    def _get(self, key: str) -> Tuple[str, str]:
        try:
            return self._entries[key]
        except KeyError:
            raise TranslationNotFoundError(
                f"key '{key}' does not exist", language=self.keyword, key=key
            ) from None
