"""Translation models for the localization system.

Defines the flat records produced by the YAML decoder and consumed by
`LocaleRegistry` bulk loading.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass(frozen=True)
class TranslationEntry:
    """One translation unit extracted from a source file.

    Frozen so decoded entries can be compared and hashed in tests and
    never change after decoding.

    Attributes:
        key: Text key (e.g., "greeting", "items_count").
        language: Language keyword the text belongs to (e.g., "en", "lv").
        value: Singular (non-plural) text.
        plural: Plural text, empty when no plural form is defined.
    """

    key: str
    language: str
    value: str
    plural: str = ""


@dataclass
class TranslationFile:
    """Translations decoded from a single YAML file.

    Attributes:
        file_path: Path of the source file (used in error messages).
        entries: Decoded translation entries, in document order.
    """

    file_path: str
    entries: List[TranslationEntry] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.entries)
