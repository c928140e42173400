"""YAML translation decoder.

Turns the content of one YAML translation document into a flat list of
`TranslationEntry` records. Four value shapes are understood:

    greeting: "Hello"                  # default language, singular only

    greeting:                          # list of language maps
      - en: "Hello"
      - lv: "Sveiki"

    items:                             # singular / plural pair
      - en:
          - "%d item"
          - "%d items"

    title:                             # single element list, singular only
      - en:
          - "Title"

A key may also map straight to a language map (`greeting: {en: "Hello"}`).
Text keys are taken as written, so `yes:` or `404:` name the keys "yes" and
"404".
Anything else (numbers, booleans, nulls, lists nested in lists, empty or
over-long plural lists) is rejected with `TranslationDecodeError`.
"""

from typing import Any, Dict, List, Union

import yaml

from localization.errors import TranslationDecodeError
from localization.logging import get_module_logger
from localization.models import TranslationEntry

logger = get_module_logger(__name__)

MAX_PLURAL_ENTRIES = 2

STR_TAG = "tag:yaml.org,2002:str"
MERGE_TAG = "tag:yaml.org,2002:merge"


class TextKeyLoader(yaml.SafeLoader):
    """SafeLoader that reads top-level scalar keys as their source text.

    YAML 1.1 resolves `yes`, `off` or `404` to bool or int; as text keys they
    must stay the strings written in the file. Nested mappings are untouched.
    """

    def construct_document(self, node):
        if isinstance(node, yaml.MappingNode):
            for key_node, _ in node.value:
                if isinstance(key_node, yaml.ScalarNode) and key_node.tag != MERGE_TAG:
                    key_node.tag = STR_TAG
        return super().construct_document(node)


def decode_translations(
    content: Union[bytes, str], default_language: str
) -> List[TranslationEntry]:
    """Decode YAML content into translation entries.

    Args:
        content: Raw YAML document (bytes or text).
        default_language: Language for flat `key: "text"` values.

    Returns:
        Translation entries in document order. Empty when the document has
        no keys.

    Raises:
        TranslationDecodeError: If the YAML is malformed or contains an
            unsupported shape.
    """
    if content is None:
        raise TranslationDecodeError("unmarshal failure, content is None")

    try:
        data = yaml.load(content, Loader=TextKeyLoader)
    except yaml.YAMLError as e:
        raise TranslationDecodeError(f"failed to parse YAML: {e}") from e

    if data is None:
        return []

    if not isinstance(data, dict):
        raise TranslationDecodeError(
            f"top level must be a mapping of text keys, got {type(data).__name__}"
        )

    return _decode_document(data, default_language)


def _decode_document(
    data: Dict[str, Any], default_language: str
) -> List[TranslationEntry]:
    entries: List[TranslationEntry] = []

    for key, value in data.items():
        entries.extend(_decode_value(key, value, default_language))

    logger.debug(
        "decoded_translations",
        key_count=len(data),
        entry_count=len(entries),
    )
    return entries


def _decode_value(
    key: str, value: Any, default_language: str
) -> List[TranslationEntry]:
    match value:
        case str():
            return [TranslationEntry(key=key, language=default_language, value=value)]
        case list():
            entries: List[TranslationEntry] = []
            for element in value:
                if not isinstance(element, dict):
                    raise TranslationDecodeError(
                        f"{key}: unsupported type={_kind(element)} in language list"
                    )
                entries.extend(_decode_language_map(key, element))
            return entries
        case dict():
            return _decode_language_map(key, value)
        case _:
            raise TranslationDecodeError(f"{key}: unsupported type={_kind(value)}")


def _decode_language_map(key: str, value: Dict[Any, Any]) -> List[TranslationEntry]:
    entries: List[TranslationEntry] = []

    for language, text in value.items():
        if not isinstance(language, str):
            raise TranslationDecodeError(f"'{key}' > '{language}' must be string")

        match text:
            case str():
                entries.append(TranslationEntry(key=key, language=language, value=text))
            case list():
                entries.append(_decode_plural_pair(key, language, text))
            case _:
                raise TranslationDecodeError(
                    f"'{key}' > '{language}' value must be string or list"
                )

    return entries


def _decode_plural_pair(key: str, language: str, forms: List[Any]) -> TranslationEntry:
    if not forms:
        raise TranslationDecodeError(f"'{key}' > '{language}': plural list is empty")

    if len(forms) > MAX_PLURAL_ENTRIES:
        raise TranslationDecodeError(
            f"'{key}' > '{language}': contains more than {MAX_PLURAL_ENTRIES} plural entries"
        )

    for form in forms:
        if not isinstance(form, str):
            raise TranslationDecodeError(
                f"'{key}' > '{language}': plural entries must be strings, "
                f"got type={_kind(form)}"
            )

    plural = forms[1] if len(forms) == MAX_PLURAL_ENTRIES else ""
    return TranslationEntry(key=key, language=language, value=forms[0], plural=plural)


def _kind(value: Any) -> str:
    return "null" if value is None else type(value).__name__
