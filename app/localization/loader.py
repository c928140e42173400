"""Translation file loading.

Reads YAML translation files from disk and decodes them into
`TranslationFile` objects ready for `LocaleRegistry.add_translation_files`.
"""

import glob
from pathlib import Path
from typing import List, Union

from localization.decoder import decode_translations
from localization.errors import TranslationDecodeError, TranslationLoadError
from localization.logging import get_module_logger
from localization.models import TranslationFile

logger = get_module_logger(__name__)


def read_translation_file(
    path: Union[str, Path], default_language: str
) -> TranslationFile:
    """Read and decode a single YAML translation file.

    Args:
        path: YAML file path.
        default_language: Language for flat `key: "text"` values.

    Returns:
        TranslationFile with decoded entries.

    Raises:
        TranslationLoadError: If the file cannot be read or decoded.
    """
    file_path = str(path)

    try:
        content = Path(path).read_bytes()
    except OSError as e:
        logger.error("translation_file_read_error", file=file_path, error=str(e))
        raise TranslationLoadError(
            f"failed to open path '{file_path}': {e}", file_path=file_path
        ) from e

    try:
        entries = decode_translations(content, default_language)
    except TranslationDecodeError as e:
        logger.error("translation_file_decode_error", file=file_path, error=str(e))
        raise TranslationLoadError(f"{file_path}: {e}", file_path=file_path) from e

    logger.info(
        "loaded_translation_file",
        file=file_path,
        entry_count=len(entries),
    )
    return TranslationFile(file_path=file_path, entries=entries)


def read_translation_files(
    default_language: str, *paths: Union[str, Path]
) -> List[TranslationFile]:
    """Read and decode YAML translation files, stopping at the first failure.

    Raises:
        TranslationLoadError: If any file cannot be read or decoded.
    """
    return [read_translation_file(path, default_language) for path in paths]


def find_translation_files(pattern: str) -> List[Path]:
    """Find files matching a glob pattern, sorted for a stable load order.

    `**` matches any number of directories.
    """
    return [
        Path(match)
        for match in sorted(glob.glob(pattern, recursive=True))
        if Path(match).is_file()
    ]
