"""Loader building a translation catalog from a directory of text files.

Each ``<LANGUAGE>.txt`` file holds one ``key=value`` pair per line. A trailing
comma and any double quote in the value are cosmetic and stripped. Loading
never raises: unreadable directories produce an empty catalog and unreadable
files keep whatever entries were read before the failure.
"""

import logging
from pathlib import Path

from translation_catalog.core.types import (
    TRANSLATION_FILE_SUFFIX,
    Catalog,
    FileParseResult,
    LanguageCode,
    TranslationKey,
    TranslationSet,
)

logger = logging.getLogger(__name__)

# Whitespace and control characters up to U+0020, trimmed around keys and values
TRIM_CHARACTERS = "".join(chr(code) for code in range(0x21))


def parse_line(line: str) -> tuple[TranslationKey, str] | None:
    """Parse a ``key=value`` line.

    Args:
        line: Raw line read from a translation file.

    Returns:
        The (key, value) pair, or None if the line carries no entry.
    """
    if not line.strip(TRIM_CHARACTERS) or "=" not in line:
        return None

    key, value = line.split("=", 1)
    key = key.strip(TRIM_CHARACTERS)
    value = value.strip(TRIM_CHARACTERS)
    if value.endswith(","):
        value = value[:-1]
    return key, value.replace('"', "")


def language_code(path: Path, suffix: str = TRANSLATION_FILE_SUFFIX) -> LanguageCode:
    """Return the language code of a translation file (``EN.txt`` -> ``EN``)."""
    name = path.name
    return name[: -len(suffix)] if suffix and name.endswith(suffix) else name


def parse_translation_file(
    path: Path, suffix: str = TRANSLATION_FILE_SUFFIX
) -> FileParseResult:
    """Parse a translation file into a translation set.

    Later duplicate keys overwrite earlier ones. Invalid UTF-8 bytes are
    replaced by U+FFFD. A read failure stops the parse but keeps the entries
    read so far.

    Args:
        path: Path to the translation file.
        suffix: Extension stripped from the file name to get the language.

    Returns:
        The parsed entries with any diagnostics.
    """
    entries: TranslationSet = {}
    diagnostics: list[str] = []
    try:
        with open(path, encoding="utf-8-sig", errors="replace") as file:
            for line in file:
                if (entry := parse_line(line)) is not None:
                    key, value = entry
                    entries[key] = value
    except OSError as e:
        diagnostics.append(f"Failed to load translation file {path.name}: {e}")

    return FileParseResult(
        language=language_code(path, suffix),
        entries=entries,
        diagnostics=tuple(diagnostics),
    )


def _find_translation_files(directory: Path, suffix: str) -> list[Path]:
    """List the translation files of a directory, sorted by name."""
    return sorted(
        path
        for path in directory.iterdir()
        if path.name.endswith(suffix) and path.is_file()
    )


def load_catalog(
    directory: Path, suffix: str = TRANSLATION_FILE_SUFFIX
) -> Catalog:
    """Load every translation file of a directory.

    Args:
        directory: Directory holding the ``<LANGUAGE><suffix>`` files.
        suffix: Extension of the translation files.

    Returns:
        A new catalog mapping each language code to its translations. The
        catalog is empty when the directory cannot be read.
    """
    catalog: dict[LanguageCode, TranslationSet] = {}
    try:
        paths = _find_translation_files(directory, suffix)
    except OSError as e:
        logger.warning("Failed to load translations from %s: %s", directory, e)
        return catalog

    if not paths:
        logger.info("No translation files found in %s", directory)
        return catalog

    for path in paths:
        result = parse_translation_file(path, suffix)
        for diagnostic in result.diagnostics:
            logger.warning(diagnostic)
        logger.debug(
            "Loaded %d translations for language %s from %s",
            len(result.entries),
            result.language,
            path.name,
        )
        catalog[result.language] = result.entries

    logger.info(
        "Loaded %d languages from %s: %s",
        len(catalog),
        directory,
        ", ".join(sorted(catalog)),
    )
    return catalog
