"""Module containing custom types for the translation_catalog package."""
from typing import Any, Callable, Mapping, NamedTuple

LanguageCode = str
"""Identifier of a language, derived from a translation file name (e.g. "EN")."""

TranslationKey = str
"""Stable identifier used by application code to request a piece of text."""

TranslationSet = dict[TranslationKey, str]
"""Key to text mapping for one language."""

Catalog = Mapping[LanguageCode, TranslationSet]
"""All loaded translations, keyed by language code."""

Variables = Mapping[str, Any]
"""Placeholder name to substitution value, supplied by the caller."""

LanguageProvider = Callable[[], LanguageCode]
"""Zero-argument callable returning the active language code."""

DEFAULT_LANGUAGE: LanguageCode = "EN"
"""Language used when the active language has no translations."""

MISSING_KEY_SENTINEL = "???"
"""Text returned when no translation key was given."""

TRANSLATION_FILE_SUFFIX = ".txt"
"""Extension of translation source files."""

LINE_BREAK_MARKER = "<br>"
"""Marker replaced by a newline in translated text."""


class FileParseResult(NamedTuple):
    """Outcome of parsing a single translation file."""

    language: LanguageCode
    entries: TranslationSet
    diagnostics: tuple[str, ...] = ()
    """Human-readable problems met while reading the file."""

    @property
    def complete(self) -> bool:
        """Return True if the file was read to the end."""
        return not self.diagnostics
