"""Service giving a host application access to its translations."""

import logging
from pathlib import Path

from translation_catalog.core.types import (
    DEFAULT_LANGUAGE,
    TRANSLATION_FILE_SUFFIX,
    Catalog,
    LanguageCode,
    LanguageProvider,
    TranslationKey,
    Variables,
)
from translation_catalog.infrastructure.catalog_loader import load_catalog
from translation_catalog.services.lookup_engine import resolve

logger = logging.getLogger(__name__)


def fixed_language(language: LanguageCode) -> LanguageProvider:
    """Return a language provider always answering the same language."""

    def provider() -> LanguageCode:
        return language

    return provider


class Translator:
    """Owns the catalog of a host application and translates keys.

    The catalog is loaded explicitly with :meth:`load`. Each load builds a
    new catalog and replaces the previous one in a single assignment, so a
    lookup always sees either the old or the new catalog, never a mix.
    """

    def __init__(
        self,
        translations_path: Path,
        language_provider: LanguageProvider,
        *,
        default_language: LanguageCode = DEFAULT_LANGUAGE,
        suffix: str = TRANSLATION_FILE_SUFFIX,
    ) -> None:
        """Initialize the translator.

        Args:
            translations_path: Directory holding the translation files.
            language_provider: Callable returning the active language code.
            default_language: Language used when a translation is missing.
            suffix: Extension of the translation files.
        """
        logger.debug("Initializing translator for %s", translations_path)
        self._translations_path = translations_path
        self._language_provider = language_provider
        self._default_language = default_language
        self._suffix = suffix
        self._catalog: Catalog = {}

    @property
    def translations_path(self) -> Path:
        """Return the directory holding the translation files."""
        return self._translations_path

    @property
    def default_language(self) -> LanguageCode:
        """Return the fallback language."""
        return self._default_language

    @property
    def catalog(self) -> Catalog:
        """Return the current catalog."""
        return self._catalog

    @property
    def languages(self) -> tuple[LanguageCode, ...]:
        """Return the loaded language codes, sorted."""
        return tuple(sorted(self._catalog))

    @property
    def active_language(self) -> LanguageCode:
        """Return the language currently selected by the host."""
        return self._language_provider()

    def load(self) -> Catalog:
        """Load the translation files, replacing the current catalog.

        Returns:
            The newly loaded catalog.
        """
        catalog = load_catalog(self._translations_path, self._suffix)
        self._catalog = catalog
        return catalog

    reload = load

    def translate(
        self, key: TranslationKey | None, variables: Variables | None = None
    ) -> str:
        """Translate a key in the active language.

        Args:
            key: Translation key.
            variables: Values of the ``{name}`` placeholders.

        Returns:
            The translated text, the key itself when no translation exists or
            ``"???"`` when no key was given.
        """
        return resolve(
            self._catalog,
            key,
            self.active_language,
            variables,
            default_language=self._default_language,
        )

    __call__ = translate

    def has_translation(
        self, key: TranslationKey, language: LanguageCode | None = None
    ) -> bool:
        """Check if a key is translated in a language, without fallback.

        Args:
            key: Translation key.
            language: Language to check (default: the active language).
        """
        translations = self._catalog.get(language or self.active_language, {})
        return key in translations
