"""Resolution of translation keys against a catalog."""

import logging

from translation_catalog.core.types import (
    DEFAULT_LANGUAGE,
    LINE_BREAK_MARKER,
    MISSING_KEY_SENTINEL,
    Catalog,
    LanguageCode,
    TranslationKey,
    Variables,
)

logger = logging.getLogger(__name__)


def substitute(text: str, variables: Variables | None = None) -> str:
    """Fill the placeholders of a translated text.

    Every ``{name}`` is replaced by the matching variable, converted with
    ``str``. This is a plain text replacement: placeholders without a variable
    are left as they are. ``<br>`` markers then become newlines.

    Args:
        text: Translated text.
        variables: Placeholder values.

    Returns:
        The display-ready text.
    """
    if variables:
        for name, value in variables.items():
            text = text.replace(f"{{{name}}}", str(value))
    return text.replace(LINE_BREAK_MARKER, "\n")


def resolve(
    catalog: Catalog,
    key: TranslationKey | None,
    active_language: LanguageCode,
    variables: Variables | None = None,
    *,
    default_language: LanguageCode = DEFAULT_LANGUAGE,
) -> str:
    """Return the display text of a key in the active language.

    Falls back to the default language when the active language is not loaded
    or lacks the key, then to the key itself. Never raises.

    Args:
        catalog: Loaded translations.
        key: Translation key, None yields the ``"???"`` sentinel.
        active_language: Language the user is currently using.
        variables: Placeholder values.
        default_language: Language used as fallback.

    Returns:
        The translated text, or the key when no translation exists.
    """
    if key is None:
        logger.warning("The translation key value was not obtained")
        return MISSING_KEY_SENTINEL

    translations = catalog.get(active_language)
    if translations is None:
        logger.warning("No translations for language code: %s", active_language)
        translations = catalog.get(default_language)
        if translations is None:
            return key
    elif key not in translations and active_language != default_language:
        logger.warning(
            "No translation for key: %s for language: %s", key, active_language
        )
        if (default_translations := catalog.get(default_language)) is not None:
            active_language, translations = default_language, default_translations

    text = translations.get(key)
    if text is None:
        logger.warning(
            "No translation for key: %s for language: %s", key, active_language
        )
        return key

    return substitute(text, variables)
