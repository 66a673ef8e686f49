"""Services layer for translation catalog.

This module provides the lookup of translated text, either as a pure function
over a catalog or through a Translator owning the catalog of a host
application.
"""

from translation_catalog.services.lookup_engine import resolve, substitute
from translation_catalog.services.translator import Translator, fixed_language

__all__ = [
    "Translator",
    "fixed_language",
    "resolve",
    "substitute",
]
