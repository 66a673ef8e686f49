"""Localized text lookup backed by ``<LANGUAGE>.txt`` translation files."""
