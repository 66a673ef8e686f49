"""Custom exception hierarchy for translation catalog."""

from pathlib import Path


class TranslationCatalogError(Exception):
    """Base exception for all translation catalog errors."""


class UnsupportedConfigFormatError(TranslationCatalogError, ValueError):
    """The configuration file has an extension no parser handles."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"Unsupported file format: '{path.suffix}'")
        self.path = path


class InvalidConfigError(TranslationCatalogError):
    """The configuration file was parsed but its content is unusable."""

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
