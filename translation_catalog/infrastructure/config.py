"""Module for the Config class."""
import logging
import logging.config
from pathlib import Path
from typing import Any

import yaml

from translation_catalog.core.types import DEFAULT_LANGUAGE, TRANSLATION_FILE_SUFFIX
from translation_catalog.exceptions import (
    InvalidConfigError,
    UnsupportedConfigFormatError,
)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class Config:
    """A class to store the configuration."""

    def __init__(self) -> None:
        # Translations config
        self.translations_path = Path("translations")
        self.default_language = DEFAULT_LANGUAGE
        self.language: str | None = None
        self.file_suffix = TRANSLATION_FILE_SUFFIX
        # Logging config (logging.config.dictConfig schema)
        self.logging_config: dict[str, Any] | None = None

    @property
    def active_language(self) -> str:
        """Return the configured language, or the default one."""
        return self.language or self.default_language

    def __parse_yaml(self, yaml_path: Path) -> None:
        """Parse a YAML configuration file."""
        with open(yaml_path, encoding="utf-8") as file:
            try:
                config = yaml.safe_load(file)
            except yaml.YAMLError as e:
                raise InvalidConfigError(
                    f"Invalid YAML in {yaml_path}: {e}", path=yaml_path
                ) from e

        if config is None:
            return
        if not isinstance(config, dict):
            raise InvalidConfigError(
                f"Expected a mapping in {yaml_path}", path=yaml_path
            )

        if (translations_path := config.get("translations_path")) is not None:
            self.translations_path = Path(translations_path)
        if default_language := config.get("default_language"):
            self.default_language = str(default_language)
        if language := config.get("language"):
            self.language = str(language)
        if file_suffix := config.get("file_suffix"):
            self.file_suffix = str(file_suffix)
        if (logging_config := config.get("logging")) is not None:
            self.logging_config = logging_config

    def parse(self, config_path: Path) -> None:
        """Parse a configuration file."""
        if config_path.suffix in (".yaml", ".yml"):
            self.__parse_yaml(config_path)
        else:
            raise UnsupportedConfigFormatError(config_path)

    def setup_logging(self) -> None:
        """Configure logging from the config, or log to the user data directory."""
        if self.logging_config is None:
            log_dir = Path.home() / ".local" / "share" / "translation-catalog"
            log_dir.mkdir(parents=True, exist_ok=True)
            logging.basicConfig(
                filename=log_dir / "translation-catalog.log",
                level=logging.INFO,
                format=LOG_FORMAT,
            )
            return

        try:
            logging.config.dictConfig(self.logging_config)
        except (ValueError, TypeError, AttributeError, ImportError) as e:
            logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
            logging.getLogger(__name__).warning(
                "Invalid logging configuration, using defaults: %s", e
            )
