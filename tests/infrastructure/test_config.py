"""Tests for the Config class."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from translation_catalog.exceptions import (
    InvalidConfigError,
    UnsupportedConfigFormatError,
)
from translation_catalog.infrastructure.config import Config


@pytest.fixture
def full_config_yaml(tmp_path: Path) -> Path:
    """Create a YAML config file with all fields."""
    config = {
        "translations_path": str(tmp_path / "translations"),
        "default_language": "FR",
        "language": "ZH",
        "file_suffix": ".lang",
        "logging": {
            "version": 1,
            "disable_existing_loggers": False,
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": "DEBUG",
                }
            },
            "root": {"level": "DEBUG", "handlers": ["console"]},
        },
    }
    config_path = tmp_path / "config.yaml"
    config_path.write_text(yaml.dump(config), encoding="utf-8")
    return config_path


class TestConfigDefaults:
    """Tests for Config default values."""

    def test_default_translations_path(self) -> None:
        """Test that translations are read from ./translations by default."""
        assert Config().translations_path == Path("translations")

    def test_default_languages(self) -> None:
        """Test that English is the default and active language."""
        config = Config()
        assert config.default_language == "EN"
        assert config.language is None
        assert config.active_language == "EN"

    def test_default_suffix_and_logging(self) -> None:
        """Test the default file suffix and logging config."""
        config = Config()
        assert config.file_suffix == ".txt"
        assert config.logging_config is None


class TestConfigParseYaml:
    """Tests for YAML config file parsing."""

    def test_parse_full_config(self, full_config_yaml: Path, tmp_path: Path) -> None:
        """Test parsing a config with all fields set."""
        config = Config()
        config.parse(full_config_yaml)

        assert config.translations_path == tmp_path / "translations"
        assert config.default_language == "FR"
        assert config.language == "ZH"
        assert config.active_language == "ZH"
        assert config.file_suffix == ".lang"
        assert config.logging_config is not None
        assert config.logging_config["version"] == 1

    def test_parse_partial_config_keeps_defaults(self, tmp_path: Path) -> None:
        """Test that missing fields keep their defaults."""
        config_path = tmp_path / "config.yml"
        config_path.write_text(yaml.dump({"language": "ZH"}), encoding="utf-8")

        config = Config()
        config.parse(config_path)

        assert config.language == "ZH"
        assert config.translations_path == Path("translations")
        assert config.default_language == "EN"

    def test_parse_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty YAML file keeps every default."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("", encoding="utf-8")

        config = Config()
        config.parse(config_path)

        assert config.active_language == "EN"

    def test_parse_non_mapping_raises(self, tmp_path: Path) -> None:
        """Test that a YAML list is rejected."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError, match="Expected a mapping"):
            Config().parse(config_path)

    def test_parse_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Test that malformed YAML is reported as InvalidConfigError."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("key: [unclosed\n", encoding="utf-8")

        with pytest.raises(InvalidConfigError, match="Invalid YAML"):
            Config().parse(config_path)

    def test_parse_unsupported_format_raises(self, tmp_path: Path) -> None:
        """Test that parsing a non-YAML file raises ValueError."""
        config_path = tmp_path / "config.json"
        config_path.write_text("{}")

        config = Config()
        with pytest.raises(ValueError, match="Unsupported file format: '.json'"):
            config.parse(config_path)

    def test_parse_unsupported_format_error_type(self, tmp_path: Path) -> None:
        """Test that the format error is a TranslationCatalogError."""
        with pytest.raises(UnsupportedConfigFormatError):
            Config().parse(tmp_path / "config.toml")


class TestConfigSetupLogging:
    """Tests for the setup_logging method."""

    def test_setup_logging_default(self, tmp_path: Path) -> None:
        """Test that default logging writes to a file in .local/share."""
        config = Config()

        with patch(
            "translation_catalog.infrastructure.config.Path.home"
        ) as mock_home:
            mock_home.return_value = tmp_path
            config.setup_logging()

        log_dir = tmp_path / ".local" / "share" / "translation-catalog"
        assert log_dir.exists()

    def test_setup_logging_with_valid_dictconfig(self, full_config_yaml: Path) -> None:
        """Test that valid logging dictConfig is applied."""
        config = Config()
        config.parse(full_config_yaml)
        # Should not raise
        config.setup_logging()

    def test_setup_logging_with_invalid_dictconfig(self) -> None:
        """Test that invalid logging config falls back to basic config."""
        config = Config()
        config.logging_config = {"invalid": "config"}

        # Should not raise, falls back to basicConfig
        config.setup_logging()

        assert logging.getLogger().level is not None
