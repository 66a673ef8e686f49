"""Command line interface for the translation catalog."""
import argparse
import sys
from pathlib import Path

from translation_catalog.exceptions import TranslationCatalogError
from translation_catalog.infrastructure.config import Config
from translation_catalog.services.translator import Translator, fixed_language


def parse_variable(argument: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` command line variable."""
    name, separator, value = argument.partition("=")
    if not separator or not name:
        raise argparse.ArgumentTypeError(
            f"Invalid variable '{argument}', expected NAME=VALUE"
        )
    return name, value


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.
    """
    parser = argparse.ArgumentParser(description="Translation catalog")
    parser.add_argument(
        "-c",
        "--config",
        help="YAML configuration file",
        type=Path,
    )
    parser.add_argument(
        "-d",
        "--directory",
        help="Directory holding the translation files (overrides the config)",
        type=Path,
    )
    sub_parser = parser.add_subparsers(dest="command")

    sub_parser.add_parser("languages", help="List the loaded languages")

    lookup_parser = sub_parser.add_parser("lookup", help="Translate a key")
    lookup_parser.add_argument("key", help="Translation key")
    lookup_parser.add_argument(
        "-l",
        "--language",
        help="Language to translate to (default: configured language)",
    )
    lookup_parser.add_argument(
        "-v",
        "--var",
        help="Placeholder value, as NAME=VALUE",
        type=parse_variable,
        action="append",
        default=[],
        dest="variables",
    )

    keys_parser = sub_parser.add_parser("keys", help="List the keys of a language")
    keys_parser.add_argument(
        "language",
        help="Language code (default: default language)",
        nargs="?",
    )
    return parser


def load_config(config_path: Path | None) -> Config:
    """Load the configuration, keeping defaults when no file is given."""
    config = Config()
    if config_path is not None:
        config.parse(config_path)
    return config


def handle_languages_command(translator: Translator) -> None:
    """Handle the languages command."""
    if not translator.languages:
        print(f"No translations found in {translator.translations_path}")
        return
    for language in translator.languages:
        print(f"{language}: {len(translator.catalog[language])} keys")


def handle_lookup_command(
    translator: Translator, key: str, variables: list[tuple[str, str]]
) -> None:
    """Handle the lookup command."""
    print(translator.translate(key, dict(variables)))


def handle_keys_command(translator: Translator, language: str | None) -> int:
    """Handle the keys command."""
    language = language or translator.default_language
    if (translations := translator.catalog.get(language)) is None:
        print(f"No translations for language code: {language}", file=sys.stderr)
        return 1
    for key in sorted(translations):
        print(key)
    return 0


def main(argv: list[str] | None = None) -> None:
    """
    Command Line Interface for the translation catalog.
    Several commands are available:
    - languages: List the loaded languages
    - lookup: Translate a key
    - keys: List the keys of a language
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        config = load_config(args.config)
    except (OSError, TranslationCatalogError) as e:
        print(f"Failed to load configuration: {e}", file=sys.stderr)
        sys.exit(1)
    if args.config is not None:
        config.setup_logging()

    language = getattr(args, "language", None) or config.active_language
    translator = Translator(
        args.directory or config.translations_path,
        fixed_language(language),
        default_language=config.default_language,
        suffix=config.file_suffix,
    )

    match args.command:
        case "languages":
            translator.load()
            handle_languages_command(translator)

        case "lookup":
            translator.load()
            handle_lookup_command(translator, args.key, args.variables)

        case "keys":
            translator.load()
            sys.exit(handle_keys_command(translator, args.language))

        case _:
            parser.print_help()
            sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
