"""Shared fixtures for translation catalog tests."""

from pathlib import Path

import pytest


@pytest.fixture
def translations_dir(tmp_path: Path) -> Path:
    """Create a translations directory with English and Chinese files."""
    directory = tmp_path / "translations"
    directory.mkdir()
    (directory / "EN.txt").write_text(
        "hello=Hi {name}!,\n"
        "farewell = Goodbye\n"
        'quoted="Say "cheese"",\n'
        "multiline=First line<br>Second line\n"
        "only_in_english=English only\n",
        encoding="utf-8",
    )
    (directory / "ZH.txt").write_text(
        "hello=你好{name}！\nfarewell=再见\n",
        encoding="utf-8",
    )
    return directory
