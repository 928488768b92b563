from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Mapping

import pytest

FIXTURES_DIR = Path(__file__).with_name("fixtures")


class SourceTreeBuilder:
    """Writes source files into a throwaway project directory."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "project"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries, dedenting each body."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def path(self, relative: str = "") -> Path:
        return self.root / relative if relative else self.root


@pytest.fixture
def source_tree(tmp_path: Path) -> SourceTreeBuilder:
    """Provide a source tree builder rooted at the pytest tmp_path."""
    return SourceTreeBuilder(tmp_path)


@pytest.fixture
def parser_fixture_path() -> Path:
    """Absolute path of the annotated mock module used in end-to-end tests."""
    return (FIXTURES_DIR / "parser_fixture.js").resolve()
