"""Helper utilities for constructing temporary projects in tests."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Iterable, Mapping

from skillhooks.analyzers import ProjectAnalyzer
from skillhooks.models import ProjectAnalysis


class RepoBuilder:
    """Utility for writing files into a throwaway project and re-analyzing it."""

    def __init__(self, tmp_path: Path) -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries into the project."""
        for relative, content in files.items():
            path = self.root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def mkdirs(self, names: Iterable[str]) -> None:
        for name in names:
            (self.root / name).mkdir(parents=True, exist_ok=True)

    def analyze(self) -> ProjectAnalysis:
        """Return a fresh analysis of the project contents."""
        return ProjectAnalyzer().analyze(self.root)

    def path(self) -> Path:
        """Return the project root path."""
        return self.root


__all__ = ["RepoBuilder"]
