"""Detect developer tool commands from an area's pyproject.toml."""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Set

from ..logging import get_logger
from ..models import AreaTag, CommandEntry
from .areas import area_directory

_logger = get_logger("tracker.commands")

MANIFEST = "pyproject.toml"
WEB_ENTRY_POINTS = ("main.py", "app/main.py")
WEB_FRAMEWORK_MARKERS = ("fastapi", "uvicorn")
WEB_IMPORT_MARKER = "from fastapi"


def _read_text(path: Path) -> Optional[str]:
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError:
        return None


def _imports_web_framework(directory: Path) -> bool:
    try:
        sources = sorted(directory.glob("*.py"))
    except OSError:
        return False
    for source in sources:
        text = _read_text(source)
        if text and WEB_IMPORT_MARKER in text:
            return True
    return False


def detect_commands(area: AreaTag, project_root: Path) -> List[CommandEntry]:
    """Return the sorted, de-duplicated commands for tools configured in ``area``."""
    if area is AreaTag.UNKNOWN:
        return []
    directory = area_directory(area, project_root)
    name = area.value
    manifest = _read_text(directory / MANIFEST)
    commands: Set[CommandEntry] = set()

    def _add(tool: str, command: str) -> None:
        commands.add(CommandEntry(area=name, tool=tool, command=command))

    if manifest is not None:
        has_ruff = "ruff" in manifest
        if has_ruff:
            _add("ruff-format", f"cd {directory} && uv run ruff format .")
            _add("ruff-check", f"cd {directory} && uv run ruff check . --fix")

        if "pytest" in manifest:
            if area is AreaTag.BACKEND and (project_root / MANIFEST).is_file():
                _add(
                    "pytest",
                    f'cd {project_root} && PYTHONPATH="$PWD/backend" uv run python -m pytest',
                )
            else:
                _add("pytest", f"cd {directory} && uv run pytest")

        if "mypy" in manifest:
            _add("mypy", f"cd {directory} && uv run mypy .")

        if "black" in manifest and not has_ruff:
            _add("black", f"cd {directory} && uv run black .")

        if "[build-system]" in manifest:
            _add("build", f"cd {directory} && uv run python -m build")

    if any((directory / entry).is_file() for entry in WEB_ENTRY_POINTS):
        uses_framework = manifest is not None and any(
            marker in manifest for marker in WEB_FRAMEWORK_MARKERS
        )
        if uses_framework or _imports_web_framework(directory):
            _add("dev-server", f"cd {directory} && uv run uvicorn main:app --reload")

    _logger.debug("Detected %d commands for area %s", len(commands), name)
    return sorted(commands, key=CommandEntry.to_line)


__all__ = ["detect_commands"]
