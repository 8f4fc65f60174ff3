"""Best-effort readers for project metadata files.

Each reader returns a :class:`ReadResult`. A missing or malformed file yields
an empty value together with the failure cause; nothing is raised.
"""

from __future__ import annotations

import json
import re
from pathlib import Path
from typing import FrozenSet, List

from ..models import ReadResult

NODE_MANIFEST = "package.json"
PYTHON_MANIFEST = "pyproject.toml"
REQUIREMENTS_FILE = "requirements.txt"
README_CANDIDATES = ("README.md", "README.rst", "README.txt", "README")
DEPENDENCY_CACHE_DIR = "node_modules"
RULES_STEM = "skill-rules"
SKILL_SUFFIXES = (".md", ".json")

_VERSION_SPLIT = re.compile(r"[>=<~!;\[]")
_PYPROJECT_DEPENDENCIES = re.compile(r"^\s*dependencies\s*=\s*\[", re.MULTILINE)
# Quoted strings or the closing bracket of the array; brackets inside quotes are extras.
_ARRAY_TOKEN = re.compile(r""""([^"]*)"|'([^']*)'|(\])""")

_EMPTY: FrozenSet[str] = frozenset()


def strip_version(requirement: str) -> str:
    """Drop version specifiers, extras and environment markers from a requirement."""
    return _VERSION_SPLIT.split(requirement, 1)[0].strip()


def read_node_dependencies(root: Path) -> ReadResult[FrozenSet[str]]:
    """Collect dependency and devDependency names from package.json."""
    path = root / NODE_MANIFEST
    if not path.is_file():
        return ReadResult(_EMPTY, f"{NODE_MANIFEST} not found")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
        return ReadResult(_EMPTY, f"{NODE_MANIFEST}: {exc}")
    if not isinstance(data, dict):
        return ReadResult(_EMPTY, f"{NODE_MANIFEST}: top-level value is not an object")

    names = set()
    for key in ("dependencies", "devDependencies"):
        section = data.get(key)
        if isinstance(section, dict):
            names.update(name.lower() for name in section if isinstance(name, str))
    return ReadResult(frozenset(names))


def read_python_dependencies(root: Path) -> ReadResult[FrozenSet[str]]:
    """Extract names from the ``dependencies = [...]`` array of pyproject.toml."""
    path = root / PYTHON_MANIFEST
    if not path.is_file():
        return ReadResult(_EMPTY, f"{PYTHON_MANIFEST} not found")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        return ReadResult(_EMPTY, f"{PYTHON_MANIFEST}: {exc}")

    match = _PYPROJECT_DEPENDENCIES.search(text)
    if match is None:
        return ReadResult(_EMPTY, f"{PYTHON_MANIFEST}: no dependencies array")

    names = set()
    closed = False
    for token in _ARRAY_TOKEN.finditer(text, match.end()):
        double, single, bracket = token.groups()
        if bracket:
            closed = True
            break
        name = strip_version(double if double is not None else single)
        if name:
            names.add(name.lower())
    if not closed:
        return ReadResult(frozenset(names), f"{PYTHON_MANIFEST}: unterminated dependencies array")
    return ReadResult(frozenset(names))


def read_requirements(root: Path) -> ReadResult[FrozenSet[str]]:
    """Read requirements.txt, one dependency per line."""
    path = root / REQUIREMENTS_FILE
    if not path.is_file():
        return ReadResult(_EMPTY, f"{REQUIREMENTS_FILE} not found")
    try:
        lines = path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        return ReadResult(_EMPTY, f"{REQUIREMENTS_FILE}: {exc}")

    names = set()
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        name = strip_version(stripped)
        if name:
            names.add(name.lower())
    return ReadResult(frozenset(names))


def list_directories(root: Path) -> ReadResult[FrozenSet[str]]:
    """Return immediate sub-directory names, skipping hidden ones and node_modules."""
    try:
        entries = list(root.iterdir())
    except OSError as exc:
        return ReadResult(_EMPTY, f"cannot list {root}: {exc}")
    names = {
        entry.name
        for entry in entries
        if entry.is_dir() and not entry.name.startswith(".") and entry.name != DEPENDENCY_CACHE_DIR
    }
    return ReadResult(frozenset(names))


def read_readme(root: Path, max_chars: int = 2000) -> ReadResult[str]:
    """Return the first ``max_chars`` characters of the project README."""
    for candidate in README_CANDIDATES:
        path = root / candidate
        if not path.is_file():
            continue
        try:
            with path.open("r", encoding="utf-8", errors="replace") as handle:
                return ReadResult(handle.read(max_chars))
        except OSError as exc:
            return ReadResult("", f"{candidate}: {exc}")
    return ReadResult("", "README not found")


def list_existing_skills(skills_dir: Path) -> ReadResult[FrozenSet[str]]:
    """Return skill names defined as ``*.md`` / ``*.json`` entries in ``skills_dir``."""
    if not skills_dir.is_dir():
        return ReadResult(_EMPTY, f"{skills_dir.name} directory not found")
    try:
        entries: List[str] = [entry.name for entry in skills_dir.iterdir()]
    except OSError as exc:
        return ReadResult(_EMPTY, f"cannot list {skills_dir}: {exc}")

    names = set()
    for entry in entries:
        for suffix in SKILL_SUFFIXES:
            if entry.endswith(suffix):
                stem = entry[: -len(suffix)]
                if stem and stem != RULES_STEM:
                    names.add(stem)
                break
    return ReadResult(frozenset(names))


__all__ = [
    "list_directories",
    "list_existing_skills",
    "read_node_dependencies",
    "read_python_dependencies",
    "read_readme",
    "read_requirements",
    "strip_version",
]
