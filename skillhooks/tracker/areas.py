"""Classification of edited file paths into project areas."""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath

from ..models import AreaTag

_EXCLUDED_SUFFIX = re.compile(r"\.(md|markdown)$")
_GENERATED = re.compile(r"(__pycache__|\.pyc$|\.pyo$|\.pyd$|\.egg-info)")

_NAMED_AREAS = {
    tag.value: tag for tag in AreaTag if tag not in (AreaTag.ROOT, AreaTag.UNKNOWN)
}


def is_excluded(file_path: str) -> bool:
    """Markdown files and Python cache/build artifacts are never tracked."""
    return bool(_EXCLUDED_SUFFIX.search(file_path) or _GENERATED.search(file_path))


def relative_path(file_path: str, project_root: Path) -> str:
    """Strip the project root prefix; paths outside the root are returned unchanged.

    The host reports paths under the literal project directory, which may be a
    symlink of the configured root, so both spellings and the resolved file path
    are tried.
    """
    for root in (project_root, project_root.resolve()):
        prefix = str(root).rstrip("/") + "/"
        if file_path.startswith(prefix):
            return file_path[len(prefix):]
    if os.path.isabs(file_path):
        try:
            return Path(file_path).resolve().relative_to(project_root.resolve()).as_posix()
        except (OSError, ValueError):
            pass
    return file_path


def classify(file_path: str, project_root: Path) -> AreaTag:
    """Map the first segment of ``file_path`` (relative to the root) to an area."""
    relative = relative_path(file_path, project_root)
    first = relative.split("/", 1)[0]
    area = _NAMED_AREAS.get(first)
    if area is not None:
        return area
    if "/" not in relative:
        return AreaTag.ROOT
    return AreaTag.UNKNOWN


def area_directory(area: AreaTag, project_root: Path) -> Path:
    """Directory an area's manifest lives in."""
    if area is AreaTag.ROOT:
        return project_root
    return project_root / PurePosixPath(area.value)


__all__ = ["area_directory", "classify", "is_excluded", "relative_path"]
