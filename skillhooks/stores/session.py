"""Per-session tracker cache: edited files, affected areas and commands."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, List, Set

from ..logging import get_logger
from ..models import AreaTag, CommandEntry, EditedFileRecord

_logger = get_logger("stores.session")

EDITED_FILES_LOG = "edited-files.log"
AFFECTED_AREAS_FILE = "affected-repos.txt"
COMMANDS_FILE = "commands.txt"
DEFAULT_SESSION = "default"


class SessionCache:
    """Files kept under ``<cache_dir>/<session_id>`` for one assistant session.

    Writers are not locked against each other. The commands file is rebuilt as
    a sorted set on every merge, so repeated or interleaved runs converge.
    """

    def __init__(self, cache_dir: Path, session_id: str | None = None) -> None:
        self.session_id = _safe_session_id(session_id)
        self.directory = cache_dir / self.session_id

    @property
    def edited_files_path(self) -> Path:
        return self.directory / EDITED_FILES_LOG

    @property
    def affected_areas_path(self) -> Path:
        return self.directory / AFFECTED_AREAS_FILE

    @property
    def commands_path(self) -> Path:
        return self.directory / COMMANDS_FILE

    def record_edit(self, record: EditedFileRecord) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        with self.edited_files_path.open("a", encoding="utf-8") as handle:
            handle.write(record.to_line() + "\n")

    def affected_areas(self) -> List[str]:
        return _read_lines(self.affected_areas_path)

    def add_area(self, area: AreaTag) -> bool:
        """Append ``area`` unless already listed; return True when it was added."""
        if area.value in self.affected_areas():
            return False
        self.directory.mkdir(parents=True, exist_ok=True)
        with self.affected_areas_path.open("a", encoding="utf-8") as handle:
            handle.write(area.value + "\n")
        return True

    def commands(self) -> List[CommandEntry]:
        entries = (CommandEntry.from_line(line) for line in _read_lines(self.commands_path))
        return sorted({entry for entry in entries if entry is not None}, key=CommandEntry.to_line)

    def merge_commands(self, new_entries: Iterable[CommandEntry]) -> List[CommandEntry]:
        """Union ``new_entries`` into the commands file and rewrite it sorted-unique."""
        new_set: Set[CommandEntry] = set(new_entries)
        if not new_set and not self.commands_path.exists():
            return []
        merged = sorted(set(self.commands()) | new_set, key=CommandEntry.to_line)
        self.directory.mkdir(parents=True, exist_ok=True)
        tmp_path = self.commands_path.with_name(f"{COMMANDS_FILE}.tmp")
        tmp_path.write_text("".join(entry.to_line() + "\n" for entry in merged), encoding="utf-8")
        os.replace(tmp_path, self.commands_path)
        _logger.debug("Session %s now tracks %d commands", self.session_id, len(merged))
        return merged


def _read_lines(path: Path) -> List[str]:
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return []
    except (OSError, UnicodeDecodeError) as exc:
        _logger.debug("Ignoring unreadable %s: %s", path, exc)
        return []
    return [line for line in text.splitlines() if line.strip()]


def _safe_session_id(session_id: str | None) -> str:
    cleaned = (session_id or "").strip().replace("/", "_").replace("\\", "_")
    if not cleaned or cleaned in {".", ".."}:
        return DEFAULT_SESSION
    return cleaned


__all__ = [
    "AFFECTED_AREAS_FILE",
    "COMMANDS_FILE",
    "EDITED_FILES_LOG",
    "SessionCache",
]
