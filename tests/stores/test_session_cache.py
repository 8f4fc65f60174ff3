"""Tests for the per-session tracker cache."""

from __future__ import annotations

from pathlib import Path

from skillhooks.models import AreaTag, CommandEntry, EditedFileRecord
from skillhooks.stores import SessionCache


def test_session_directory_defaults_and_sanitises(tmp_path: Path) -> None:
    assert SessionCache(tmp_path, None).directory == tmp_path / "default"
    assert SessionCache(tmp_path, "  ").directory == tmp_path / "default"
    assert SessionCache(tmp_path, "../evil").directory == tmp_path / ".._evil"
    assert SessionCache(tmp_path, "abc-123").directory == tmp_path / "abc-123"


def test_record_edit_appends(tmp_path: Path) -> None:
    session = SessionCache(tmp_path, "s1")
    session.record_edit(EditedFileRecord(1, "/p/src/a.py", AreaTag.SRC))
    session.record_edit(EditedFileRecord(2, "/p/src/a.py", AreaTag.SRC))

    lines = session.edited_files_path.read_text(encoding="utf-8").splitlines()
    assert lines == ["1:/p/src/a.py:src", "2:/p/src/a.py:src"]


def test_add_area_deduplicates(tmp_path: Path) -> None:
    session = SessionCache(tmp_path, "s1")

    assert session.add_area(AreaTag.BACKEND)
    assert not session.add_area(AreaTag.BACKEND)
    assert session.add_area(AreaTag.ROOT)
    assert session.affected_areas() == ["backend", "root"]


def test_merge_commands_is_sorted_unique_and_idempotent(tmp_path: Path) -> None:
    session = SessionCache(tmp_path, "s1")
    mypy = CommandEntry("backend", "mypy", "cd /p/backend && uv run mypy .")
    build = CommandEntry("backend", "build", "cd /p/backend && uv run python -m build")

    session.merge_commands([mypy, build, mypy])
    session.merge_commands([mypy])
    session.merge_commands([])

    lines = session.commands_path.read_text(encoding="utf-8").splitlines()
    assert lines == [build.to_line(), mypy.to_line()]
    assert session.commands() == [build, mypy]


def test_merge_without_commands_creates_nothing(tmp_path: Path) -> None:
    session = SessionCache(tmp_path, "s1")

    assert session.merge_commands([]) == []
    assert not session.commands_path.exists()
