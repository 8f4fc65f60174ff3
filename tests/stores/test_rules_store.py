"""Tests for the skill rules document store."""

from __future__ import annotations

from pathlib import Path

from skillhooks.models import ProjectAnalysis, ProjectType
from skillhooks.rules import generate
from skillhooks.stores import SkillRulesStore


def test_store_creates_parents_and_round_trips(tmp_path: Path) -> None:
    path = tmp_path / ".claude" / "skills" / "skill-rules.json"
    store = SkillRulesStore(path)
    document = generate(
        ProjectAnalysis(root=tmp_path, project_types=frozenset({ProjectType.BACKEND}))
    )

    assert not store.exists()
    store.store(document)

    assert store.exists()
    loaded = store.load()
    assert loaded.ok
    assert loaded.value == document
    assert not path.with_name("skill-rules.json.tmp").exists()


def test_load_missing_file(tmp_path: Path) -> None:
    result = SkillRulesStore(tmp_path / "skill-rules.json").load()

    assert result.value is None
    assert "not found" in result.error


def test_load_invalid_json_is_an_error_outcome(tmp_path: Path) -> None:
    path = tmp_path / "skill-rules.json"
    path.write_text("{broken", encoding="utf-8")

    result = SkillRulesStore(path).load()

    assert result.value is None
    assert result.error is not None


def test_load_wrong_structure_is_an_error_outcome(tmp_path: Path) -> None:
    path = tmp_path / "skill-rules.json"
    path.write_text('{"version": "1.0.0", "skills": ["frontend"]}', encoding="utf-8")

    result = SkillRulesStore(path).load()

    assert result.value is None
    assert "skills" in result.error
