"""Pipeline tests for setup and edit tracking."""

from __future__ import annotations

import json
from pathlib import Path

from tests._fixtures.repo_builder import RepoBuilder

from skillhooks.orchestrator import (
    STATUS_CREATED,
    STATUS_UP_TO_DATE,
    STATUS_UPDATE_AVAILABLE,
    STATUS_UPDATED,
    Orchestrator,
)


def _rules(root: Path) -> dict:
    return json.loads((root / ".claude" / "skills" / "skill-rules.json").read_text(encoding="utf-8"))


def _payload(file_path: str, *, tool: str = "Edit", session: str | None = "s1") -> str:
    return json.dumps({"tool_name": tool, "tool_input": {"file_path": file_path}, "session_id": session})


def test_first_setup_writes_rules_unattended(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"package.json": '{"dependencies": {"react": "^18.0"}}'})
    repo_builder.mkdirs(["tests"])
    root = repo_builder.path()

    outcome = Orchestrator().run_setup(root)

    assert outcome.status == STATUS_CREATED
    assert outcome.written
    rules = _rules(root)
    assert rules["version"] == "1.0.0"
    assert set(rules["skills"]) == {"frontend", "testing"}
    assert rules["skills"]["frontend"]["promptTriggers"]["keywords"][0] == "ui"


def test_second_setup_is_up_to_date(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"requirements.txt": "django\n"})
    root = repo_builder.path()
    orchestrator = Orchestrator()
    orchestrator.run_setup(root)

    outcome = orchestrator.run_setup(root)

    assert outcome.status == STATUS_UP_TO_DATE
    assert not outcome.written


def test_stale_rules_require_confirmation(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"requirements.txt": "django\n"})
    root = repo_builder.path()
    orchestrator = Orchestrator()
    orchestrator.run_setup(root)
    before = _rules(root)

    repo_builder.write({".claude/skills/deploy.md": "# Deploy", "requirements.txt": "django\npandas\n"})
    outcome = orchestrator.run_setup(root)

    assert outcome.status == STATUS_UPDATE_AVAILABLE
    assert outcome.missing == {"deploy", "data-science"}
    assert _rules(root) == before

    applied = orchestrator.run_setup(root, apply=True)

    assert applied.status == STATUS_UPDATED
    assert set(_rules(root)["skills"]) == {"backend", "data-science", "deploy"}


def test_update_keeps_rules_no_longer_detected(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"requirements.txt": "flask\n"})
    root = repo_builder.path()
    orchestrator = Orchestrator()
    orchestrator.run_setup(root)

    repo_builder.write({"requirements.txt": "jest\n"})
    orchestrator.run_setup(root, apply=True)

    assert set(_rules(root)["skills"]) == {"backend", "testing"}


def test_corrupt_rules_are_reported_not_overwritten(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".claude/skills/skill-rules.json": "{oops"})
    root = repo_builder.path()

    outcome = Orchestrator().run_setup(root)

    assert outcome.status == STATUS_UPDATE_AVAILABLE
    assert outcome.load_error
    assert (root / ".claude" / "skills" / "skill-rules.json").read_text(encoding="utf-8") == "{oops"


def test_invalid_config_falls_back_to_defaults(repo_builder: RepoBuilder) -> None:
    repo_builder.write({".skillhooks.yml": "- not a mapping\n"})
    root = repo_builder.path()

    outcome = Orchestrator().run_setup(root)

    assert outcome.status == STATUS_CREATED
    assert outcome.rules_path == root.resolve() / ".claude" / "skills" / "skill-rules.json"


def test_track_backend_edit_end_to_end(repo_builder: RepoBuilder) -> None:
    repo_builder.write(
        {
            "backend/pyproject.toml": 'dependencies = ["pytest"]\n',
            "backend/app/main.py": "print('hi')\n",
        }
    )
    root = repo_builder.path().resolve()
    orchestrator = Orchestrator(clock=lambda: 1700000000.5)

    outcome = orchestrator.run_track(_payload(f"{root}/backend/app/main.py"), root)

    assert outcome is not None
    cache = root / ".claude" / "tsc-cache" / "s1"
    assert (cache / "edited-files.log").read_text(encoding="utf-8") == (
        f"1700000000:{root}/backend/app/main.py:backend\n"
    )
    assert (cache / "affected-repos.txt").read_text(encoding="utf-8") == "backend\n"
    assert (cache / "commands.txt").read_text(encoding="utf-8") == (
        f"backend:pytest:cd {root}/backend && uv run pytest\n"
    )


def test_tracking_twice_keeps_commands_unique(repo_builder: RepoBuilder) -> None:
    repo_builder.write({"pyproject.toml": 'dev = ["ruff", "mypy"]\n'})
    root = repo_builder.path().resolve()
    orchestrator = Orchestrator()

    orchestrator.run_track(_payload(f"{root}/setup.py"), root)
    orchestrator.run_track(_payload(f"{root}/setup.py"), root)

    cache = root / ".claude" / "tsc-cache" / "s1"
    lines = (cache / "commands.txt").read_text(encoding="utf-8").splitlines()
    assert len(lines) == len(set(lines)) == 3
    assert (cache / "affected-repos.txt").read_text(encoding="utf-8") == "root\n"
    assert len((cache / "edited-files.log").read_text(encoding="utf-8").splitlines()) == 2


def test_markdown_edit_produces_no_records(repo_builder: RepoBuilder) -> None:
    root = repo_builder.path().resolve()

    outcome = Orchestrator().run_track(_payload(f"{root}/report.md"), root)

    assert outcome is None
    assert not (root / ".claude").exists()


def test_untracked_tools_and_unknown_areas_are_skipped(repo_builder: RepoBuilder) -> None:
    root = repo_builder.path().resolve()
    orchestrator = Orchestrator()

    assert orchestrator.run_track(_payload(f"{root}/src/a.py", tool="Read"), root) is None
    assert orchestrator.run_track(_payload(""), root) is None
    assert orchestrator.run_track(_payload(f"{root}/vendor/lib.py"), root) is None
    assert orchestrator.run_track("not json", root) is None
    assert not (root / ".claude").exists()


def test_missing_session_id_uses_default_cache(repo_builder: RepoBuilder) -> None:
    root = repo_builder.path().resolve()

    outcome = Orchestrator().run_track(_payload(f"{root}/scripts/run.py", tool="Write", session=None), root)

    assert outcome is not None
    assert outcome.session.directory == root / ".claude" / "tsc-cache" / "default"
    assert outcome.commands == []


def test_docs_only_project_reports_update_after_first_setup(repo_builder: RepoBuilder) -> None:
    repo_builder.mkdirs(["docs"])
    root = repo_builder.path()
    orchestrator = Orchestrator()

    created = orchestrator.run_setup(root)
    again = orchestrator.run_setup(root)

    assert created.status == STATUS_CREATED
    assert _rules(root)["skills"] == {}
    assert again.status == STATUS_UPDATE_AVAILABLE
    assert again.missing == {"documentation"}
