"""Tests for console report rendering."""

from __future__ import annotations

from pathlib import Path

from skillhooks.models import ProjectAnalysis, ProjectType, TechnologyTag
from skillhooks.orchestrator import STATUS_UP_TO_DATE, STATUS_UPDATE_AVAILABLE, SetupOutcome
from skillhooks.report import ReportRenderer


def _analysis() -> ProjectAnalysis:
    return ProjectAnalysis(
        root=Path("/proj"),
        technologies=frozenset({TechnologyTag.FASTAPI, TechnologyTag.BACKEND}),
        project_types=frozenset({ProjectType.BACKEND}),
        diagnostics=("package.json not found",),
    )


def test_update_available_asks_for_confirmation() -> None:
    outcome = SetupOutcome(
        status=STATUS_UPDATE_AVAILABLE,
        analysis=_analysis(),
        rules_path=Path("/proj/.claude/skills/skill-rules.json"),
        missing=frozenset({"backend"}),
    )

    text = ReportRenderer().render_setup(outcome)

    assert "update available" in text
    assert "  - backend" in text
    assert "Ask the user" in text
    assert "skillhooks setup --apply /proj" in text


def test_up_to_date_lists_detection_only() -> None:
    outcome = SetupOutcome(
        status=STATUS_UP_TO_DATE,
        analysis=_analysis(),
        rules_path=Path("/proj/.claude/skills/skill-rules.json"),
    )

    text = ReportRenderer().render_setup(outcome)

    assert text.startswith("=== Skill rules up to date ===")
    assert "  - FastAPI" in text
    assert "Ask the user" not in text


def test_analysis_report_lists_skipped_sources() -> None:
    text = ReportRenderer().render_analysis(_analysis())

    assert "Technologies: Backend, FastAPI" in text
    assert "Project types: Backend" in text
    assert "  - package.json not found" in text
    assert "Directories: (none)" in text
