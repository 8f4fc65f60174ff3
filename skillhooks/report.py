"""Console reports for hook and CLI output."""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from .models import ProjectAnalysis
from .orchestrator import SetupOutcome

_TEMPLATES_DIR = Path(__file__).with_name("templates")


class ReportRenderer:
    """Renders setup and analysis summaries from jinja2 templates."""

    def __init__(self, templates_dir: Path | None = None) -> None:
        directories = [str(_TEMPLATES_DIR)]
        if templates_dir is not None and templates_dir != _TEMPLATES_DIR:
            directories.insert(0, str(templates_dir))
        self._env = Environment(
            loader=FileSystemLoader(directories),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def render_setup(self, outcome: SetupOutcome) -> str:
        analysis = outcome.analysis
        skills = sorted(outcome.document.skills.items()) if outcome.document else []
        template = self._env.get_template("setup.j2")
        return template.render(
            status=outcome.status,
            root=analysis.root,
            rules_path=outcome.rules_path,
            technologies=sorted(tag.value for tag in analysis.technologies),
            project_types=sorted(kind.value for kind in analysis.project_types),
            skills=skills,
            missing=sorted(outcome.missing),
            load_error=outcome.load_error,
        )

    def render_analysis(self, analysis: ProjectAnalysis) -> str:
        template = self._env.get_template("analysis.j2")
        return template.render(
            root=analysis.root,
            dependencies=sorted(analysis.dependencies),
            directories=sorted(analysis.directories),
            technologies=sorted(tag.value for tag in analysis.technologies),
            project_types=sorted(kind.value for kind in analysis.project_types),
            existing_skills=sorted(analysis.existing_skills),
            diagnostics=list(analysis.diagnostics),
        )


__all__ = ["ReportRenderer"]
