"""Project analyzer: manifests, layout, README and existing skills."""

from __future__ import annotations

from pathlib import Path
from typing import FrozenSet, List

from ..logging import get_logger
from ..models import ProjectAnalysis, ReadResult
from .project_types import infer_project_types
from .technology import detect_technologies
from .utils import (
    list_directories,
    list_existing_skills,
    read_node_dependencies,
    read_python_dependencies,
    read_readme,
    read_requirements,
)

_logger = get_logger("analyzer")

DEFAULT_SKILLS_DIR = Path(".claude/skills")


class ProjectAnalyzer:
    """Scans a project root and derives technologies and project types."""

    def __init__(self, *, skills_dir: Path | None = None, readme_max_chars: int = 2000) -> None:
        self.skills_dir = skills_dir if skills_dir is not None else DEFAULT_SKILLS_DIR
        self.readme_max_chars = readme_max_chars

    def analyze(self, project_root: Path | str) -> ProjectAnalysis:
        root = Path(project_root).expanduser().resolve()
        if not root.is_dir():
            raise FileNotFoundError(f"Project root not found: {project_root}")

        diagnostics: List[str] = []

        def _take(result: ReadResult):
            if not result.ok:
                _logger.debug("No contribution: %s", result.error)
                diagnostics.append(result.error)
            return result.value

        dependencies: FrozenSet[str] = (
            _take(read_node_dependencies(root))
            | _take(read_python_dependencies(root))
            | _take(read_requirements(root))
        )
        directories = _take(list_directories(root))
        readme = _take(read_readme(root, self.readme_max_chars))
        skills_dir = self.skills_dir if self.skills_dir.is_absolute() else root / self.skills_dir
        existing_skills = _take(list_existing_skills(skills_dir))

        technologies = detect_technologies(dependencies)
        project_types = infer_project_types(directories, technologies)
        _logger.debug(
            "Analyzed %s: %d dependencies, %d technologies, types=%s",
            root,
            len(dependencies),
            len(technologies),
            sorted(kind.value for kind in project_types),
        )

        return ProjectAnalysis(
            root=root,
            dependencies=dependencies,
            directories=directories,
            readme_excerpt=readme,
            existing_skills=existing_skills,
            technologies=technologies,
            project_types=project_types,
            diagnostics=tuple(diagnostics),
        )


__all__ = ["ProjectAnalyzer"]
