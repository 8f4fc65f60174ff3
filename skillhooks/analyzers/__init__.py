"""Project analysis: manifest readers, technology tables and type inference."""

from __future__ import annotations

from .project import ProjectAnalyzer
from .project_types import infer_project_types
from .technology import detect_technologies

__all__ = [
    "ProjectAnalyzer",
    "detect_technologies",
    "infer_project_types",
]
