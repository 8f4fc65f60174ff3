"""Project type inference from directory names and detected technologies."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Set, Tuple

from ..models import ProjectType, TechnologyTag

DIRECTORY_TABLE: Tuple[Tuple[str, ProjectType], ...] = (
    ("frontend", ProjectType.FRONTEND),
    ("client", ProjectType.FRONTEND),
    ("components", ProjectType.FRONTEND),
    ("backend", ProjectType.BACKEND),
    ("server", ProjectType.BACKEND),
    ("api", ProjectType.BACKEND),
    ("test", ProjectType.TESTING),
    ("spec", ProjectType.TESTING),
    ("notebooks", ProjectType.DATA_SCIENCE),
    ("datasets", ProjectType.DATA_SCIENCE),
    ("docs", ProjectType.DOCUMENTATION),
    ("documentation", ProjectType.DOCUMENTATION),
)

UI_FRAMEWORK_TAGS = frozenset(
    {
        TechnologyTag.REACT,
        TechnologyTag.VUE,
        TechnologyTag.ANGULAR,
        TechnologyTag.SVELTE,
        TechnologyTag.NEXTJS,
        TechnologyTag.UI,
        TechnologyTag.FRONTEND,
    }
)
BACKEND_TAGS = frozenset({TechnologyTag.BACKEND, TechnologyTag.API})
DATA_TAGS = frozenset(
    {
        TechnologyTag.ML,
        TechnologyTag.DATA_SCIENCE,
        TechnologyTag.PANDAS,
        TechnologyTag.NUMPY,
        TechnologyTag.TENSORFLOW,
        TechnologyTag.PYTORCH,
        TechnologyTag.SCIKIT_LEARN,
    }
)

TECHNOLOGY_RULES: Tuple[Tuple[FrozenSet[TechnologyTag], ProjectType], ...] = (
    (UI_FRAMEWORK_TAGS, ProjectType.FRONTEND),
    (BACKEND_TAGS, ProjectType.BACKEND),
    (DATA_TAGS, ProjectType.DATA_SCIENCE),
    (frozenset({TechnologyTag.TESTING}), ProjectType.TESTING),
)


def types_from_directories(directories: Iterable[str]) -> FrozenSet[ProjectType]:
    types: Set[ProjectType] = set()
    for name in directories:
        lowered = name.lower()
        for keyword, project_type in DIRECTORY_TABLE:
            if keyword in lowered:
                types.add(project_type)
    return frozenset(types)


def types_from_technologies(technologies: Iterable[TechnologyTag]) -> FrozenSet[ProjectType]:
    present = frozenset(technologies)
    return frozenset(project_type for tags, project_type in TECHNOLOGY_RULES if tags & present)


def infer_project_types(
    directories: Iterable[str], technologies: Iterable[TechnologyTag]
) -> FrozenSet[ProjectType]:
    """Union the directory-derived and technology-derived project types."""
    return types_from_directories(directories) | types_from_technologies(technologies)


__all__ = [
    "DIRECTORY_TABLE",
    "TECHNOLOGY_RULES",
    "infer_project_types",
    "types_from_directories",
    "types_from_technologies",
]
