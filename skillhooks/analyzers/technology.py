"""Technology detection from dependency names."""

from __future__ import annotations

from typing import FrozenSet, Iterable, Set, Tuple

from ..models import TechnologyTag as Tag

# Keyword -> tags. A dependency matches a row when the keyword is a
# case-insensitive substring of its name; several rows may match one name.
TECHNOLOGY_TABLE: Tuple[Tuple[str, Tuple[Tag, ...]], ...] = (
    ("react", (Tag.REACT, Tag.FRONTEND, Tag.UI)),
    ("vue", (Tag.VUE, Tag.FRONTEND, Tag.UI)),
    ("angular", (Tag.ANGULAR, Tag.FRONTEND, Tag.UI)),
    ("svelte", (Tag.SVELTE, Tag.FRONTEND, Tag.UI)),
    ("next", (Tag.NEXTJS, Tag.REACT, Tag.FRONTEND)),
    ("tailwind", (Tag.TAILWIND, Tag.UI)),
    ("express", (Tag.EXPRESS, Tag.BACKEND, Tag.API)),
    ("fastapi", (Tag.FASTAPI, Tag.BACKEND, Tag.API)),
    ("django", (Tag.DJANGO, Tag.BACKEND, Tag.API)),
    ("flask", (Tag.FLASK, Tag.BACKEND, Tag.API)),
    ("@nestjs", (Tag.NESTJS, Tag.BACKEND, Tag.API)),
    ("prisma", (Tag.PRISMA, Tag.DATABASE, Tag.BACKEND)),
    ("sqlalchemy", (Tag.SQLALCHEMY, Tag.DATABASE, Tag.BACKEND)),
    ("pandas", (Tag.PANDAS, Tag.DATA_SCIENCE)),
    ("numpy", (Tag.NUMPY, Tag.DATA_SCIENCE)),
    ("tensorflow", (Tag.TENSORFLOW, Tag.ML, Tag.DATA_SCIENCE)),
    ("torch", (Tag.PYTORCH, Tag.ML, Tag.DATA_SCIENCE)),
    ("scikit", (Tag.SCIKIT_LEARN, Tag.ML, Tag.DATA_SCIENCE)),
    ("jest", (Tag.JEST, Tag.TESTING)),
    ("pytest", (Tag.PYTEST, Tag.TESTING)),
    ("vitest", (Tag.VITEST, Tag.TESTING)),
    ("playwright", (Tag.PLAYWRIGHT, Tag.TESTING)),
)


def match_dependency(name: str) -> FrozenSet[Tag]:
    """Return every tag mapped from table rows whose keyword occurs in ``name``."""
    lowered = name.lower()
    tags: Set[Tag] = set()
    for keyword, row_tags in TECHNOLOGY_TABLE:
        if keyword in lowered:
            tags.update(row_tags)
    return frozenset(tags)


def detect_technologies(dependencies: Iterable[str]) -> FrozenSet[Tag]:
    """Union the tags of all dependency names; unknown names contribute nothing."""
    tags: Set[Tag] = set()
    for name in dependencies:
        tags.update(match_dependency(name))
    return frozenset(tags)


__all__ = ["TECHNOLOGY_TABLE", "detect_technologies", "match_dependency"]
