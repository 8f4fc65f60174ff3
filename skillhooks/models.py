"""Core data models shared across skillhooks components."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Dict, FrozenSet, Generic, List, Mapping, Optional, Tuple, TypeVar

T = TypeVar("T")


class DocumentError(RuntimeError):
    """Raised when a skill rules document does not have the expected structure."""


@dataclass(frozen=True)
class ReadResult(Generic[T]):
    """Outcome of a best-effort read: a value, or an empty value plus the failure cause."""

    value: T
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class TechnologyTag(str, Enum):
    """Closed catalogue of technology labels derived from dependency names."""

    REACT = "React"
    VUE = "Vue"
    ANGULAR = "Angular"
    SVELTE = "Svelte"
    NEXTJS = "Next.js"
    TAILWIND = "TailwindCSS"
    UI = "UI"
    FRONTEND = "Frontend"
    BACKEND = "Backend"
    API = "API"
    EXPRESS = "Express"
    FASTAPI = "FastAPI"
    DJANGO = "Django"
    FLASK = "Flask"
    NESTJS = "NestJS"
    DATABASE = "Database"
    PRISMA = "Prisma"
    SQLALCHEMY = "SQLAlchemy"
    DATA_SCIENCE = "Data Science"
    PANDAS = "Pandas"
    NUMPY = "NumPy"
    ML = "ML"
    TENSORFLOW = "TensorFlow"
    PYTORCH = "PyTorch"
    SCIKIT_LEARN = "Scikit-learn"
    TESTING = "Testing"
    JEST = "Jest"
    PYTEST = "Pytest"
    VITEST = "Vitest"
    PLAYWRIGHT = "Playwright"


class ProjectType(str, Enum):
    """Coarse project categories that skill rules are generated for."""

    FRONTEND = "Frontend"
    BACKEND = "Backend"
    DATA_SCIENCE = "Data Science"
    TESTING = "Testing"
    DOCUMENTATION = "Documentation"

    @property
    def slug(self) -> str:
        return slugify(self.value)


class SkillType(str, Enum):
    DOMAIN = "domain"
    QUALITY = "quality"
    CUSTOM = "custom"


class Enforcement(str, Enum):
    CRITICAL = "critical"
    RECOMMEND = "recommend"
    SUGGEST = "suggest"


class Priority(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class AreaTag(str, Enum):
    """Top-level project region an edited file belongs to."""

    BACKEND = "backend"
    SERVER = "server"
    API = "api"
    SRC = "src"
    APP = "app"
    FRONTEND = "frontend"
    CLIENT = "client"
    WEB = "web"
    UI = "ui"
    TESTS = "tests"
    TEST = "test"
    SCRIPTS = "scripts"
    TOOLS = "tools"
    BIN = "bin"
    DATABASE = "database"
    MIGRATIONS = "migrations"
    ALEMBIC = "alembic"
    ROOT = "root"
    UNKNOWN = "unknown"


def slugify(name: str) -> str:
    """Lower-case a display name and replace spaces with hyphens."""
    return name.strip().lower().replace(" ", "-")


@dataclass(frozen=True)
class PromptTriggers:
    """Keywords and regex sources that activate a skill for a prompt."""

    keywords: Tuple[str, ...] = ()
    intent_patterns: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, List[str]]:
        return {"keywords": list(self.keywords), "intentPatterns": list(self.intent_patterns)}


@dataclass(frozen=True)
class SkillRule:
    """Activation rule for a single named skill."""

    type: SkillType
    enforcement: Enforcement
    priority: Priority
    description: str
    prompt_triggers: PromptTriggers = field(default_factory=PromptTriggers)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type.value,
            "enforcement": self.enforcement.value,
            "priority": self.priority.value,
            "description": self.description,
            "promptTriggers": self.prompt_triggers.to_dict(),
        }

    @classmethod
    def from_dict(cls, name: str, payload: object) -> "SkillRule":
        if not isinstance(payload, dict):
            raise DocumentError(f"Skill '{name}' must be an object")
        try:
            skill_type = SkillType(payload.get("type"))
            enforcement = Enforcement(payload.get("enforcement"))
            priority = Priority(payload.get("priority"))
        except ValueError as exc:
            raise DocumentError(f"Skill '{name}': {exc}") from exc
        description = payload.get("description", "")
        if not isinstance(description, str):
            raise DocumentError(f"Skill '{name}': description must be a string")
        triggers = payload.get("promptTriggers", {}) or {}
        if not isinstance(triggers, dict):
            raise DocumentError(f"Skill '{name}': promptTriggers must be an object")
        return cls(
            type=skill_type,
            enforcement=enforcement,
            priority=priority,
            description=description,
            prompt_triggers=PromptTriggers(
                keywords=_as_str_tuple(name, triggers.get("keywords")),
                intent_patterns=_as_str_tuple(name, triggers.get("intentPatterns")),
            ),
        )


@dataclass(frozen=True)
class SkillRulesDocument:
    """Versioned mapping of skill name to activation rule."""

    version: str
    skills: Mapping[str, SkillRule]

    def names(self) -> FrozenSet[str]:
        return frozenset(self.skills)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "version": self.version,
            "skills": {name: rule.to_dict() for name, rule in self.skills.items()},
        }

    @classmethod
    def from_dict(cls, payload: object) -> "SkillRulesDocument":
        if not isinstance(payload, dict):
            raise DocumentError("Skill rules document must be an object")
        version = payload.get("version")
        skills = payload.get("skills")
        if not isinstance(version, str):
            raise DocumentError("Skill rules document is missing a version string")
        if not isinstance(skills, dict):
            raise DocumentError("Skill rules document is missing a skills mapping")
        return cls(
            version=version,
            skills={str(name): SkillRule.from_dict(str(name), rule) for name, rule in skills.items()},
        )


@dataclass(frozen=True)
class ProjectAnalysis:
    """Everything the analyzer learned about a project root."""

    root: Path
    dependencies: FrozenSet[str] = frozenset()
    directories: FrozenSet[str] = frozenset()
    readme_excerpt: str = ""
    existing_skills: FrozenSet[str] = frozenset()
    technologies: FrozenSet[TechnologyTag] = frozenset()
    project_types: FrozenSet[ProjectType] = frozenset()
    diagnostics: Tuple[str, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "root": str(self.root),
            "dependencies": sorted(self.dependencies),
            "directories": sorted(self.directories),
            "readmeExcerpt": self.readme_excerpt,
            "existingSkills": sorted(self.existing_skills),
            "detectedTechnologies": sorted(tag.value for tag in self.technologies),
            "projectType": sorted(kind.value for kind in self.project_types),
            "diagnostics": list(self.diagnostics),
        }


@dataclass(frozen=True)
class EditedFileRecord:
    """Single line of the per-session edited files log."""

    timestamp: int
    file_path: str
    area: AreaTag

    def to_line(self) -> str:
        return f"{self.timestamp}:{self.file_path}:{self.area.value}"


@dataclass(frozen=True, order=True)
class CommandEntry:
    """Shell command for a tool detected in an area's manifest."""

    area: str
    tool: str
    command: str

    def to_line(self) -> str:
        return f"{self.area}:{self.tool}:{self.command}"

    @classmethod
    def from_line(cls, line: str) -> Optional["CommandEntry"]:
        parts = line.rstrip("\n").split(":", 2)
        if len(parts) != 3 or not all(parts[:2]):
            return None
        return cls(area=parts[0], tool=parts[1], command=parts[2])


def _as_str_tuple(name: str, value: Any) -> Tuple[str, ...]:
    if value is None:
        return ()
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise DocumentError(f"Skill '{name}': trigger lists must contain strings")
    return tuple(value)


__all__ = [
    "AreaTag",
    "CommandEntry",
    "DocumentError",
    "EditedFileRecord",
    "Enforcement",
    "Priority",
    "ProjectAnalysis",
    "ProjectType",
    "PromptTriggers",
    "ReadResult",
    "SkillRule",
    "SkillRulesDocument",
    "SkillType",
    "TechnologyTag",
    "slugify",
]
