"""Configuration loading for skillhooks (.skillhooks.yml)."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

import yaml

CONFIG_FILENAME = ".skillhooks.yml"
PROJECT_DIR_ENV = "CLAUDE_PROJECT_DIR"

DEFAULT_TRACKED_TOOLS = ("Edit", "MultiEdit", "Write")


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class RulesConfig:
    """Where skill rules and skill definitions live, relative to the project root."""

    path: Path = Path(".claude/skills/skill-rules.json")
    skills_dir: Path = Path(".claude/skills")


@dataclass
class AnalyzerConfig:
    """Project analyzer limits."""

    readme_max_chars: int = 2000


@dataclass
class TrackerConfig:
    """Post-edit tracker settings."""

    cache_dir: Path = Path(".claude/tsc-cache")
    tools: List[str] = field(default_factory=lambda: list(DEFAULT_TRACKED_TOOLS))


@dataclass
class SkillHooksConfig:
    """Represents the settings defined in .skillhooks.yml."""

    root: Path
    rules: RulesConfig = field(default_factory=RulesConfig)
    analyzer: AnalyzerConfig = field(default_factory=AnalyzerConfig)
    tracker: TrackerConfig = field(default_factory=TrackerConfig)
    log_file: Optional[Path] = None

    @property
    def rules_path(self) -> Path:
        return self.root / self.rules.path

    @property
    def skills_dir(self) -> Path:
        return self.root / self.rules.skills_dir

    @property
    def cache_dir(self) -> Path:
        return self.root / self.tracker.cache_dir


def resolve_project_root(path: str | os.PathLike[str] | None = None) -> Path:
    """Return the project root: explicit path, then $CLAUDE_PROJECT_DIR, then cwd."""
    if path:
        return Path(path).expanduser().resolve()
    env_value = os.environ.get(PROJECT_DIR_ENV)
    if env_value:
        return Path(env_value).expanduser().resolve()
    return Path.cwd().resolve()


def load_config(root: Path) -> SkillHooksConfig:
    """Load configuration for the project rooted at ``root``."""
    root = root.expanduser().resolve()
    config_file = root / CONFIG_FILENAME
    if not config_file.exists():
        return SkillHooksConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    rules = RulesConfig()
    rules_data = _as_dict(data.get("rules"))
    rules_path = _as_str(rules_data.get("path"))
    if rules_path:
        rules.path = Path(rules_path)
    skills_dir = _as_str(rules_data.get("skills_dir"))
    if skills_dir:
        rules.skills_dir = Path(skills_dir)

    analyzer = AnalyzerConfig()
    analyzer_data = _as_dict(data.get("analyzer"))
    max_chars = _as_int(analyzer_data.get("readme_max_chars"))
    if max_chars is not None:
        if max_chars < 0:
            raise ConfigError("analyzer.readme_max_chars must not be negative")
        analyzer.readme_max_chars = max_chars

    tracker = TrackerConfig()
    tracker_data = _as_dict(data.get("tracker"))
    cache_dir = _as_str(tracker_data.get("cache_dir"))
    if cache_dir:
        tracker.cache_dir = Path(cache_dir)
    if "tools" in tracker_data:
        tracker.tools = _as_str_list(tracker_data.get("tools"))

    log_file_str = _as_str(data.get("log_file"))
    log_file = root / log_file_str if log_file_str else None

    return SkillHooksConfig(
        root=root,
        rules=rules,
        analyzer=analyzer,
        tracker=tracker,
        log_file=log_file,
    )


def _read_config(path: Path) -> Dict[str, Any]:
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Failed to read {path.name}: {exc}") from exc
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value)
        except ValueError:
            return None
    return None


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float))]
    return []


__all__ = [
    "AnalyzerConfig",
    "ConfigError",
    "DEFAULT_TRACKED_TOOLS",
    "RulesConfig",
    "SkillHooksConfig",
    "TrackerConfig",
    "load_config",
    "resolve_project_root",
]
