"""Pipelines behind the setup, analyze and track commands."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, FrozenSet, List, Optional

from .analyzers import ProjectAnalyzer
from .config import ConfigError, SkillHooksConfig, load_config, resolve_project_root
from .logging import get_logger
from .models import AreaTag, CommandEntry, EditedFileRecord, ProjectAnalysis, SkillRulesDocument
from .payload import HookPayload, parse_payload
from .rules import generate, merge, missing_skill_names, needs_update
from .stores import SessionCache, SkillRulesStore
from .tracker import classify, detect_commands, is_excluded

_logger = get_logger("orchestrator")

STATUS_CREATED = "created"
STATUS_UPDATED = "updated"
STATUS_UPDATE_AVAILABLE = "update-available"
STATUS_UP_TO_DATE = "up-to-date"


@dataclass
class SetupOutcome:
    """Result of a skill rules setup run."""

    status: str
    analysis: ProjectAnalysis
    rules_path: Path
    document: Optional[SkillRulesDocument] = None
    missing: FrozenSet[str] = frozenset()
    load_error: Optional[str] = None

    @property
    def written(self) -> bool:
        return self.status in (STATUS_CREATED, STATUS_UPDATED)


@dataclass
class TrackOutcome:
    """Records produced for one tracked edit."""

    session: SessionCache
    record: EditedFileRecord
    commands: List[CommandEntry] = field(default_factory=list)


class Orchestrator:
    """Coordinates analysis, rule generation and edit tracking for a project."""

    def __init__(
        self,
        config_loader: Callable[[Path], SkillHooksConfig] = load_config,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self._config_loader = config_loader
        self._clock = clock

    def load_config(self, project_dir: str | Path | None = None) -> SkillHooksConfig:
        """Return the project configuration, falling back to defaults on errors."""
        root = resolve_project_root(project_dir)
        try:
            return self._config_loader(root)
        except ConfigError as exc:
            _logger.warning("Ignoring invalid configuration: %s", exc)
            return SkillHooksConfig(root=root)

    def run_analyze(self, project_dir: str | Path | None = None) -> ProjectAnalysis:
        config = self.load_config(project_dir)
        analyzer = ProjectAnalyzer(
            skills_dir=config.skills_dir,
            readme_max_chars=config.analyzer.readme_max_chars,
        )
        return analyzer.analyze(config.root)

    def run_setup(self, project_dir: str | Path | None = None, *, apply: bool = False) -> SetupOutcome:
        """Create skill rules on first run; report or apply updates afterwards.

        A first-time setup writes unattended. When a document already exists and
        is stale, it is only rewritten when ``apply`` is set.
        """
        config = self.load_config(project_dir)
        analysis = ProjectAnalyzer(
            skills_dir=config.skills_dir,
            readme_max_chars=config.analyzer.readme_max_chars,
        ).analyze(config.root)
        store = SkillRulesStore(config.rules_path)

        if not store.exists():
            document = generate(analysis)
            store.store(document)
            _logger.info("Created %s with %d skills", store.path, len(document.skills))
            return SetupOutcome(
                status=STATUS_CREATED,
                analysis=analysis,
                rules_path=store.path,
                document=document,
            )

        loaded = store.load()
        existing = loaded.value
        if not needs_update(analysis, existing):
            return SetupOutcome(
                status=STATUS_UP_TO_DATE,
                analysis=analysis,
                rules_path=store.path,
                document=existing,
            )

        missing = missing_skill_names(analysis, existing)
        if not apply:
            _logger.info("Skill rules at %s are stale; confirmation required", store.path)
            return SetupOutcome(
                status=STATUS_UPDATE_AVAILABLE,
                analysis=analysis,
                rules_path=store.path,
                document=existing,
                missing=missing,
                load_error=loaded.error,
            )

        document = merge(existing, generate(analysis))
        store.store(document)
        _logger.info("Updated %s with %d skills", store.path, len(document.skills))
        return SetupOutcome(
            status=STATUS_UPDATED,
            analysis=analysis,
            rules_path=store.path,
            document=document,
            missing=missing,
            load_error=loaded.error,
        )

    def run_track(self, payload_text: str, project_dir: str | Path | None = None) -> Optional[TrackOutcome]:
        """Record an edit described by a hook payload; return None when nothing is tracked."""
        parsed = parse_payload(payload_text)
        if parsed.value is None:
            _logger.debug("Skipping edit tracking: %s", parsed.error)
            return None
        config = self.load_config(project_dir)
        return self.track(parsed.value, config)

    def track(self, payload: HookPayload, config: SkillHooksConfig) -> Optional[TrackOutcome]:
        file_path = payload.file_path
        if payload.tool_name not in config.tracker.tools or not file_path:
            return None
        if is_excluded(file_path):
            _logger.debug("Not tracking excluded file %s", file_path)
            return None

        area = classify(file_path, config.root)
        if area is AreaTag.UNKNOWN:
            _logger.debug("Not tracking %s outside known areas", file_path)
            return None

        session = SessionCache(config.cache_dir, payload.session_id)
        record = EditedFileRecord(timestamp=int(self._clock()), file_path=file_path, area=area)
        session.record_edit(record)
        session.add_area(area)
        commands = session.merge_commands(detect_commands(area, config.root))
        return TrackOutcome(session=session, record=record, commands=commands)


__all__ = [
    "Orchestrator",
    "STATUS_CREATED",
    "STATUS_UPDATED",
    "STATUS_UPDATE_AVAILABLE",
    "STATUS_UP_TO_DATE",
    "SetupOutcome",
    "TrackOutcome",
]
