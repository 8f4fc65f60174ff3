"""Persistent skill rules document (skill-rules.json)."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Optional

from ..logging import get_logger
from ..models import DocumentError, ReadResult, SkillRulesDocument

_logger = get_logger("stores.rules")


class SkillRulesStore:
    """Loads and writes the skill rules document at a fixed path."""

    def __init__(self, path: Path) -> None:
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def exists(self) -> bool:
        return self._path.is_file()

    def load(self) -> ReadResult[Optional[SkillRulesDocument]]:
        """Return the stored document, or ``None`` with the reason it is unusable."""
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return ReadResult(None, f"{self._path.name} not found")
        except (OSError, UnicodeDecodeError, json.JSONDecodeError) as exc:
            _logger.debug("Unreadable skill rules at %s: %s", self._path, exc)
            return ReadResult(None, f"{self._path.name}: {exc}")
        try:
            return ReadResult(SkillRulesDocument.from_dict(data))
        except DocumentError as exc:
            _logger.debug("Malformed skill rules at %s: %s", self._path, exc)
            return ReadResult(None, f"{self._path.name}: {exc}")

    def store(self, document: SkillRulesDocument) -> None:
        """Write ``document`` atomically, creating parent directories."""
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_name(f"{self._path.name}.tmp")
        tmp_path.write_text(json.dumps(document.to_dict(), indent=2) + "\n", encoding="utf-8")
        os.replace(tmp_path, self._path)
        _logger.debug("Wrote %d skill rules to %s", len(document.skills), self._path)


__all__ = ["SkillRulesStore"]
