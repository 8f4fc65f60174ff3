"""Persistent stores for skill rules and session tracking."""

from .rules_store import SkillRulesStore
from .session import SessionCache

__all__ = ["SessionCache", "SkillRulesStore"]
