"""Skill rule templates and generation."""

from .catalogue import RULES_VERSION, TEMPLATES, custom_rule
from .generator import expected_skill_names, generate, merge, missing_skill_names, needs_update

__all__ = [
    "RULES_VERSION",
    "TEMPLATES",
    "custom_rule",
    "expected_skill_names",
    "generate",
    "merge",
    "missing_skill_names",
    "needs_update",
]
