"""Skill rule generation and staleness checks.

Everything here is pure: the store decides what is on disk, the orchestrator
decides whether to write.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

from ..models import ProjectAnalysis, SkillRule, SkillRulesDocument
from .catalogue import RULES_VERSION, TEMPLATES, custom_rule


def expected_skill_names(analysis: ProjectAnalysis) -> FrozenSet[str]:
    """Names a current document must contain for ``analysis``.

    Every detected project type counts, including types without a template
    (Documentation), so such projects keep reporting an available update.
    """
    names = {kind.slug for kind in analysis.project_types}
    names.update(analysis.existing_skills)
    return frozenset(names)


def missing_skill_names(
    analysis: ProjectAnalysis, document: Optional[SkillRulesDocument]
) -> FrozenSet[str]:
    expected = expected_skill_names(analysis)
    if document is None:
        return expected
    return expected - document.names()


def needs_update(analysis: ProjectAnalysis, document: Optional[SkillRulesDocument]) -> bool:
    """Return True when there is no usable document or it lacks an expected skill."""
    if document is None:
        return True
    return bool(missing_skill_names(analysis, document))


def generate(analysis: ProjectAnalysis) -> SkillRulesDocument:
    """Build a fresh document from the detected project types and existing skills."""
    skills: Dict[str, SkillRule] = {}
    for kind, template in TEMPLATES.items():
        if kind in analysis.project_types:
            skills[kind.slug] = template
    for name in sorted(analysis.existing_skills):
        if name not in skills:
            skills[name] = custom_rule(name)
    return SkillRulesDocument(version=RULES_VERSION, skills=skills)


def merge(existing: Optional[SkillRulesDocument], generated: SkillRulesDocument) -> SkillRulesDocument:
    """Combine a regenerated document with rules only the existing one has.

    Regenerated rules replace existing ones of the same name; nothing is dropped.
    """
    if existing is None:
        return generated
    skills: Dict[str, SkillRule] = dict(generated.skills)
    for name, rule in existing.skills.items():
        skills.setdefault(name, rule)
    return SkillRulesDocument(version=generated.version, skills=skills)


__all__ = [
    "expected_skill_names",
    "generate",
    "merge",
    "missing_skill_names",
    "needs_update",
]
