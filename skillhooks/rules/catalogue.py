"""Fixed skill rule templates for the supported project types."""

from __future__ import annotations

from typing import Dict

from ..models import Enforcement, Priority, ProjectType, PromptTriggers, SkillRule, SkillType

RULES_VERSION = "1.0.0"

TEMPLATES: Dict[ProjectType, SkillRule] = {
    ProjectType.FRONTEND: SkillRule(
        type=SkillType.DOMAIN,
        enforcement=Enforcement.RECOMMEND,
        priority=Priority.HIGH,
        description="Frontend development patterns for components, styling and layout",
        prompt_triggers=PromptTriggers(
            keywords=("ui", "component", "frontend", "interface", "design", "layout", "styling"),
            intent_patterns=(
                r"(create|build|add|update).*?(component|page|view|ui)",
                r"(style|layout|design).*?(page|component|screen)",
                r"(responsive|accessib).*",
            ),
        ),
    ),
    ProjectType.BACKEND: SkillRule(
        type=SkillType.DOMAIN,
        enforcement=Enforcement.RECOMMEND,
        priority=Priority.HIGH,
        description="Backend development patterns for APIs, services and data access",
        prompt_triggers=PromptTriggers(
            keywords=("api", "backend", "server", "endpoint", "database", "query", "model"),
            intent_patterns=(
                r"(create|add|implement).*?(endpoint|route|api|service)",
                r"(fix|debug|optimi[sz]e).*?(query|database|server)",
                r"(schema|migration|model).*?(change|update|add)",
            ),
        ),
    ),
    ProjectType.TESTING: SkillRule(
        type=SkillType.QUALITY,
        enforcement=Enforcement.SUGGEST,
        priority=Priority.MEDIUM,
        description="Testing practices for unit, integration and end-to-end tests",
        prompt_triggers=PromptTriggers(
            keywords=("test", "testing", "spec", "unit test", "integration test", "e2e"),
            intent_patterns=(
                r"(write|add|create|fix).*?tests?",
                r"(increase|improve).*?coverage",
            ),
        ),
    ),
    ProjectType.DATA_SCIENCE: SkillRule(
        type=SkillType.DOMAIN,
        enforcement=Enforcement.RECOMMEND,
        priority=Priority.HIGH,
        description="Data analysis, visualization and model training workflows",
        prompt_triggers=PromptTriggers(
            keywords=("data", "analysis", "visualization", "model", "training", "ml", "ai"),
            intent_patterns=(
                r"(analy[sz]e|explore|clean).*?data",
                r"(train|evaluate|tune).*?model",
                r"(plot|chart|visuali[sz]e).*",
            ),
        ),
    ),
}


def custom_rule(name: str) -> SkillRule:
    """Placeholder rule for a skill that exists on disk but has no template."""
    return SkillRule(
        type=SkillType.CUSTOM,
        enforcement=Enforcement.SUGGEST,
        priority=Priority.MEDIUM,
        description=f"Custom skill: {name}",
        prompt_triggers=PromptTriggers(keywords=(name.replace("-", " "),)),
    )


__all__ = ["RULES_VERSION", "TEMPLATES", "custom_rule"]
