"""Post-edit tracking: area classification and tool command detection."""

from .areas import classify, is_excluded
from .commands import detect_commands

__all__ = ["classify", "detect_commands", "is_excluded"]
