"""Hook payload models for the post-tool-use event."""

from __future__ import annotations

import json
from typing import Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from .models import ReadResult


class ToolInput(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file_path: Optional[str] = None


class HookPayload(BaseModel):
    """Subset of the JSON object the hook host writes to stdin."""

    model_config = ConfigDict(extra="ignore")

    tool_name: Optional[str] = None
    tool_input: Optional[ToolInput] = None
    session_id: Optional[str] = None

    @property
    def file_path(self) -> str:
        if self.tool_input is None:
            return ""
        return self.tool_input.file_path or ""


def parse_payload(text: str) -> ReadResult[Optional[HookPayload]]:
    """Parse the raw stdin payload; invalid input is an error outcome, not an exception."""
    if not text.strip():
        return ReadResult(None, "empty hook payload")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        return ReadResult(None, f"invalid hook payload: {exc}")
    try:
        return ReadResult(HookPayload.model_validate(data))
    except ValidationError as exc:
        return ReadResult(None, f"unexpected hook payload: {exc.error_count()} validation error(s)")


__all__ = ["HookPayload", "ToolInput", "parse_payload"]
