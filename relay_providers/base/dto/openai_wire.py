"""
Pydantic shapes for OpenAI-compatible Chat Completions responses.

Purpose
-------
Validate the subset of a ``/chat/completions`` response body that adapters
rely on, so malformed vendor output fails at one well-defined point instead of
as a ``KeyError`` deep inside reconstruction.

External dependencies: Pydantic only (no network calls).

Failure semantics
-----------------
- ``choices[0].message`` must carry string ``content``, at least one
  ``tool_calls`` entry, or both. Validation failure surfaces as
  ``pydantic.ValidationError``; adapters convert it to ``ExecutionError``.
- Tool call ``arguments`` arrive as a JSON string and are decoded to an
  object here; undecodable arguments fail validation.
- ``model`` is kept untyped; adapters fall back to the requested model when it
  is not a non-empty string.
- ``usage`` is intentionally left unvalidated on the envelope.
  ``UsagePayload`` validates it separately so a malformed usage block can be
  downgraded without discarding the completion.
- Unknown fields are ignored; vendors add extras freely.
"""

from __future__ import annotations

import json
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, field_validator, model_validator


class ToolCallFunctionPayload(BaseModel):
    """``tool_calls[i].function``: the tool name and its decoded arguments."""

    model_config = ConfigDict(extra="ignore")

    name: StrictStr
    arguments: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("arguments", mode="before")
    @classmethod
    def _decode_arguments(cls, value: Any) -> Any:
        if value is None or value == "":
            return {}
        if isinstance(value, str):
            try:
                value = json.loads(value)
            except ValueError as e:
                raise ValueError(f"tool call arguments are not valid JSON: {e.msg}") from e
        if not isinstance(value, dict):
            raise ValueError("tool call arguments must decode to a JSON object")
        return value


class ToolCallPayload(BaseModel):
    """One entry of ``message.tool_calls``."""

    model_config = ConfigDict(extra="ignore")

    id: StrictStr
    function: ToolCallFunctionPayload


class ChoiceMessagePayload(BaseModel):
    """``choices[i].message``; needs text content, tool calls, or both."""

    model_config = ConfigDict(extra="ignore")

    content: Optional[StrictStr] = None
    tool_calls: Optional[List[ToolCallPayload]] = None

    @model_validator(mode="after")
    def _require_content_or_tool_calls(self) -> "ChoiceMessagePayload":
        if self.content is None and not self.tool_calls:
            raise ValueError("message has neither content nor tool_calls")
        return self


class ChoicePayload(BaseModel):
    """One entry of ``choices``."""

    model_config = ConfigDict(extra="ignore")

    message: ChoiceMessagePayload


class ChatCompletionPayload(BaseModel):
    """Top-level response envelope.

    Attributes:
        choices: At least one choice; the first one is the completion.
        model: Whatever the backend reports as the model; only a non-empty
            string is used.
        usage: Raw usage block, validated separately via ``UsagePayload``.
    """

    model_config = ConfigDict(extra="ignore")

    choices: List[ChoicePayload] = Field(..., min_length=1)
    model: Any = None
    usage: Any = None

    def first_message(self) -> ChoiceMessagePayload:
        return self.choices[0].message

    def first_content(self) -> Optional[str]:
        return self.first_message().content


class UsagePayload(BaseModel):
    """``usage`` block; every counter is optional and must be an integer."""

    model_config = ConfigDict(extra="ignore")

    prompt_tokens: Optional[StrictInt] = None
    completion_tokens: Optional[StrictInt] = None
    total_tokens: Optional[StrictInt] = None


__all__ = [
    "ToolCallFunctionPayload",
    "ToolCallPayload",
    "ChoiceMessagePayload",
    "ChoicePayload",
    "ChatCompletionPayload",
    "UsagePayload",
]
