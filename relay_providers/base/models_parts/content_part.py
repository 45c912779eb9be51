"""
Content part variants carried by conversation messages.

A message holds an ordered list of parts. Only ``TextContent`` is understood by
every adapter; image and tool parts exist so hosts can keep a single history
type across adapters with different capabilities. Adapters that cannot
represent a part drop it during serialization and report how many were dropped.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Literal, Optional, Union


ContentPartType = Literal["text", "image", "tool_request", "tool_response"]


@dataclass(frozen=True)
class TextContent:
    """Plain text part; the text is carried verbatim."""

    text: str
    type: ContentPartType = field(default="text", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ImageContent:
    """Base64 image payload with its MIME type."""

    data: str
    mime_type: str
    type: ContentPartType = field(default="image", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ToolRequest:
    """A tool invocation requested by the assistant."""

    id: str
    name: str
    arguments: Dict[str, Any] = field(default_factory=dict)
    type: ContentPartType = field(default="tool_request", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ToolResponse:
    """Result of executing a tool, keyed by the originating request id."""

    id: str
    output: Optional[str] = None
    error: Optional[str] = None
    type: ContentPartType = field(default="tool_response", init=False)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


Content = Union[TextContent, ImageContent, ToolRequest, ToolResponse]


__all__ = [
    "Content",
    "ContentPartType",
    "TextContent",
    "ImageContent",
    "ToolRequest",
    "ToolResponse",
]
