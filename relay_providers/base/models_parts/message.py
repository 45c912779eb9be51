"""
Message DTO used across providers.

Defines the frozen `Message` dataclass and the `Role` enumeration. A message
carries an ordered tuple of content parts and a creation timestamp in UTC epoch
seconds. Messages are immutable; builder helpers return new instances.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Tuple

from .content_part import Content, TextContent


class Role(str, Enum):
    """Author of a conversation turn. The system prompt is passed separately."""

    USER = "user"
    ASSISTANT = "assistant"


def _now() -> int:
    return int(time.time())


@dataclass(frozen=True)
class Message:
    """A single conversation turn.

    Attributes:
        role: ``Role.USER`` or ``Role.ASSISTANT``.
        content: Ordered content parts.
        created: Creation time as UTC epoch seconds.

    Methods:
        user / assistant: Construct a message for the given role, optionally
            with a first text part.
        with_text / with_content: Return a copy with a part appended.
        text: Concatenate the text parts for logging or simple hosts.
    """

    role: Role
    content: Tuple[Content, ...] = ()
    created: int = field(default_factory=_now)

    def __post_init__(self) -> None:
        # Accept lists from callers while keeping the stored value immutable.
        if not isinstance(self.content, tuple):
            object.__setattr__(self, "content", tuple(self.content))
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role(self.role))

    @classmethod
    def user(cls, text: str | None = None) -> "Message":
        return cls(role=Role.USER, content=(TextContent(text),) if text is not None else ())

    @classmethod
    def assistant(cls, text: str | None = None) -> "Message":
        return cls(role=Role.ASSISTANT, content=(TextContent(text),) if text is not None else ())

    def with_content(self, *parts: Content) -> "Message":
        return replace(self, content=self.content + tuple(parts))

    def with_text(self, text: str) -> "Message":
        return self.with_content(TextContent(text))

    def text_parts(self) -> List[TextContent]:
        return [p for p in self.content if isinstance(p, TextContent)]

    def text(self) -> str:
        """Return the text parts joined with newlines; non-text parts are skipped."""
        return "\n".join(p.text for p in self.text_parts())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "role": self.role.value,
            "created": self.created,
            "content": [p.to_dict() for p in self.content],
        }


def conversation(*messages: Message | Iterable[Message]) -> List[Message]:
    """Flatten messages and iterables of messages into one ordered list."""
    out: List[Message] = []
    for m in messages:
        if isinstance(m, Message):
            out.append(m)
        else:
            out.extend(m)
    return out


__all__ = [
    "Message",
    "Role",
    "conversation",
]
