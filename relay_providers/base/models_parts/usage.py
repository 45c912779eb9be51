"""
Token usage records returned alongside completions.

``Usage`` counters are optional: backends may omit any of them and absent values
stay ``None`` instead of being coerced to zero. ``ProviderUsage`` pairs the usage
with the model name the backend reports having used.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Usage:
    """Token counters for one completion."""

    input_tokens: Optional[int] = None
    output_tokens: Optional[int] = None
    total_tokens: Optional[int] = None

    def is_empty(self) -> bool:
        return self.input_tokens is None and self.output_tokens is None and self.total_tokens is None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ProviderUsage:
    """Resolved model name plus usage for one completion."""

    model: str
    usage: Usage = field(default_factory=Usage)

    def to_dict(self) -> Dict[str, Any]:
        return {"model": self.model, "usage": self.usage.to_dict()}


__all__ = ["Usage", "ProviderUsage"]
