"""
ModelConfig DTO identifying the backend model an adapter targets.

An adapter owns one ``ModelConfig`` for its lifetime; it is frozen so that
concurrent calls cannot observe changes.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ModelConfig:
    """Target model selection and optional generation settings.

    Attributes:
        model_name: Backend model identifier sent on the wire.
        context_limit: Optional context window size, informational.
        temperature: Sampling temperature sent when set.
        max_tokens: Completion token cap sent when set.
    """

    model_name: str
    context_limit: Optional[int] = None
    temperature: Optional[float] = None
    max_tokens: Optional[int] = None

    def __post_init__(self) -> None:
        if not self.model_name or not self.model_name.strip():
            raise ValueError("model_name must be a non-empty string")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ModelConfig"]
