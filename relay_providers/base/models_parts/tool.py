"""
Tool definition advertised to a model.

Tools are descriptive only; executing them belongs to the host.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict


@dataclass(frozen=True)
class Tool:
    """A callable capability described by name, purpose and JSON Schema input."""

    name: str
    description: str = ""
    input_schema: Dict[str, Any] = field(default_factory=lambda: {"type": "object", "properties": {}})


__all__ = ["Tool"]
