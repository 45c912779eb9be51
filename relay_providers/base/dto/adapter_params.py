"""Typed parameter object for provider adapter construction.

Purpose
-------
Provide a small, provider-agnostic DTO that captures the construction inputs
the factory forwards to adapters. This keeps the factory call site short and
gives hosts one validated object to build from their own settings.

External dependencies
---------------------
- Pydantic v2 ``BaseModel`` for validation and ``.model_dump()`` convenience.

Failure modes & side effects
----------------------------
- Pure data container: no I/O side effects. ``pydantic.ValidationError`` is
  raised for out-of-range values (e.g., negative ``max_tokens``).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from ..models import ModelConfig


class AdapterParams(BaseModel):
    """Common provider adapter construction parameters.

    Attributes
    ----------
    model:
        Model identifier. ``None`` selects the provider's default model.
    base_url:
        Optional override for the API base URL (proxies, self-hosted gateways).
    temperature:
        Sampling temperature sent with every request when set.
    max_tokens:
        Completion token cap sent with every request when set.
    context_limit:
        Informational context window size.
    """

    model: Optional[str] = Field(default=None, min_length=1)
    base_url: Optional[str] = None
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    max_tokens: Optional[int] = Field(default=None, gt=0)
    context_limit: Optional[int] = Field(default=None, gt=0)

    def to_model_config(self, default_model: str) -> ModelConfig:
        """Build the ``ModelConfig`` an adapter binds to."""
        return ModelConfig(
            model_name=self.model or default_model,
            context_limit=self.context_limit,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
        )


__all__ = ["AdapterParams"]
