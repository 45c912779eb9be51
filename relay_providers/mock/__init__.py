"""Mock provider package exposing a deterministic offline adapter."""

from .client import MockProvider

__all__ = ["MockProvider"]
