"""
Provider-agnostic interfaces (Protocols) for the providers layer.

Re-exports Protocols defined in single-class modules under
``relay_providers.base.interfaces_parts``.
"""

from __future__ import annotations

from .interfaces_parts import Provider

__all__ = ["Provider"]
