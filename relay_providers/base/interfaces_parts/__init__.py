"""Interfaces (Protocols) split into single-class modules.

This package provides one Protocol per file while allowing
``relay_providers.base.interfaces`` to re-export a stable API.
"""

from .provider import Provider

__all__ = ["Provider"]
