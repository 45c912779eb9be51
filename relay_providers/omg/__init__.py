"""Omg (OhMyGPT) provider adapter."""

from .client import OmgProvider

__all__ = ["OmgProvider"]
