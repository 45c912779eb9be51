"""HTTP utilities package for providers.

Exposes the async client factory used by adapters.
"""

from .client import create_async_client

__all__ = ["create_async_client"]
