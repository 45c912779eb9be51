"""OpenAI-style provider base abstractions.

Re-exports provide a stable import surface for concrete adapters.
"""

from .base import BaseOpenAIStyleProvider
from .provider_init import _ProviderInit

__all__ = [
    "BaseOpenAIStyleProvider",
    "_ProviderInit",
]
