"""Base shared constants for provider adapters.

Central location to avoid scattering magic strings and default numbers.
"""
from __future__ import annotations

# OpenAI-compatible endpoint path appended to a provider base URL
CHAT_COMPLETIONS_PATH = "/chat/completions"

# Default HTTP timeouts (seconds)
DEFAULT_HTTP_TIMEOUT = 60.0
DEFAULT_CONNECT_TIMEOUT = 10.0

__all__ = [
    "CHAT_COMPLETIONS_PATH",
    "DEFAULT_HTTP_TIMEOUT",
    "DEFAULT_CONNECT_TIMEOUT",
]
