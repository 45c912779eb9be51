"""relay_providers.config.defaults
==============================

Central place for small, stable default values used across the
relay_providers package. These defaults can be overridden via environment
variables or external configuration, but provide sensible fallbacks for local
development and tests.

This module intentionally avoids importing from other provider packages to
prevent circular dependencies. Only plain constants live here.
"""

from __future__ import annotations

# ---- Provider-specific sane defaults ----
# OhMyGPT (OpenAI-compatible gateway)
OMG_DEFAULT_BASE_URL = "https://api.ohmygpt.com/v1"
OMG_DEFAULT_MODEL = "gpt-4o"
OMG_DOC_URL = "https://docs.ohmygpt.com"
OMG_KNOWN_MODELS = ("gpt-4o", "claude-3-5-sonnet")
OMG_API_KEY_NAME = "OMG_API_KEY"  # pragma: allowlist secret - env var name, not a secret

# Deterministic offline provider
MOCK_DEFAULT_MODEL = "mock-gpt"

# Environment toggle routing every factory lookup to the mock provider
USE_MOCKS_ENV = "RELAY_USE_MOCKS"


__all__ = [
    "OMG_DEFAULT_BASE_URL",
    "OMG_DEFAULT_MODEL",
    "OMG_DOC_URL",
    "OMG_KNOWN_MODELS",
    "OMG_API_KEY_NAME",
    "MOCK_DEFAULT_MODEL",
    "USE_MOCKS_ENV",
]
