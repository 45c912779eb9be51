"""Initialization dataclass for OpenAI-style providers.

Encapsulates common constructor parameters used by ``BaseOpenAIStyleProvider``.
No I/O occurs here; this is a pure data container.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

import httpx

from ..models import ModelConfig


@dataclass(frozen=True)
class _ProviderInit:
    """Initialization bundle for ``BaseOpenAIStyleProvider``.

    Attributes:
        api_key: Credential sent as a bearer token. Never logged.
        base_url: Provider base URL for the OpenAI-style API.
        model: Model configuration bound for the adapter's lifetime.
        logger_name: Structured logger name (e.g., ``providers.omg``).
        client: Optional pre-built async client; when omitted the provider
            creates and owns one.
    """

    api_key: str = field(repr=False)
    base_url: str
    model: ModelConfig
    logger_name: str
    client: Optional[httpx.AsyncClient] = None


__all__ = ["_ProviderInit"]
