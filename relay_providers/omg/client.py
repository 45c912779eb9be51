"""OmgProvider adapter using the OpenAI-compatible Chat Completions API.

Built on ``BaseOpenAIStyleProvider`` for the request/response translation,
structured logging and error mapping. Only Omg-specific defaults (base URL,
secret key name, metadata) live here.
"""

from __future__ import annotations

from typing import Optional

import httpx

from ..base.models import ConfigKey, ModelConfig, ProviderMetadata
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..config.defaults import (
    OMG_API_KEY_NAME,
    OMG_DEFAULT_BASE_URL,
    OMG_DEFAULT_MODEL,
    OMG_DOC_URL,
    OMG_KNOWN_MODELS,
)


class OmgProvider(BaseOpenAIStyleProvider):
    """Omg provider built on the OpenAI-style base class."""

    API_KEY_NAME = OMG_API_KEY_NAME
    DEFAULT_BASE_URL = OMG_DEFAULT_BASE_URL

    def __init__(
        self,
        api_key: str,
        model: ModelConfig,
        *,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        """Initialize the OmgProvider.

        Args:
            api_key: Omg API key; prefer ``from_env`` to resolve it from a
                secret store.
            model: Model configuration used for every request.
            base_url: Endpoint root; defaults to ``https://api.ohmygpt.com/v1``.
            client: Optional injected async client (not closed by ``aclose``).
        """
        init = _ProviderInit(
            api_key=api_key,
            base_url=base_url or OMG_DEFAULT_BASE_URL,
            model=model,
            logger_name="providers.omg",
            client=client,
        )
        super().__init__(init)

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        """Return the static Omg descriptor."""
        return ProviderMetadata(
            name="omg",
            display_name="Omg",
            description="Access GPT models through Omg API",
            default_model=OMG_DEFAULT_MODEL,
            known_models=list(OMG_KNOWN_MODELS),
            model_doc_link=OMG_DOC_URL,
            config_keys=[ConfigKey(OMG_API_KEY_NAME, required=True, secret=True, default=None)],
        )
