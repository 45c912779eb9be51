"""Deterministic mock provider for offline testing.

Purpose
-------
Provide a lightweight adapter that implements the ``Provider`` contract while
avoiding any network traffic, so hosts and tests can exercise higher layers
(conversation handling, logging, factory routing) without a real backend.

Response selection
------------------
1. ``responses[prompt]`` where ``prompt`` is the last user text (stripped).
2. ``responses["*"]`` when present.
3. Otherwise ``"mock: " + prompt`` (an echo).

Usage is counted as whitespace-separated tokens of the request and reply.

External dependencies
---------------------
Standard library only.
"""

from __future__ import annotations

from typing import Mapping, Optional, Sequence, Tuple

from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Role,
    TextContent,
    Tool,
    Usage,
)
from ..config.defaults import MOCK_DEFAULT_MODEL

_ECHO_PREFIX = "mock: "


class MockProvider:
    """Adapter that returns canned or echoed responses instead of calling an API."""

    def __init__(
        self,
        model: Optional[ModelConfig] = None,
        *,
        provider: str = "mock",
        responses: Optional[Mapping[str, str]] = None,
    ) -> None:
        """Initialize the mock provider.

        Parameters
        ----------
        model: Optional[ModelConfig]
            Model configuration; defaults to ``mock-gpt``.
        provider: str, default ``"mock"``
            Logical provider name used for logging. When the factory routes a
            real provider through mock mode, this is the original key
            (e.g., ``"omg"``).
        responses: Optional[Mapping[str, str]]
            Prompt -> reply table; ``"*"`` acts as a catch-all.
        """
        self._model = model or ModelConfig(MOCK_DEFAULT_MODEL)
        self._provider = provider or "mock"
        self._responses = dict(responses or {})
        self._logger = get_logger(f"providers.mock.{self._provider}")

    @classmethod
    def metadata(cls) -> ProviderMetadata:
        return ProviderMetadata(
            name="mock",
            display_name="Mock",
            description="Deterministic offline provider for tests",
            default_model=MOCK_DEFAULT_MODEL,
            known_models=[MOCK_DEFAULT_MODEL],
            model_doc_link="",
            config_keys=[],
        )

    @classmethod
    def from_env(cls, model: ModelConfig, **kwargs) -> "MockProvider":
        """Factory hook mirroring the real adapters; needs no configuration."""
        return cls(model, **kwargs)

    @property
    def provider_name(self) -> str:
        return self._provider

    def get_model_config(self) -> ModelConfig:
        return self._model

    async def aclose(self) -> None:
        """Nothing to release."""

    async def __aenter__(self) -> "MockProvider":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Message, ProviderUsage]:
        """Return a deterministic assistant reply for the conversation."""
        model = self._model.model_name
        ctx = LogContext(provider=self.provider_name, model=model)
        normalized_log_event(self._logger, "chat.start", ctx, phase="start", attempt=1)

        prompt = _extract_prompt(messages)
        text = self._reply_for(prompt)
        input_tokens = _count_tokens(system) + sum(_count_tokens(m.text()) for m in messages)
        output_tokens = _count_tokens(text)
        usage = Usage(
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            total_tokens=input_tokens + output_tokens,
        )

        normalized_log_event(self._logger, "chat.end", ctx, phase="finalize", emitted=True, tokens=usage)
        reply = Message(role=Role.ASSISTANT, content=(TextContent(text),))
        return reply, ProviderUsage(model=model, usage=usage)

    def _reply_for(self, prompt: str) -> str:
        # Canned replies may be empty strings.
        if prompt in self._responses:
            return self._responses[prompt]
        if "*" in self._responses:
            return self._responses["*"]
        return f"{_ECHO_PREFIX}{prompt}"


def _count_tokens(text: str) -> int:
    return len(text.split())


def _extract_prompt(messages: Sequence[Message]) -> str:
    """Return the text of the last user message, or ``""`` when there is none."""
    for message in reversed(messages):
        if message.role is Role.USER:
            return message.text().strip()
    return ""


__all__ = ["MockProvider"]
