"""BaseOpenAIStyleProvider: shared adapter for OpenAI-compatible HTTP backends.

Purpose:
- Provide one implementation of the ``/chat/completions`` translation
  contract that concrete backends reuse by supplying their metadata, secret
  key name and default base URL.

External dependencies:
- ``httpx`` for the asynchronous HTTP call.
- ``pydantic`` (via ``dto.openai_wire``) for response validation.

Call semantics:
- ``complete`` performs exactly one POST; there are no retries at this layer.
- Instance fields are set in ``__init__`` and never reassigned, so concurrent
  ``complete`` calls on one instance are independent.
- Missing or malformed usage data is logged at WARNING and replaced by an
  empty ``Usage``; every other failure propagates as a ``ProviderError``.

Timeout strategy:
- The owned client uses ``get_timeout_config()``. A per-call ``timeout``
  overrides it for that request; asyncio cancellation propagates into httpx.
"""

from __future__ import annotations

import logging
import time
from typing import ClassVar, Optional, Sequence, Tuple, Type, TypeVar

import httpx

from ...config import get_provider_config
from ...config.secret_store import SecretNotFoundError, SecretStore, default_secret_store
from ..constants import CHAT_COMPLETIONS_PATH
from ..errors import ConfigurationError, ProviderError, RequestFailed, UsageError
from ..http import create_async_client
from ..logging import LogContext, get_logger, log_event, normalized_log_event
from ..models import Message, ModelConfig, ProviderMetadata, ProviderUsage, Tool, Usage
from .nonstream_helpers import encode_payload, handle_response_openai_compat, post_json
from .provider_init import _ProviderInit
from .style_helpers import (
    build_chat_params,
    build_headers,
    format_messages,
    format_tools,
    get_model,
    get_usage,
    parse_completion,
    response_to_message,
)

_P = TypeVar("_P", bound="BaseOpenAIStyleProvider")


class BaseOpenAIStyleProvider:
    """Reusable base class for OpenAI-compatible providers.

    Subclasses must implement:
    - ``metadata()``: static descriptor (classmethod).

    and set the class attributes:
    - ``API_KEY_NAME``: secret key resolved by ``from_env``.
    - ``DEFAULT_BASE_URL``: used when neither an argument nor configuration
      provides a base URL.
    """

    API_KEY_NAME: ClassVar[str]
    DEFAULT_BASE_URL: ClassVar[str]

    def __init__(self, init: _ProviderInit) -> None:
        """Initialize a provider with shared configuration.

        Parameters:
            init: Dataclass containing api key, base_url, model, logger name and
                an optional client.
        """
        self._api_key = init.api_key
        self._base_url = init.base_url.rstrip("/")
        self._model = init.model
        self._logger = get_logger(init.logger_name)
        self._owns_client = init.client is None
        self._client = init.client if init.client is not None else create_async_client()

    # ----- Abstract surface -----
    @classmethod
    def metadata(cls) -> ProviderMetadata:  # pragma: no cover - abstract
        """Return the static provider descriptor."""
        raise NotImplementedError

    # ----- Construction -----
    @classmethod
    def from_env(
        cls: Type[_P],
        model: ModelConfig,
        *,
        secrets: Optional[SecretStore] = None,
        client: Optional[httpx.AsyncClient] = None,
        base_url: Optional[str] = None,
    ) -> _P:
        """Build an adapter, resolving the API key from the secret store.

        Base URL precedence: ``base_url`` argument, then provider configuration
        (``<PROVIDER>_BASE_URL`` / config file), then ``DEFAULT_BASE_URL``.

        Raises:
            ConfigurationError: When the API key secret is not set.
        """
        name = cls.metadata().name
        store = secrets or default_secret_store()
        try:
            api_key = store.get_secret(cls.API_KEY_NAME)
        except SecretNotFoundError as e:
            raise ConfigurationError(
                f"missing required secret '{cls.API_KEY_NAME}'",
                provider=name,
                key=cls.API_KEY_NAME,
            ) from e
        resolved_url = base_url or get_provider_config(name).get("base_url") or cls.DEFAULT_BASE_URL
        return cls(api_key=api_key, model=model, base_url=resolved_url, client=client)  # type: ignore[call-arg]

    @classmethod
    def default(cls: Type[_P]) -> _P:
        """Build an adapter for the default model from the environment.

        Only for contexts where the secret is known to be present: a missing
        secret is fatal here (``RuntimeError``), not a recoverable error.
        """
        meta = cls.metadata()
        try:
            return cls.from_env(ModelConfig(meta.default_model))
        except ConfigurationError as e:
            raise RuntimeError(f"Failed to initialize {meta.display_name} provider") from e

    # ----- Basic info -----
    @property
    def provider_name(self) -> str:
        return self.metadata().name

    @property
    def base_url(self) -> str:
        return self._base_url

    def get_model_config(self) -> ModelConfig:
        """Return the model configuration bound at construction."""
        return self._model

    def __repr__(self) -> str:
        return f"{type(self).__name__}(model={self._model.model_name!r}, base_url={self._base_url!r})"

    # ----- Lifecycle -----
    async def aclose(self) -> None:
        """Close the HTTP client when this provider created it."""
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self: _P) -> _P:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    # ----- Completion -----
    async def complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool] = (),
        *,
        timeout: Optional[float] = None,
    ) -> Tuple[Message, ProviderUsage]:
        """Run one chat completion against ``<base_url>/chat/completions``.

        Parameters:
            system: System prompt; omitted from the request when empty.
            messages: Conversation turns; only text parts are sent.
            tools: Tool definitions advertised to the model.
            timeout: Optional per-call timeout in seconds.

        Returns:
            The assistant message and the usage record for the resolved model.

        Raises:
            ExecutionError: Header/JSON/transport/response-shape failures.
            RequestFailed: Non-2xx status; carries the raw body.
        """
        model = self._model.model_name
        ctx = LogContext(provider=self.provider_name, model=model)
        try:
            return await self._complete(system, messages, tools, ctx=ctx, timeout=timeout)
        except RequestFailed as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                emitted=False,
                error_code=e.code.value,
                error_kind=type(e).__name__,
                http_status=e.status_code,
                level=logging.ERROR,
            )
            raise
        except ProviderError as e:
            normalized_log_event(
                self._logger,
                "chat.error",
                ctx,
                phase="finalize",
                emitted=False,
                error=e.message,
                error_code=e.code.value,
                error_kind=type(e).__name__,
                level=logging.ERROR,
            )
            raise

    async def _complete(
        self,
        system: str,
        messages: Sequence[Message],
        tools: Sequence[Tool],
        *,
        ctx: LogContext,
        timeout: Optional[float],
    ) -> Tuple[Message, ProviderUsage]:
        model = self._model.model_name
        headers = build_headers(self._api_key, provider=self.provider_name)

        wire_messages, dropped = format_messages(system, messages)
        if dropped:
            log_event(self._logger, "request.content_dropped", ctx, dropped=dropped)
        payload = build_chat_params(self._model, wire_messages, format_tools(tools))
        body = encode_payload(payload, provider=self.provider_name, model=model)

        self._log_chat_start(ctx, wire_messages, tools)
        t0 = time.perf_counter()
        response = await post_json(
            self._client,
            f"{self._base_url}{CHAT_COMPLETIONS_PATH}",
            body,
            headers,
            provider=self.provider_name,
            model=model,
            timeout=timeout,
        )
        data = handle_response_openai_compat(response, provider=self.provider_name, model=model)
        latency_ms = (time.perf_counter() - t0) * 1000.0

        parsed = parse_completion(data, provider=self.provider_name, model=model)
        message = response_to_message(parsed)
        usage = self._extract_usage(data, ctx)
        resolved_model = get_model(parsed, model)

        self._emit_debug_trace(ctx, payload, data, usage)
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            emitted=True,
            tokens=usage,
            latency_ms=round(latency_ms, 2),
            http_status=response.status_code,
            resolved_model=resolved_model,
        )
        return message, ProviderUsage(model=resolved_model, usage=usage)

    # ----- helpers -----

    def _extract_usage(self, data, ctx: LogContext) -> Usage:
        """Return usage from ``data``; downgrade ``UsageError`` to an empty record."""
        try:
            return get_usage(data, provider=self.provider_name, model=self._model.model_name)
        except UsageError as e:
            normalized_log_event(
                self._logger,
                "usage.missing",
                ctx,
                phase="finalize",
                error=e.message,
                error_code=e.code.value,
                level=logging.WARNING,
            )
            return Usage()

    def _log_chat_start(self, ctx: LogContext, wire_messages: list, tools: Sequence[Tool]) -> None:
        """Emit a normalized start log for the chat call."""
        normalized_log_event(
            self._logger,
            "chat.start",
            ctx,
            phase="start",
            attempt=1,
            message_count=len(wire_messages),
            has_tools=bool(tools),
            temperature=self._model.temperature,
            max_tokens=self._model.max_tokens,
        )

    def _emit_debug_trace(self, ctx: LogContext, payload: dict, data, usage: Usage) -> None:
        """Log request payload, raw response and usage at DEBUG. Headers are never included."""
        log_event(
            self._logger,
            "chat.trace",
            ctx,
            level=logging.DEBUG,
            payload=payload,
            response=data,
            usage=usage.to_dict(),
        )


__all__ = ["BaseOpenAIStyleProvider"]
