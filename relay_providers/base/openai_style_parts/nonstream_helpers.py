"""Helpers for the single request/response cycle of OpenAI-style providers.

Purpose
-------
- Encode the request body, POST it, and validate the HTTP status.
- Map every failure to the provider error taxonomy with consistent codes.
- Keep the base provider class concise.

External Dependencies
---------------------
- ``httpx`` for the asynchronous request.

Failure semantics
-----------------
- JSON encoding failures and httpx transport errors -> ``ExecutionError``.
- Non-2xx status -> ``RequestFailed`` carrying the body text verbatim; the
  ``ErrorCode`` is classified from the status so callers get a ``retryable``
  hint. Nothing is retried here.
- Undecodable success bodies -> ``ExecutionError``.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import httpx

from ..errors import ErrorCode, ExecutionError, RequestFailed, classify_exception, classify_status


def encode_payload(payload: Mapping[str, Any], *, provider: str, model: str) -> bytes:
    """Serialize the request body to UTF-8 JSON bytes."""
    try:
        return json.dumps(payload, ensure_ascii=False).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise ExecutionError(
            f"failed to encode request body: {e}",
            provider=provider,
            model=model,
            code=ErrorCode.VALIDATION,
            raw=e,
        ) from e


def _describe(exc: Exception) -> str:
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


async def post_json(
    client: httpx.AsyncClient,
    url: str,
    body: bytes,
    headers: Mapping[str, str],
    *,
    provider: str,
    model: str,
    timeout: Optional[float] = None,
) -> httpx.Response:
    """Issue one POST and return the response, whatever its status.

    Parameters
    ----------
    client:
        The adapter-owned async client.
    url:
        Absolute endpoint URL.
    body:
        Pre-encoded JSON body.
    headers:
        Request headers including authorization.
    timeout:
        Optional per-call timeout overriding the client default.

    Raises
    ------
    ExecutionError
        For any httpx transport failure (DNS, connect, TLS, timeout).
    """
    kwargs: dict = {"content": body, "headers": dict(headers)}
    if timeout is not None:
        kwargs["timeout"] = timeout
    try:
        return await client.post(url, **kwargs)
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        raise ExecutionError(
            _describe(e),
            provider=provider,
            model=model,
            code=classify_exception(e),
            raw=e,
        ) from e


def handle_response_openai_compat(response: httpx.Response, *, provider: str, model: str) -> Any:
    """Validate the status and decode the JSON body.

    Returns
    -------
    Any
        The decoded JSON document.

    Raises
    ------
    RequestFailed
        When the status is not 2xx; the raw body text is preserved.
    ExecutionError
        When a 2xx body is not valid JSON.
    """
    if not response.is_success:
        raise RequestFailed(
            response.text,
            provider=provider,
            model=model,
            status_code=response.status_code,
            code=classify_status(response.status_code),
        )
    try:
        return response.json()
    except ValueError as e:
        raise ExecutionError(
            f"failed to decode response body: {e}",
            provider=provider,
            model=model,
            code=ErrorCode.MALFORMED_RESPONSE,
            raw=e,
        ) from e


__all__ = [
    "encode_payload",
    "post_json",
    "handle_response_openai_compat",
]
