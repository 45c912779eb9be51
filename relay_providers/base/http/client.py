"""Async HTTP client construction for providers.

Purpose:
    Give adapters one place to build the ``httpx.AsyncClient`` they own for
    their lifetime. Timeouts derive exclusively from :func:`get_timeout_config`
    and no hard-coded numeric literals are introduced.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Lifecycle & cleanup:
    - Each adapter instance creates (or is handed) exactly one client and
      reuses it across calls. The owner closes it with ``aclose()``.
    - Tests inject a client built with ``httpx.MockTransport``; the
      ``transport`` parameter exists for that purpose.

Design notes:
    - Clients are not shared between adapters. An ``AsyncClient`` is bound to
      the event loop that first uses its connection pool, so a process-wide
      pool would break hosts that run several loops.
"""

from __future__ import annotations

from typing import Mapping, Optional

import httpx

from ..timeouts import as_httpx_timeout


def create_async_client(
    base_url: Optional[str] = None,
    *,
    headers: Optional[Mapping[str, str]] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> httpx.AsyncClient:
    """Return a new ``httpx.AsyncClient`` configured with provider timeouts.

    Parameters:
        base_url: Optional API base URL so callers can issue relative requests.
        headers: Static headers applied to every request (no credentials;
            adapters attach auth per request).
        transport: Optional transport override, e.g. ``httpx.MockTransport``.

    Returns:
        A client the caller owns and must close.
    """
    kwargs = {"timeout": as_httpx_timeout()}
    if base_url:
        kwargs["base_url"] = base_url
    if headers:
        kwargs["headers"] = dict(headers)
    if transport is not None:
        kwargs["transport"] = transport
    return httpx.AsyncClient(**kwargs)


__all__ = ["create_async_client"]
