"""Shared testing utilities for provider adapter tests.

Exports:
    - TEST_API_KEY: fake credential used by fixtures.
    - completion_body(...): OpenAI-style response body builder.
    - RecordingTransport: ``httpx.MockTransport`` handler recording requests.
    - log_events(stderr): parse JSON log lines captured from stderr.
"""
from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional

import httpx

TEST_API_KEY = "sk-test-0123456789"  # pragma: allowlist secret - fake key for tests


def completion_body(
    content: Any = "hello",
    *,
    model: Optional[str] = "gpt-4o-2024-08-06",
    usage: Any = None,
) -> Dict[str, Any]:
    """Build an OpenAI-style response body; ``usage=None`` omits the block."""
    body: Dict[str, Any] = {
        "id": "chatcmpl-1",
        "object": "chat.completion",
        "choices": [
            {
                "index": 0,
                "finish_reason": "stop",
                "message": {"role": "assistant", "content": content},
            }
        ],
    }
    if model is not None:
        body["model"] = model
    if usage is not None:
        body["usage"] = usage
    return body


class RecordingTransport:
    """Callable handler for ``httpx.MockTransport`` that records requests.

    ``responder`` may be sync or async; ``MockTransport`` awaits a coroutine result.
    """

    def __init__(self, responder: Callable[[httpx.Request], Any]) -> None:
        self._responder = responder
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> Any:
        self.requests.append(request)
        return self._responder(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def log_events(stderr: str) -> List[Dict[str, Any]]:
    """Parse the JSON log lines in captured stderr, skipping anything else."""
    out = []
    for line in stderr.splitlines():
        line = line.strip()
        if line.startswith("{"):
            out.append(json.loads(line))
    return out
