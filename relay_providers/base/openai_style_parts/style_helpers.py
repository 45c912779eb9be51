"""
Helper utilities for OpenAI-compatible Chat Completions providers.

Purpose:
- Translate the agnostic conversation (system prompt, messages, tools) into
  the OpenAI ``/chat/completions`` request body.
- Translate a validated response body back into an assistant ``Message``,
  a ``Usage`` record and the resolved model name.

External dependencies:
- Pydantic response shapes from ``relay_providers.base.dto.openai_wire``.
- No network I/O; functions only prepare inputs or interpret outputs.

Translation policy:
- Serialization is lossy: only ``TextContent`` parts have a wire
  representation. Other parts are dropped and counted; callers receive the
  count so the narrowing is visible (adapters log it).
- Text is passed through byte-for-byte; nothing is trimmed or re-encoded.
- Replies map back in full: text content and ``tool_calls`` both become
  parts of the assistant message.
"""

from __future__ import annotations

import re
import typing as _t

from pydantic import ValidationError

from ..dto.openai_wire import ChatCompletionPayload, UsagePayload
from ..errors import ErrorCode, ExecutionError, UsageError
from ..models import Content, Message, ModelConfig, Role, TextContent, Tool, ToolRequest, Usage

# Valid HTTP header value: visible ASCII, space and horizontal tab.
_HEADER_VALUE_RE = re.compile(r"[\t\x20-\x7e]*")

_WIRE_ROLES: _t.Dict[Role, str] = {
    Role.USER: "user",
    Role.ASSISTANT: "assistant",
}


def wire_role(role: Role) -> str:
    """Map an agnostic role to its wire value; only ``user``/``assistant`` exist."""
    return _WIRE_ROLES[Role(role)]


def format_messages(system: str, messages: _t.Sequence[Message]) -> _t.Tuple[_t.List[dict], int]:
    """Build the OpenAI-style ``messages`` list.

    Parameters:
        system: System prompt; omitted from the output when empty.
        messages: Ordered conversation turns. Not mutated.

    Returns:
        ``(wire_messages, dropped)`` where ``wire_messages`` holds one
        ``{"role", "content"}`` object per text part and ``dropped`` is the
        number of non-text parts that had no wire representation.
    """
    wire: _t.List[dict] = []
    dropped = 0
    if system:
        wire.append({"role": "system", "content": system})
    for message in messages:
        role = wire_role(message.role)
        for part in message.content:
            if isinstance(part, TextContent):
                wire.append({"role": role, "content": part.text})
            else:
                dropped += 1
    return wire, dropped


def format_tools(tools: _t.Sequence[Tool]) -> _t.List[dict]:
    """Translate tool definitions into OpenAI ``function`` tool specs."""
    return [
        {
            "type": "function",
            "function": {
                "name": tool.name,
                "description": tool.description,
                "parameters": dict(tool.input_schema),
            },
        }
        for tool in tools
    ]


def build_chat_params(
    model: ModelConfig,
    messages: _t.List[dict],
    tools: _t.Optional[_t.List[dict]] = None,
) -> dict:
    """Assemble the request body for an OpenAI-style chat completion call.

    Parameters:
        model: Bound model configuration; optional generation settings are
            included only when set.
        messages: The messages payload from :func:`format_messages`.
        tools: Optional tool specs from :func:`format_tools`; omitted when empty.

    Returns:
        A JSON-serializable dict for the POST body.
    """
    params: dict = {"model": model.model_name, "messages": messages}
    if model.temperature is not None:
        params["temperature"] = float(model.temperature)
    if model.max_tokens is not None:
        params["max_tokens"] = int(model.max_tokens)
    if tools:
        params["tools"] = tools
    return params


def build_headers(api_key: str, *, provider: str) -> _t.Dict[str, str]:
    """Return JSON + bearer auth headers.

    Raises:
        ExecutionError: When the key cannot be carried in an HTTP header value.
            The key itself never appears in the error text.
    """
    auth = f"Bearer {api_key}"
    if not _HEADER_VALUE_RE.fullmatch(auth):
        raise ExecutionError(
            "failed to build request headers: API key contains characters not allowed in an HTTP header value",
            provider=provider,
            code=ErrorCode.CONFIGURATION,
        )
    return {"Content-Type": "application/json", "Authorization": auth}


def _describe_validation_error(error: ValidationError) -> str:
    """Summarize a pydantic error by location and message, without input values."""
    parts = []
    for item in error.errors(include_url=False, include_input=False):
        loc = ".".join(str(p) for p in item["loc"]) or "body"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def parse_completion(data: _t.Any, *, provider: str, model: str) -> ChatCompletionPayload:
    """Validate a decoded response body.

    Raises:
        ExecutionError: When the body is not an object, ``choices`` is empty,
            or the first message has neither string content nor tool calls.
            Vendor values are not echoed into the error text.
    """
    try:
        return ChatCompletionPayload.model_validate(data)
    except ValidationError as e:
        raise ExecutionError(
            f"unexpected response shape: {_describe_validation_error(e)}",
            provider=provider,
            model=model,
            code=ErrorCode.MALFORMED_RESPONSE,
            raw=e,
        ) from e


def response_to_message(payload: ChatCompletionPayload, *, created: _t.Optional[int] = None) -> Message:
    """Build the assistant message from the first choice.

    Text content comes first, verbatim, followed by one ``ToolRequest`` per
    tool call in response order.
    """
    choice = payload.first_message()
    content: _t.List[Content] = []
    if choice.content is not None:
        content.append(TextContent(choice.content))
    for call in choice.tool_calls or ():
        content.append(ToolRequest(id=call.id, name=call.function.name, arguments=call.function.arguments))
    if created is None:
        return Message(role=Role.ASSISTANT, content=tuple(content))
    return Message(role=Role.ASSISTANT, content=tuple(content), created=created)


def get_usage(data: _t.Mapping[str, _t.Any], *, provider: str, model: _t.Optional[str] = None) -> Usage:
    """Extract token usage from a response body.

    Counters are copied as-is; absent counters stay ``None``.

    Raises:
        UsageError: When ``usage`` is absent, null, not an object, or holds
            non-integer counters.
    """
    raw = data.get("usage")
    if raw is None:
        raise UsageError("no usage data in response", provider=provider, model=model)
    try:
        usage = UsagePayload.model_validate(raw)
    except ValidationError as e:
        raise UsageError(
            f"malformed usage data: {_describe_validation_error(e)}", provider=provider, model=model
        ) from e
    return Usage(
        input_tokens=usage.prompt_tokens,
        output_tokens=usage.completion_tokens,
        total_tokens=usage.total_tokens,
    )


def get_model(payload: ChatCompletionPayload, requested: str) -> str:
    """Return the model the backend reports, falling back to the requested one.

    Only a non-empty string counts as reported; anything else falls back.
    """
    reported = payload.model
    if isinstance(reported, str) and reported.strip():
        return reported
    return requested


__all__ = [
    "wire_role",
    "format_messages",
    "format_tools",
    "build_chat_params",
    "build_headers",
    "parse_completion",
    "response_to_message",
    "get_usage",
    "get_model",
]
