"""DTO validation package for providers."""

from .adapter_params import AdapterParams
from .openai_wire import (
    ChatCompletionPayload,
    ChoiceMessagePayload,
    ChoicePayload,
    ToolCallFunctionPayload,
    ToolCallPayload,
    UsagePayload,
)

__all__ = [
    "AdapterParams",
    "ChatCompletionPayload",
    "ChoiceMessagePayload",
    "ChoicePayload",
    "ToolCallFunctionPayload",
    "ToolCallPayload",
    "UsagePayload",
]
