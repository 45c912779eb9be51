"""
Provider-agnostic domain models (DTOs) public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.models_parts`` to preserve a stable import path.
"""

from .models_parts.content_part import (
    Content,
    ContentPartType,
    ImageContent,
    TextContent,
    ToolRequest,
    ToolResponse,
)
from .models_parts.message import Message, Role, conversation
from .models_parts.model_config import ModelConfig
from .models_parts.provider_metadata import ConfigKey, ProviderMetadata
from .models_parts.tool import Tool
from .models_parts.usage import ProviderUsage, Usage

__all__ = [
    "Content",
    "ContentPartType",
    "TextContent",
    "ImageContent",
    "ToolRequest",
    "ToolResponse",
    "Message",
    "Role",
    "conversation",
    "ModelConfig",
    "ConfigKey",
    "ProviderMetadata",
    "Tool",
    "ProviderUsage",
    "Usage",
]
