"""Models parts package public surface.

Re-exports individual DTOs so callers can import from
`relay_providers.base.models_parts` if needed, while `relay_providers.base.models`
remains the primary stable import path.
"""

from .content_part import Content, ContentPartType, ImageContent, TextContent, ToolRequest, ToolResponse
from .message import Message, Role, conversation
from .model_config import ModelConfig
from .provider_metadata import ConfigKey, ProviderMetadata
from .tool import Tool
from .usage import ProviderUsage, Usage

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
