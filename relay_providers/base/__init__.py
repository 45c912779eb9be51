"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, and the provider factory for use
within the providers layer.

- Interfaces: the asynchronous ``Provider`` contract
- Models (DTOs): conversation, tool, model config, usage and metadata objects
- Errors: the ``ProviderError`` taxonomy
- Factory: lazy creation of provider adapters by canonical name
"""

from .errors import (
    ConfigurationError,
    ErrorCode,
    ExecutionError,
    ProviderError,
    RequestFailed,
    UsageError,
)
from .factory import ProviderFactory, UnknownProviderError
from .interfaces import Provider
from .models import (
    ConfigKey,
    Content,
    ImageContent,
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Role,
    TextContent,
    Tool,
    ToolRequest,
    ToolResponse,
    Usage,
)
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
    "Role",
    "Content",
    "TextContent",
    "ImageContent",
    "ToolRequest",
    "ToolResponse",
    "Message",
    "Tool",
    "ModelConfig",
    "Usage",
    "ProviderUsage",
    "ConfigKey",
    "ProviderMetadata",
    # Interfaces
    "Provider",
    # Errors
    "ErrorCode",
    "ProviderError",
    "ExecutionError",
    "RequestFailed",
    "UsageError",
    "ConfigurationError",
    # Factory
    "ProviderFactory",
    "UnknownProviderError",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
]
