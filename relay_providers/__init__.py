"""relay_providers package

Pluggable chat-completion provider adapters behind one asynchronous contract.

Purpose:
    Provide a minimal, stable API for external consumption (packaging is
    configured via the repository root ``pyproject.toml``). Callers obtain an
    adapter (``create('omg')`` or ``OmgProvider.from_env(...)``) and await
    ``complete(system, messages, tools)``.

Public API (re-exported):
    - Version: ``__version__``
    - Contract: :class:`Provider`
    - Models: :class:`Message`, :class:`Role`, :class:`TextContent`,
      :class:`Tool`, :class:`ModelConfig`, :class:`Usage`,
      :class:`ProviderUsage`, :class:`ProviderMetadata`, :class:`ConfigKey`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`ExecutionError`, :class:`RequestFailed`, :class:`UsageError`,
      :class:`ConfigurationError`
    - Factory: :func:`create`, :class:`ProviderFactory`, :class:`AdapterParams`
"""

from typing import Any, Optional

from .base.dto import AdapterParams
from .base.errors import (
    ConfigurationError,
    ErrorCode,
    ExecutionError,
    ProviderError,
    RequestFailed,
    UsageError,
)
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import Provider
from .base.models import (
    ConfigKey,
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Role,
    TextContent,
    Tool,
    Usage,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Contract
    "Provider",
    # Models
    "ConfigKey",
    "Message",
    "ModelConfig",
    "ProviderMetadata",
    "ProviderUsage",
    "Role",
    "TextContent",
    "Tool",
    "Usage",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "ExecutionError",
    "RequestFailed",
    "UsageError",
    "ConfigurationError",
    "UnknownProviderError",
    # Factory
    "create",
    "ProviderFactory",
    "AdapterParams",
]


def create(provider_name: str, model: Optional[str] = None, *, params: Optional[AdapterParams] = None, **kwargs: Any):
    """Instantiate a provider adapter via ``ProviderFactory``.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"omg"``).
    model:
        Model identifier; ``None`` selects the provider default.
    params:
        Optional ``AdapterParams`` carrying generation settings.
    **kwargs:
        Forwarded to the adapter's ``from_env`` (``secrets``, ``client``,
        ``base_url``).

    Raises
    ------
    UnknownProviderError
        If the name is unknown or the adapter cannot be constructed; a
        ``ConfigurationError`` for a missing secret is chained as the cause.
    """
    return ProviderFactory.create(provider_name, model, params=params, **kwargs)
