"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `relay_providers.base.errors` for the stable surface.
"""

from .error_code import RETRYABLE_CODES, ErrorCode
from .provider_error import (
    ConfigurationError,
    ExecutionError,
    ProviderError,
    RequestFailed,
    UsageError,
)
from .classification import classify_exception, classify_status

__all__ = [
    "ErrorCode",
    "RETRYABLE_CODES",
    "ProviderError",
    "ExecutionError",
    "RequestFailed",
    "UsageError",
    "ConfigurationError",
    "classify_exception",
    "classify_status",
]
