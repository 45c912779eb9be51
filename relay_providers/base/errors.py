"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``relay_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import RETRYABLE_CODES, ErrorCode
from .errors_parts.provider_error import (
    ConfigurationError,
    ExecutionError,
    ProviderError,
    RequestFailed,
    UsageError,
)
from .errors_parts.classification import classify_exception, classify_status

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
