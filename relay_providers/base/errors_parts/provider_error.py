"""
Structured provider error exception types.

``ProviderError`` wraps provider-specific failures with a normalized
`ErrorCode` for consistent handling and structured logging. The subclasses
name the failure *kind* a caller reacts to:

- ``ExecutionError``: local failure before or after the network call
  (header construction, JSON encode/decode, transport errors).
- ``RequestFailed``: the backend answered with a non-2xx status; ``message``
  holds the raw response body verbatim.
- ``UsageError``: token usage could not be extracted from an otherwise valid
  response. Adapters downgrade this to an empty usage record.
- ``ConfigurationError``: a required setting (usually a secret) is missing.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import RETRYABLE_CODES, ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message suitable for logging.
        provider: Provider key where the error originated (e.g., ``"omg"``).
        model: Optional model name associated with the failure.
        retryable: Hint for upstream retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


class ExecutionError(ProviderError):
    """Local failure around the request (encoding, decoding, transport)."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        code: ErrorCode = ErrorCode.INTERNAL,
        raw: Optional[Exception] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            retryable=code in RETRYABLE_CODES,
            raw=raw,
        )


class RequestFailed(ProviderError):
    """Non-2xx response; ``message`` is the untouched response body."""

    def __init__(
        self,
        body: str,
        *,
        provider: str,
        status_code: int,
        model: Optional[str] = None,
        code: ErrorCode = ErrorCode.UNKNOWN,
    ) -> None:
        super().__init__(
            code=code,
            message=body,
            provider=provider,
            model=model,
            retryable=code in RETRYABLE_CODES,
        )
        self.status_code = status_code

    @property
    def body(self) -> str:
        return self.message


class UsageError(ProviderError):
    """Usage statistics were missing or malformed."""

    def __init__(self, message: str, *, provider: str, model: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.MALFORMED_RESPONSE, message=message, provider=provider, model=model)


class ConfigurationError(ProviderError):
    """A required configuration value could not be resolved."""

    def __init__(self, message: str, *, provider: str, key: Optional[str] = None) -> None:
        super().__init__(code=ErrorCode.CONFIGURATION, message=message, provider=provider)
        self.key = key


__all__ = [
    "ProviderError",
    "ExecutionError",
    "RequestFailed",
    "UsageError",
    "ConfigurationError",
]
