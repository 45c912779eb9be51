"""relay_providers.config.secret_store
==================================

Narrow, read-only secret lookup used by adapters at construction time.

Adapters depend on the ``SecretStore`` protocol, never on a mutable global.
Two implementations ship:

- ``EnvSecretStore``: process environment, after the one-time ``.env`` load
  performed by ``relay_providers.config``.
- ``StaticSecretStore``: an in-memory mapping, for hosts that manage secrets
  themselves and for tests.

Secret values are never logged and never included in exception text; errors
name the key only.
"""

from __future__ import annotations

import os
from typing import Mapping, Optional, Protocol, runtime_checkable


class SecretNotFoundError(KeyError):
    """Raised when a secret key has no (non-empty) value."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"secret '{self.key}' is not set"


@runtime_checkable
class SecretStore(Protocol):
    """Read-only secret lookup capability."""

    def get_secret(self, key: str) -> str:
        """Return the secret value or raise ``SecretNotFoundError``."""
        ...


class EnvSecretStore:
    """Resolve secrets from the process environment (and ``.env`` once)."""

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def get_secret(self, key: str) -> str:
        if self._environ is None:
            from . import load_dotenv_once

            load_dotenv_once()
            environ: Mapping[str, str] = os.environ
        else:
            environ = self._environ
        value = environ.get(key)
        if not value:
            raise SecretNotFoundError(key)
        return value


class StaticSecretStore:
    """Serve secrets from a fixed mapping."""

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = dict(values)

    def get_secret(self, key: str) -> str:
        value = self._values.get(key)
        if not value:
            raise SecretNotFoundError(key)
        return value


_DEFAULT_STORE: SecretStore = EnvSecretStore()


def default_secret_store() -> SecretStore:
    """Return the process-wide environment-backed store."""
    return _DEFAULT_STORE


__all__ = [
    "SecretNotFoundError",
    "SecretStore",
    "EnvSecretStore",
    "StaticSecretStore",
    "default_secret_store",
]
