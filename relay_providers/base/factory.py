"""Provider Factory utilities.

Purpose
-------
Centralize provider-agnostic creation of adapter instances implementing the
``Provider`` contract. Adapters are imported lazily using ``importlib`` to
avoid imports at module import time and to keep side effects out of the
factory layer.

External dependencies
---------------------
- Standard library only (``importlib``). Adapters are imported on-demand.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.

Mock routing
------------
When ``RELAY_USE_MOCKS`` is set to a truthy value (``1``, ``true``, ``yes``),
every known provider name resolves to ``MockProvider`` carrying the requested
provider name for logging.
"""

from __future__ import annotations

import os
from importlib import import_module
from typing import Any, Dict, List, Optional, Tuple, Type

from ..config.defaults import USE_MOCKS_ENV
from ..config.env import resolve_provider_key
from .dto.adapter_params import AdapterParams
from .models import ModelConfig, ProviderMetadata

_TRUTHY = frozenset({"1", "true", "yes", "on"})


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The adapter raised during construction (e.g., a missing secret); the
      original exception is chained.
    """


def create_provider(provider: str, model: Optional[str] = None, **kwargs: Any) -> Any:
    """Shortcut for :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, model, **kwargs)


def mocks_enabled() -> bool:
    """Return True when ``RELAY_USE_MOCKS`` requests mock routing."""
    return os.getenv(USE_MOCKS_ENV, "").strip().lower() in _TRUTHY


class ProviderFactory:
    """Create provider adapters based on a canonical name (e.g., ``"omg"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownProviderError` with actionable messages for unknown
      providers, import failures, missing classes, and construction errors.
    """

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "omg": {"module": "relay_providers.omg.client", "class": "OmgProvider"},
        "mock": {"module": "relay_providers.mock.client", "class": "MockProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        model: Optional[str] = None,
        *,
        params: Optional[AdapterParams] = None,
        **kwargs: Any,
    ) -> Any:
        """Create a provider adapter instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"omg"``).
        model:
            Model identifier; ``None`` selects the adapter's default model.
            Takes precedence over ``params.model``.
        params:
            Optional structured :class:`AdapterParams` supplying generation
            settings and a base URL override.
        **kwargs:
            Forwarded to the adapter's ``from_env`` (``secrets``, ``client``,
            ``base_url``). Explicit kwargs win over ``params``.

        Returns
        -------
        Any
            Instance implementing ``Provider``.

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or construction fails.
        """
        name = (provider or "").lower().strip()
        if name not in cls._PROVIDERS:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        if mocks_enabled() and name != "mock":
            klass = cls._load_class("mock")
            kwargs = {"provider": name}
        else:
            klass = cls._load_class(name)

        meta = klass.metadata()
        params = params or AdapterParams()
        if model:
            params = params.model_copy(update={"model": model})
        if params.base_url and "base_url" not in kwargs:
            kwargs["base_url"] = params.base_url

        try:
            model_config = params.to_model_config(meta.default_model)
            return klass.from_env(model_config, **kwargs)
        except TypeError as exc:
            raise UnknownProviderError(
                f"Invalid arguments for '{provider}' adapter: {exc}"
            ) from exc
        except Exception as exc:
            raise UnknownProviderError(
                f"Failed to initialize provider '{provider}': {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the canonical provider names in deterministic order."""
        return tuple(cls._PROVIDERS.keys())

    @classmethod
    def metadata_for(cls, provider: str) -> ProviderMetadata:
        """Return the static descriptor of ``provider`` without constructing it."""
        name = (provider or "").lower().strip()
        if name not in cls._PROVIDERS:
            raise UnknownProviderError(f"Unknown provider '{provider}'")
        return cls._load_class(name).metadata()

    @classmethod
    def all_metadata(cls) -> List[ProviderMetadata]:
        """Return descriptors for every supported provider."""
        return [cls.metadata_for(name) for name in cls.supported()]

    @classmethod
    def configured(cls) -> Tuple[str, ...]:
        """Return providers whose required secrets are present in the environment.

        Providers without required keys (``mock``) are always listed.
        """
        out = []
        for name in cls.supported():
            if not cls.metadata_for(name).required_keys():
                out.append(name)
                continue
            value, _ = resolve_provider_key(name)
            if value:
                out.append(name)
        return tuple(out)

    @classmethod
    def _load_class(cls, name: str) -> Type:
        spec = cls._PROVIDERS[name]
        module_path, class_name = spec["module"], spec["class"]

        # Import the provider module explicitly (clear error if import fails)
        try:
            mod = import_module(module_path)
        except ImportError as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{name}': {exc}"
            ) from exc

        try:
            return getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{name}'"
            ) from exc


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider", "mocks_enabled"]
