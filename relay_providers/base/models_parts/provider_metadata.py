"""
Static provider descriptors.

``ProviderMetadata`` describes an adapter without constructing it: identifier,
labels, default and known models, documentation link and the configuration keys
it needs. Configuration and UI layers use it to discover capabilities and
required secrets.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class ConfigKey:
    """A configuration entry an adapter reads.

    Attributes:
        name: Key name, e.g. ``"OMG_API_KEY"``.
        required: Whether construction fails without it.
        secret: Whether the value must be treated as sensitive.
        default: Value used when the key is unset (never for secrets).
    """

    name: str
    required: bool
    secret: bool
    default: Optional[str] = None


@dataclass(frozen=True)
class ProviderMetadata:
    """Descriptor for a provider adapter.

    Attributes:
        name: Stable provider identifier (e.g., ``"omg"``).
        display_name: Human label.
        description: One-line capability summary.
        default_model: Model used when the host does not choose one.
        known_models: Advisory list for autocomplete/validation, not an
            allow-list.
        model_doc_link: Documentation URL for the backend's models.
        config_keys: Ordered configuration keys.
    """

    name: str
    display_name: str
    description: str
    default_model: str
    known_models: List[str] = field(default_factory=list)
    model_doc_link: str = ""
    config_keys: List[ConfigKey] = field(default_factory=list)

    def required_keys(self) -> List[ConfigKey]:
        return [k for k in self.config_keys if k.required]

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary of the descriptor."""
        return asdict(self)


__all__ = [
    "ConfigKey",
    "ProviderMetadata",
]
