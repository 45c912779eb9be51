"""Unified configuration layer for providers.

Goals
-----
* Centralize defaults (models, base URLs).
* Merge sources in a predictable order:
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. OMG_MODEL, OMG_BASE_URL)
    4. In-code overrides passed to helper
* Provide a single call site: ``get_provider_config(provider: str)``.
* Keep zero hard dependency on PyYAML (load YAML only if available).

API keys are deliberately not merged here; adapters resolve them through
``relay_providers.config.secret_store`` so they never end up in a config dict that
might be logged.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, e.g. OMG_MODEL, OMG_BASE_URL.

External Config File (Optional)
-------------------------------
If PROVIDERS_CONFIG_FILE is set to a path, we attempt to load JSON first.
If that fails and PyYAML is installed, attempt YAML. Structure example:

```
omg:
  model: gpt-4o
  base_url: https://api.ohmygpt.com/v1
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* load_dotenv_once() -> None
* reset_config_cache() -> None
"""
from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional
import json
import os

from .env import is_placeholder
from .defaults import MOCK_DEFAULT_MODEL, OMG_DEFAULT_BASE_URL, OMG_DEFAULT_MODEL

try:  # Optional YAML support
    import yaml  # type: ignore
except ImportError:  # pragma: no cover
    yaml = None  # type: ignore


# -------------------- Defaults --------------------

DEFAULTS: Dict[str, Dict[str, Any]] = {
    "omg": {"model": OMG_DEFAULT_MODEL, "base_url": OMG_DEFAULT_BASE_URL},
    "mock": {"model": MOCK_DEFAULT_MODEL},
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
}


_FILE_CACHE: Optional[Dict[str, Any]] = None
_DOTENV_LOADED = False


def load_dotenv_once() -> None:
    """Lightweight .env loader.

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders (e.g., contain 'placeholder').
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any = {}
    try:
        data = json.loads(text)
    except ValueError:
        if yaml is not None:  # pragma: no cover (depends on optional lib)
            try:
                data = yaml.safe_load(text) or {}
            except yaml.YAMLError:
                data = {}
    if not isinstance(data, dict):
        data = {}
    _FILE_CACHE = data
    return data


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val:
            out[field] = val
    return out


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides
    """
    load_dotenv_once()
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = {}

    cfg |= DEFAULTS.get(name, {})

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        # Keys in config files are ignored; secrets come from the secret store.
        cfg |= {k: v for k, v in file_cfg.items() if k != "api_key"}

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    return cfg


def reset_config_cache() -> None:
    """Forget the cached external config file and ``.env`` load state."""
    global _FILE_CACHE, _DOTENV_LOADED
    _FILE_CACHE = None
    _DOTENV_LOADED = False


__all__ = [
    "DEFAULTS",
    "get_provider_config",
    "load_dotenv_once",
    "reset_config_cache",
]
