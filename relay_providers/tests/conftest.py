"""Pytest configuration for the providers test suite.

Every test runs with a scrubbed provider environment so results never depend
on a developer's shell or ``.env`` file. HTTP is faked with
``httpx.MockTransport``; no test touches the network.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

import httpx
import pytest

from relay_providers.base.models import ModelConfig
from relay_providers.config import reset_config_cache
from relay_providers.config.secret_store import StaticSecretStore
from relay_providers.omg import OmgProvider
from relay_providers.tests.utils import TEST_API_KEY, RecordingTransport

_SCRUBBED_ENV = (
    "OMG_API_KEY",
    "OMG_BASE_URL",
    "OMG_MODEL",
    "PROVIDERS_CONFIG_FILE",
    "RELAY_USE_MOCKS",
    "RELAY_LOG_LEVEL",
    "PT_TIMEOUT_HTTP_SECONDS",
    "PT_TIMEOUT_CONNECT_SECONDS",
)


@pytest.fixture(autouse=True)
def isolated_provider_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Iterator[None]:
    """Remove provider env vars and point the ``.env`` loader at a missing file."""
    for name in _SCRUBBED_ENV:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("DOTENV_FILE", str(tmp_path / "absent.env"))
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def secrets() -> StaticSecretStore:
    return StaticSecretStore({"OMG_API_KEY": TEST_API_KEY})


@pytest.fixture()
def make_provider(secrets):
    """Return a builder ``(responder, **model_kwargs) -> (provider, transport)``."""

    def _build(
        responder: Callable[[httpx.Request], Any],
        *,
        model: str = "gpt-4o",
        base_url: Optional[str] = None,
        **model_kwargs: Any,
    ):
        transport = RecordingTransport(responder)
        client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        provider = OmgProvider.from_env(
            ModelConfig(model, **model_kwargs),
            secrets=secrets,
            client=client,
            base_url=base_url,
        )
        return provider, transport

    return _build


@pytest.fixture()
def enable_mock_providers(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Enable mock providers via environment toggle for the duration of a test."""
    monkeypatch.setenv("RELAY_USE_MOCKS", "1")
    yield
    monkeypatch.delenv("RELAY_USE_MOCKS", raising=False)
