from __future__ import annotations

import httpx
import pytest

import relay_providers
from relay_providers.base.dto import AdapterParams
from relay_providers.base.errors import ConfigurationError
from relay_providers.base.factory import ProviderFactory, UnknownProviderError, mocks_enabled
from relay_providers.mock import MockProvider
from relay_providers.omg import OmgProvider


def test_factory_unknown_provider():
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("nope")


def test_factory_import_failure(monkeypatch):
    # Register a bogus provider to hit the import error path
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"module": "does.not.exist", "class": "X"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError):
        ProviderFactory.create("bogus")


def test_factory_missing_class(monkeypatch):
    monkeypatch.setattr(
        ProviderFactory,
        "_PROVIDERS",
        {"bogus": {"module": "relay_providers.omg.client", "class": "Nope"}},
        raising=False,
    )
    with pytest.raises(UnknownProviderError, match="not found"):
        ProviderFactory.metadata_for("bogus")


def test_supported_and_metadata_lookup():
    assert ProviderFactory.supported() == ("omg", "mock")  # nosec B101
    assert ProviderFactory.metadata_for("OMG") == OmgProvider.metadata()  # nosec B101
    assert [m.name for m in ProviderFactory.all_metadata()] == ["omg", "mock"]  # nosec B101
    with pytest.raises(UnknownProviderError):
        ProviderFactory.metadata_for("nope")


def test_create_omg_with_default_model(secrets):
    provider = ProviderFactory.create("omg", secrets=secrets, client=httpx.AsyncClient())
    assert isinstance(provider, OmgProvider)  # nosec B101
    assert provider.get_model_config().model_name == "gpt-4o"  # nosec B101


def test_create_omg_with_model_and_params(secrets):
    params = AdapterParams(temperature=0.2, max_tokens=64, base_url="https://params/v1")
    provider = ProviderFactory.create(
        "omg", "claude-3-5-sonnet", params=params, secrets=secrets, client=httpx.AsyncClient()
    )
    cfg = provider.get_model_config()
    assert cfg.model_name == "claude-3-5-sonnet"  # nosec B101
    assert cfg.temperature == 0.2 and cfg.max_tokens == 64  # nosec B101
    assert provider.base_url == "https://params/v1"  # nosec B101


def test_explicit_base_url_kwarg_beats_params(secrets):
    params = AdapterParams(base_url="https://params/v1")
    provider = ProviderFactory.create(
        "omg", params=params, secrets=secrets, client=httpx.AsyncClient(), base_url="https://kwarg/v1"
    )
    assert provider.base_url == "https://kwarg/v1"  # nosec B101


def test_create_without_secret_chains_configuration_error():
    with pytest.raises(UnknownProviderError) as excinfo:
        ProviderFactory.create("omg")
    assert isinstance(excinfo.value.__cause__, ConfigurationError)  # nosec B101


def test_create_rejects_unexpected_kwargs(secrets):
    with pytest.raises(UnknownProviderError, match="Invalid arguments"):
        ProviderFactory.create("omg", secrets=secrets, colour="blue")


@pytest.mark.usefixtures("enable_mock_providers")
def test_mock_routing_replaces_real_provider():
    assert mocks_enabled()  # nosec B101
    provider = ProviderFactory.create("omg")
    assert isinstance(provider, MockProvider)  # nosec B101
    assert provider.provider_name == "omg"  # nosec B101
    assert provider.get_model_config().model_name == "mock-gpt"  # nosec B101


def test_mock_routing_is_off_by_default():
    assert not mocks_enabled()  # nosec B101


def test_configured_lists_providers_with_keys(monkeypatch):
    assert ProviderFactory.configured() == ("mock",)  # nosec B101
    monkeypatch.setenv("OMG_API_KEY", "sk-live")
    assert ProviderFactory.configured() == ("omg", "mock")  # nosec B101


def test_top_level_create_delegates():
    provider = relay_providers.create("mock", "mock-large")
    assert isinstance(provider, MockProvider)  # nosec B101
    assert provider.get_model_config().model_name == "mock-large"  # nosec B101
