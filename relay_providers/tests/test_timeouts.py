from __future__ import annotations

import httpx

from relay_providers.base.http import create_async_client
from relay_providers.base.timeouts import TimeoutConfig, as_httpx_timeout, get_timeout_config


def test_defaults_when_env_unset():
    cfg = get_timeout_config()
    assert cfg == TimeoutConfig(http_timeout_seconds=60.0, connect_timeout_seconds=10.0)  # nosec B101


def test_env_overrides_are_picked_up_at_runtime(monkeypatch):
    get_timeout_config()
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "5")
    monkeypatch.setenv("PT_TIMEOUT_CONNECT_SECONDS", "1.5")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 5.0  # nosec B101
    assert cfg.connect_timeout_seconds == 1.5  # nosec B101


def test_non_positive_or_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "-3")
    monkeypatch.setenv("PT_TIMEOUT_CONNECT_SECONDS", "soon")
    assert get_timeout_config() == TimeoutConfig()  # nosec B101


def test_as_httpx_timeout_translation():
    timeout = as_httpx_timeout(TimeoutConfig(http_timeout_seconds=30.0, connect_timeout_seconds=2.0))
    assert timeout == httpx.Timeout(30.0, connect=2.0)  # nosec B101


def test_created_client_uses_configured_timeouts(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "7")
    client = create_async_client(headers={"User-Agent": "relay"})
    assert client.timeout.read == 7.0  # nosec B101
    assert client.headers["User-Agent"] == "relay"  # nosec B101
