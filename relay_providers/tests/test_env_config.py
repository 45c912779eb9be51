from __future__ import annotations

import json
import os

import pytest

from relay_providers.config import get_provider_config, load_dotenv_once, reset_config_cache
from relay_providers.config.env import (
    ENV_MAP,
    get_env_var_candidates,
    get_env_var_name,
    is_placeholder,
    resolve_provider_key,
)


def test_env_map_contains_omg():
    assert ENV_MAP["omg"] == "OMG_API_KEY"  # nosec B101


def test_get_env_var_name_and_candidates():
    assert get_env_var_name("OMG") == "OMG_API_KEY"  # nosec B101
    assert get_env_var_name("unknown") is None  # nosec B101
    assert list(get_env_var_candidates("omg")) == ["OMG_API_KEY"]  # nosec B101


def test_is_placeholder_heuristics():
    assert is_placeholder("placeholder-value")  # nosec B101
    assert is_placeholder("ChangeMe123")  # nosec B101
    assert is_placeholder("example-key")  # nosec B101
    assert is_placeholder("test_token")  # nosec B101
    assert not is_placeholder("real-value")  # nosec B101
    assert not is_placeholder(None)  # nosec B101


def test_resolve_provider_key(monkeypatch):
    assert resolve_provider_key("omg") == (None, None)  # nosec B101
    monkeypatch.setenv("OMG_API_KEY", "sk-live")
    assert resolve_provider_key("omg") == ("sk-live", "OMG_API_KEY")  # nosec B101


def test_provider_config_defaults():
    cfg = get_provider_config("omg")
    assert cfg == {"model": "gpt-4o", "base_url": "https://api.ohmygpt.com/v1"}  # nosec B101


def test_provider_config_merge_order(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text(
        json.dumps({"omg": {"base_url": "https://file/v1", "model": "file-model", "api_key": "sk-file"}}),
        encoding="utf-8",
    )
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()

    cfg = get_provider_config("omg")
    assert cfg["base_url"] == "https://file/v1"  # nosec B101
    assert cfg["model"] == "file-model"  # nosec B101
    assert "api_key" not in cfg  # nosec B101

    monkeypatch.setenv("OMG_BASE_URL", "https://env/v1")
    assert get_provider_config("omg")["base_url"] == "https://env/v1"  # nosec B101

    cfg = get_provider_config("omg", overrides={"base_url": "https://override/v1", "model": None})
    assert cfg["base_url"] == "https://override/v1"  # nosec B101
    assert cfg["model"] == "file-model"  # nosec B101


def test_yaml_config_file_is_loaded(monkeypatch, tmp_path):
    yaml = pytest.importorskip("yaml")
    path = tmp_path / "providers.yaml"
    path.write_text(yaml.safe_dump({"omg": {"model": "claude-3-5-sonnet"}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_provider_config("omg")["model"] == "claude-3-5-sonnet"  # nosec B101


def test_unreadable_config_content_is_ignored(monkeypatch, tmp_path):
    path = tmp_path / "providers.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    reset_config_cache()
    assert get_provider_config("omg")["model"] == "gpt-4o"  # nosec B101


def test_dotenv_overrides_placeholder_values(monkeypatch, tmp_path):
    dotenv = tmp_path / ".env"
    dotenv.write_text("# comment\nOMG_API_KEY='sk-from-dotenv'\nOMG_BASE_URL=https://dotenv/v1\n", encoding="utf-8")
    monkeypatch.setenv("DOTENV_FILE", str(dotenv))
    # monkeypatch restores both variables after the test
    monkeypatch.setenv("OMG_API_KEY", "placeholder-key")
    monkeypatch.setenv("OMG_BASE_URL", "https://already-set/v1")
    reset_config_cache()

    load_dotenv_once()

    assert os.environ["OMG_API_KEY"] == "sk-from-dotenv"  # nosec B101
    assert os.environ["OMG_BASE_URL"] == "https://already-set/v1"  # nosec B101
