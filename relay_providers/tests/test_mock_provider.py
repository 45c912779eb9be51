from __future__ import annotations

import pytest

from relay_providers.base.interfaces import Provider
from relay_providers.base.models import Message, ModelConfig, Role, Usage
from relay_providers.mock import MockProvider
from relay_providers.tests.utils import log_events


@pytest.mark.asyncio
async def test_mock_echoes_last_user_message(capsys):
    provider = MockProvider()
    history = [Message.user("first"), Message.assistant("reply"), Message.user("  second  ")]

    message, usage = await provider.complete("be nice", history)

    assert message.role is Role.ASSISTANT  # nosec B101
    assert message.text() == "mock: second"  # nosec B101
    assert usage.model == "mock-gpt"  # nosec B101
    # "be nice" (2) + first (1) + reply (1) + second (1)
    assert usage.usage == Usage(input_tokens=5, output_tokens=2, total_tokens=7)  # nosec B101
    events = [e["event"] for e in log_events(capsys.readouterr().err)]
    assert events == ["chat.start", "chat.end"]  # nosec B101


@pytest.mark.asyncio
async def test_mock_uses_response_table():
    provider = MockProvider(ModelConfig("mock-large"), responses={"ping": "pong", "*": "fallback"})

    pong, usage = await provider.complete("", [Message.user("ping")])
    other, _ = await provider.complete("", [Message.user("anything")])

    assert pong.text() == "pong"  # nosec B101
    assert other.text() == "fallback"  # nosec B101
    assert usage.model == "mock-large"  # nosec B101


@pytest.mark.asyncio
async def test_mock_empty_canned_reply_is_returned_as_is():
    provider = MockProvider(responses={"quiet": "", "*": "fallback"})

    exact, usage = await provider.complete("", [Message.user("quiet")])
    wildcard_only = MockProvider(responses={"*": ""})
    other, _ = await wildcard_only.complete("", [Message.user("anything")])

    assert exact.text() == ""  # nosec B101
    assert usage.usage.output_tokens == 0  # nosec B101
    assert other.text() == ""  # nosec B101


@pytest.mark.asyncio
async def test_mock_without_user_message_echoes_empty_prompt():
    async with MockProvider() as provider:
        message, _ = await provider.complete("sys", [])
    assert message.text() == "mock: "  # nosec B101


def test_mock_metadata_and_contract():
    meta = MockProvider.metadata()
    assert meta.name == "mock"  # nosec B101
    assert meta.config_keys == []  # nosec B101
    assert isinstance(MockProvider(), Provider)  # nosec B101


def test_mock_from_env_needs_no_configuration():
    provider = MockProvider.from_env(ModelConfig("m"), provider="omg")
    assert provider.provider_name == "omg"  # nosec B101
    assert provider.get_model_config() == ModelConfig("m")  # nosec B101
