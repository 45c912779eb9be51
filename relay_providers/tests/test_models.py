from __future__ import annotations

import dataclasses

import pytest

from relay_providers.base.models import (
    ConfigKey,
    ImageContent,
    Message,
    ModelConfig,
    ProviderMetadata,
    ProviderUsage,
    Role,
    TextContent,
    Tool,
    Usage,
    conversation,
)


def test_message_normalizes_content_and_role():
    m = Message(role="user", content=[TextContent("a")])
    assert m.role is Role.USER  # nosec B101
    assert m.content == (TextContent("a"),)  # nosec B101
    assert isinstance(m.created, int)  # nosec B101


def test_message_is_immutable_and_builders_return_copies():
    m = Message.user("a")
    m2 = m.with_text("b").with_content(ImageContent(data="x", mime_type="image/png"))
    assert m.text() == "a"  # nosec B101
    assert m2.text() == "a\nb"  # nosec B101
    assert len(m2.content) == 3  # nosec B101
    with pytest.raises(dataclasses.FrozenInstanceError):
        m.role = Role.ASSISTANT  # type: ignore[misc]


def test_message_rejects_system_role():
    with pytest.raises(ValueError):
        Message(role="system")


def test_message_to_dict():
    m = Message(role=Role.ASSISTANT, content=(TextContent("hi"),), created=5)
    assert m.to_dict() == {  # nosec B101
        "role": "assistant",
        "created": 5,
        "content": [{"text": "hi", "type": "text"}],
    }


def test_conversation_flattens():
    a, b, c = Message.user("a"), Message.assistant("b"), Message.user("c")
    assert conversation(a, [b, c]) == [a, b, c]  # nosec B101


def test_model_config_requires_name():
    with pytest.raises(ValueError):
        ModelConfig("  ")


def test_usage_absent_counters_stay_none():
    usage = Usage(input_tokens=3)
    assert usage.output_tokens is None and not usage.is_empty()  # nosec B101
    assert Usage().is_empty()  # nosec B101
    assert ProviderUsage(model="m").to_dict() == {  # nosec B101
        "model": "m",
        "usage": {"input_tokens": None, "output_tokens": None, "total_tokens": None},
    }


def test_tool_default_schema_is_an_object():
    assert Tool(name="t").input_schema == {"type": "object", "properties": {}}  # nosec B101


def test_provider_metadata_required_keys():
    meta = ProviderMetadata(
        name="x",
        display_name="X",
        description="d",
        default_model="m",
        config_keys=[ConfigKey("A", required=True, secret=True), ConfigKey("B", required=False, secret=False, default="b")],
    )
    assert [k.name for k in meta.required_keys()] == ["A"]  # nosec B101
    assert meta.to_dict()["config_keys"][1]["default"] == "b"  # nosec B101
