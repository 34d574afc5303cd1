"""Conversion of neutral messages into chat-completions wire messages."""
from __future__ import annotations

import json

from xai_streaming.base.models import ContentPart, Message
from xai_streaming.transform import convert_to_openai_messages


def test_plain_strings_pass_through():
    msgs = [Message(role="user", content="hi"), Message(role="assistant", content="hello")]
    assert convert_to_openai_messages(msgs) == [  # nosec B101
        {"role": "user", "content": "hi"},
        {"role": "assistant", "content": "hello"},
    ]


def test_user_parts_with_image_and_tool_result():
    msg = Message(
        role="user",
        content=[
            ContentPart(type="tool_result", data={"tool_use_id": "call_1", "content": "42"}),
            ContentPart(type="text", text="What is this?"),
            ContentPart(type="image", data={"media_type": "image/jpeg", "data": "QUJD"}),
        ],
    )
    out = convert_to_openai_messages([msg])
    assert out[0] == {"role": "tool", "tool_call_id": "call_1", "content": "42"}  # nosec B101
    assert out[1]["role"] == "user"  # nosec B101
    assert out[1]["content"] == [  # nosec B101
        {"type": "text", "text": "What is this?"},
        {"type": "image_url", "image_url": {"url": "data:image/jpeg;base64,QUJD"}},
    ]


def test_tool_result_with_part_list():
    msg = Message(
        role="user",
        content=[
            ContentPart(
                type="tool_result",
                data={"tool_use_id": "t", "content": [ContentPart(type="text", text="a"), {"type": "image"}]},
            )
        ],
    )
    assert convert_to_openai_messages([msg]) == [{"role": "tool", "tool_call_id": "t", "content": "a\n[image]"}]  # nosec B101


def test_assistant_tool_calls():
    msg = Message(
        role="assistant",
        content=[
            ContentPart(type="text", text="Checking."),
            ContentPart(type="tool_use", data={"id": "call_1", "name": "lookup", "input": {"q": "x"}}),
        ],
    )
    (wire,) = convert_to_openai_messages([msg])
    assert wire["content"] == "Checking."  # nosec B101
    call = wire["tool_calls"][0]
    assert call["id"] == "call_1" and call["function"]["name"] == "lookup"  # nosec B101
    assert json.loads(call["function"]["arguments"]) == {"q": "x"}  # nosec B101


def test_empty_assistant_parts_are_dropped():
    assert convert_to_openai_messages([Message(role="assistant", content=[])]) == []  # nosec B101


def test_mixed_history_keeps_order():
    msgs = [
        Message(role="user", content="plain"),
        Message(role="assistant", content=[ContentPart(type="text", text="parts")]),
        Message(role="system", content=[ContentPart(type="text", text="a"), ContentPart(type="image")]),
    ]
    assert convert_to_openai_messages(msgs) == [  # nosec B101
        {"role": "user", "content": "plain"},
        {"role": "assistant", "content": "parts"},
        {"role": "system", "content": "a\n[image]"},
    ]
