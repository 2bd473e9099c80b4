"""Message preparation helpers: defaults, system prompt injection, system split."""

from __future__ import annotations

from gateway_providers.base.models import ChatMessage
from gateway_providers.base.utils.messages import (
    default_messages,
    ensure_system_message,
    prepare_messages,
    split_system_message,
    to_wire_messages,
)
from gateway_providers.config.defaults import (
    DEFAULT_SYSTEM_PROMPT,
    DEFAULT_USER_PROMPT,
    GENERIC_SYSTEM_PROMPT,
)


def test_empty_conversation_gets_default_prompt_and_system_message():
    out = prepare_messages([])
    assert [m.role for m in out] == ["system", "user"]
    assert out[0].content == DEFAULT_SYSTEM_PROMPT
    assert out[1].content == DEFAULT_USER_PROMPT


def test_none_is_treated_as_empty():
    assert prepare_messages(None) == prepare_messages([])


def test_prepare_is_idempotent():
    once = prepare_messages([ChatMessage(role="user", content="hi")])
    twice = prepare_messages(once)
    assert once == twice
    assert sum(1 for m in twice if m.role == "system") == 1


def test_existing_system_message_is_kept_in_place():
    msgs = [
        ChatMessage(role="user", content="hi"),
        ChatMessage(role="system", content="be brief"),
    ]
    out = ensure_system_message(msgs)
    assert out == msgs
    assert out is not msgs


def test_prepare_does_not_mutate_input():
    msgs = [ChatMessage(role="user", content="hi")]
    prepare_messages(msgs)
    assert len(msgs) == 1


def test_default_messages_returns_fresh_list():
    a = default_messages()
    a.append(ChatMessage(role="user", content="extra"))
    assert len(default_messages()) == 1


def test_split_system_takes_first_system_and_drops_the_rest():
    msgs = [
        ChatMessage(role="system", content="first"),
        ChatMessage(role="user", content="q"),
        ChatMessage(role="system", content="second"),
        ChatMessage(role="assistant", content="a"),
    ]
    system, conversation = split_system_message(msgs)
    assert system == "first"
    assert [m.role for m in conversation] == ["user", "assistant"]


def test_split_system_falls_back_to_generic_prompt():
    system, conversation = split_system_message([ChatMessage(role="user", content="q")])
    assert system == GENERIC_SYSTEM_PROMPT
    assert len(conversation) == 1


def test_to_wire_messages_shape():
    wire = to_wire_messages([ChatMessage(role="user", content="q")])
    assert wire == [{"role": "user", "content": "q"}]
