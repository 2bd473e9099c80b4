"""ClaudeProvider over an injected Messages API client."""

from __future__ import annotations

import types
from typing import Any, Dict, List

import anthropic
import httpx

from gateway_providers.anthropic import ClaudeProvider
from gateway_providers.anthropic.helpers import build_messages_params, extract_text, extract_usage
from gateway_providers.anthropic.stream_helpers import translate_stream_event
from gateway_providers.base.models import ChatMessage, ChatOptions
from gateway_providers.base.streaming import BufferedSink
from gateway_providers.config.defaults import DEFAULT_SYSTEM_PROMPT, GENERIC_SYSTEM_PROMPT

NS = types.SimpleNamespace


class _FakeMessagesClient:
    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._result = result
        self._error = error
        self.messages = NS(create=self._create)

    def _create(self, **params):
        self.calls.append(params)
        if self._error is not None:
            raise self._error
        return self._result


def _message(text: str = "Hello from Claude") -> NS:
    return NS(
        model="claude-3-5-sonnet-20241022",
        content=[NS(type="text", text=text)],
        usage={"input_tokens": 10, "output_tokens": 4},
    )


def test_params_split_system_and_apply_defaults():
    msgs = [
        ChatMessage(role="system", content="be terse"),
        ChatMessage(role="user", content="q"),
        ChatMessage(role="assistant", content="a"),
    ]
    params = build_messages_params("claude-3-opus-20240229", msgs, ChatOptions(temperature=0))
    assert params["system"] == "be terse"
    assert params["messages"] == [{"role": "user", "content": "q"}, {"role": "assistant", "content": "a"}]
    assert params["temperature"] == 0
    assert params["max_tokens"] == 4096
    assert params["top_p"] == 0.9
    assert "top_k" not in params
    assert "stream" not in params


def test_params_forward_top_k_only_when_set_and_generic_system():
    params = build_messages_params(
        "claude-3-opus-20240229", [ChatMessage(role="user", content="q")], ChatOptions(top_k=0), stream=True
    )
    assert params["top_k"] == 0
    assert params["stream"] is True
    assert params["system"] == GENERIC_SYSTEM_PROMPT


def test_chat_success():
    client = _FakeMessagesClient(result=_message())
    provider = ClaudeProvider(api_key="ck", client=client)

    resp = provider.chat([ChatMessage(role="user", content="hi")], "claude-3-5-sonnet-20241022")

    assert resp.content == "Hello from Claude"
    assert resp.choices == [{"message": {"role": "assistant", "content": "Hello from Claude"}}]
    assert resp.usage == {"input_tokens": 10, "output_tokens": 4, "total_tokens": 14}
    # the default system prompt injected by preparation travels as the system field
    assert client.calls[0]["system"] == DEFAULT_SYSTEM_PROMPT
    assert all(m["role"] != "system" for m in client.calls[0]["messages"])


def test_extract_text_requires_text_block():
    assert extract_text(NS(content=[NS(type="tool_use", id="x")])) == ""
    assert extract_text(NS(content=[])) == ""
    assert extract_usage(NS(usage=None)) is None


def test_chat_failure_is_classified():
    request = httpx.Request("POST", "https://api.anthropic.com/v1/messages")
    err = anthropic.AuthenticationError("invalid x-api-key", response=httpx.Response(401, request=request), body=None)
    provider = ClaudeProvider(api_key="ck", client=_FakeMessagesClient(error=err))
    resp = provider.chat([], "claude-3-5-haiku-20241022")
    assert resp.is_error
    assert resp.model == "claude-3-5-haiku-20241022"
    assert resp.error_code == "auth"


def test_translate_stream_event_variants():
    assert translate_stream_event(NS(type="message_start")) is None
    assert translate_stream_event(NS(type="content_block_delta", delta=NS(type="input_json_delta"))) is None
    delta = translate_stream_event(NS(type="content_block_delta", delta=NS(type="text_delta", text="Hi")))
    assert delta.content == "Hi"
    assert translate_stream_event(NS(type="message_stop")).finish_reason == "stop"


def test_stream_events():
    events_in = [
        NS(type="message_start"),
        NS(type="content_block_start"),
        NS(type="content_block_delta", delta=NS(type="text_delta", text="Hel")),
        NS(type="ping"),
        NS(type="content_block_delta", delta=NS(type="text_delta", text="lo")),
        NS(type="content_block_stop"),
        NS(type="message_delta"),
        NS(type="message_stop"),
    ]
    client = _FakeMessagesClient(result=iter(events_in))
    sink = BufferedSink()

    ClaudeProvider(api_key="ck", client=client).stream_chat(
        [ChatMessage(role="user", content="hi")], "claude-3-5-sonnet-20241022", ChatOptions(), sink
    )

    events = sink.events()
    assert [e.type for e in events] == ["start", "chunk", "chunk", "finish"]
    assert events[0].message == "Connected to Claude"
    assert events[-1].full_content == "Hello"
    assert events[-1].finish_reason == "stop"
    assert client.calls[0]["stream"] is True
    assert sink.done


def test_real_sdk_client_is_built_without_retries():
    provider = ClaudeProvider(api_key="ck")
    assert isinstance(provider._client, anthropic.Anthropic)
    assert provider._client.max_retries == 0
