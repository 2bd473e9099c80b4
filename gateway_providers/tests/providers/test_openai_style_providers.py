"""OpenAI and Together adapters over injected chat-completions clients.

Responses and chunks are real ``openai`` SDK types built with
``model_validate`` so translation runs against the actual object shapes.
"""

from __future__ import annotations

import types
from typing import Any, Dict, List

import httpx
import openai
import pytest
from openai.types.chat import ChatCompletion, ChatCompletionChunk

from gateway_providers.base.constants import ERROR_FALLBACK_CONTENT
from gateway_providers.base.errors import ConfigurationError
from gateway_providers.base.models import ChatMessage, ChatOptions
from gateway_providers.base.streaming import BufferedSink
from gateway_providers.config.defaults import DEFAULT_SYSTEM_PROMPT, TOGETHER_DEFAULT_BASE_URL
from gateway_providers.openai import OpenAIProvider
from gateway_providers.together import TogetherProvider


def _completion(content: str = "Hi!") -> ChatCompletion:
    return ChatCompletion.model_validate(
        {
            "id": "cmpl-1",
            "object": "chat.completion",
            "created": 1700000000,
            "model": "gpt-4o-2024-08-06",
            "choices": [{"index": 0, "finish_reason": "stop", "message": {"role": "assistant", "content": content}}],
            "usage": {"prompt_tokens": 3, "completion_tokens": 2, "total_tokens": 5},
        }
    )


def _chunk(content: Any = None, finish_reason: Any = None) -> ChatCompletionChunk:
    return ChatCompletionChunk.model_validate(
        {
            "id": "chunk-1",
            "object": "chat.completion.chunk",
            "created": 1700000000,
            "model": "gpt-4o",
            "choices": [{"index": 0, "delta": {"content": content}, "finish_reason": finish_reason}],
        }
    )


class _FakeClient:
    """Records ``chat.completions.create`` params and replays a canned result."""

    def __init__(self, result: Any = None, error: Exception | None = None) -> None:
        self.calls: List[Dict[str, Any]] = []
        self._result = result
        self._error = error
        self.chat = types.SimpleNamespace(completions=types.SimpleNamespace(create=self._create))

    def _create(self, **params):  # noqa: D401 - SDK parity
        self.calls.append(params)
        if self._error is not None:
            raise self._error
        return self._result


_USER = [ChatMessage(role="user", content="hi")]


def test_openai_chat_success_passes_through_backend_fields():
    client = _FakeClient(result=_completion("Hi!"))
    provider = OpenAIProvider(api_key="sk-test", client=client)

    resp = provider.chat(_USER, "gpt-4o")

    assert not resp.is_error
    assert resp.content == "Hi!"
    assert resp.model == "gpt-4o-2024-08-06"
    assert resp.created == 1700000000
    assert resp.usage["total_tokens"] == 5
    assert resp.choices[0]["message"]["content"] == "Hi!"
    assert resp.response_length == 3


def test_openai_params_defaults_and_prepared_messages():
    client = _FakeClient(result=_completion())
    OpenAIProvider(api_key="sk-test", client=client).chat(_USER, "gpt-4o", ChatOptions(temperature=0, top_k=7))

    params = client.calls[0]
    assert params["model"] == "gpt-4o"
    assert params["stream"] is False
    assert params["messages"][0] == {"role": "system", "content": DEFAULT_SYSTEM_PROMPT}
    assert params["messages"][1] == {"role": "user", "content": "hi"}
    assert params["temperature"] == 0
    assert params["max_tokens"] == 4096
    assert params["top_p"] == 0.9
    assert params["presence_penalty"] == 0
    assert params["frequency_penalty"] == 0
    assert "top_k" not in params
    assert "extra_body" not in params


def test_together_sends_non_openai_params_in_extra_body():
    client = _FakeClient(result=_completion())
    provider = TogetherProvider(api_key="tk", client=client)
    provider.chat(_USER, "deepseek-ai/DeepSeek-V3", ChatOptions(top_k=0, presence_penalty=0.5))

    params = client.calls[0]
    assert params["extra_body"] == {"top_k": 0, "repetition_penalty": 1.1, "min_p": 0.01}
    assert params["presence_penalty"] == 0.5
    assert params["frequency_penalty"] == 0.1
    assert provider._base_url == TOGETHER_DEFAULT_BASE_URL


def test_chat_failure_returns_error_response_with_requested_model(log_capture):
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    err = openai.RateLimitError("Rate limit reached", response=httpx.Response(429, request=request), body=None)
    provider = OpenAIProvider(api_key="sk-test", client=_FakeClient(error=err))

    resp = provider.chat(_USER, "gpt-4o")

    assert resp.is_error
    assert resp.model == "gpt-4o"
    assert resp.content == ERROR_FALLBACK_CONTENT
    assert resp.error_code == "rate_limit"
    assert resp.error
    errors = log_capture.events("chat.error")
    assert errors[-1]["error_code"] == "rate_limit"
    assert errors[-1]["provider"] == "openai"


def test_stream_stops_at_first_finish_reason():
    chunks = [
        _chunk(content="Hel"),
        _chunk(content="lo"),
        _chunk(finish_reason="stop"),
        _chunk(content="never"),
    ]
    client = _FakeClient(result=iter(chunks))
    sink = BufferedSink()

    OpenAIProvider(api_key="sk-test", client=client).stream_chat(_USER, "gpt-4o", None, sink)

    events = sink.events()
    assert [e.type for e in events] == ["start", "chunk", "chunk", "finish"]
    assert events[0].message == "Connected to OpenAI"
    assert events[-1].finish_reason == "stop"
    assert events[-1].full_content == "Hello"
    assert events[-1].content_length == 5
    assert sink.done and sink.closed
    assert client.calls[0]["stream"] is True


def test_stream_without_finish_reason_finishes_with_stop():
    client = _FakeClient(result=iter([_chunk(content="a"), _chunk(content="")]))
    sink = BufferedSink()
    TogetherProvider(api_key="tk", client=client).stream_chat(_USER, "deepseek-ai/DeepSeek-V3", ChatOptions(), sink)
    events = sink.events()
    assert events[0].message == "Connected to Together AI"
    assert [e.type for e in events] == ["start", "chunk", "finish"]
    assert events[-1].finish_reason == "stop"


def test_stream_start_failure_emits_error_after_start():
    request = httpx.Request("POST", "https://api.together.xyz/v1/chat/completions")
    client = _FakeClient(error=openai.APITimeoutError(request=request))
    sink = BufferedSink()
    TogetherProvider(api_key="tk", client=client).stream_chat(_USER, "deepseek-ai/DeepSeek-V3", None, sink)
    events = sink.events()
    assert [e.type for e in events] == ["start", "error"]
    assert events[-1].code == "timeout"
    assert sink.done


@pytest.mark.parametrize("key", [None, "", "   "])
def test_blank_key_fails_construction(key):
    with pytest.raises(ConfigurationError) as info:
        OpenAIProvider(api_key=key)
    assert info.value.message == "OPENAI_API_KEY is empty or not set"


def test_invalid_base_url_fails_construction():
    with pytest.raises(ConfigurationError):
        TogetherProvider(api_key="tk", base_url="ftp://nope")


def test_real_sdk_client_is_built_without_retries():
    provider = OpenAIProvider(api_key="sk-test", base_url="https://proxy.example/v1/")
    assert isinstance(provider._client, openai.OpenAI)
    assert provider._client.max_retries == 0
    assert str(provider._client.base_url).startswith("https://proxy.example/v1")
