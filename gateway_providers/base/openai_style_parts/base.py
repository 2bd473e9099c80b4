"""BaseOpenAIStyleProvider: shared adapter for chat-completions backends.

Purpose:
- One implementation of chat and streaming for every backend reachable
  through the ``openai`` SDK (OpenAI itself, Together's compatible endpoint).
  Subclasses only supply identity, defaults and the SDK client.

Stream translation:
- Delta content becomes a ``chunk`` event; the first chunk carrying a
  ``finish_reason`` produces ``finish`` with that reason and the stream is
  not consumed further.

Retries:
- None. SDK clients are created with ``max_retries=0``.
"""

from __future__ import annotations

import time
from typing import Any, Optional, Sequence

from ..adapter_support import chat_error_response, log_chat_end, log_chat_start
from ..logging import LogContext, get_logger
from ..models import ChatMessage, ChatOptions, ChatResponse
from ..streaming import BaseStreamingAdapter, StreamSink
from ..utils.messages import prepare_messages
from .client_protocol import _ChatCompletionsClient
from .provider_init import _ProviderInit
from .style_helpers import build_chat_params, extract_openai_text, to_plain, translate_openai_delta


class BaseOpenAIStyleProvider:
    """Reusable base class for OpenAI-compatible backends.

    Subclasses must implement:
    - ``provider_name`` and ``display_name``.
    - ``_make_client()``: build the SDK client for ``self._api_key``/``self._base_url``.
    """

    def __init__(self, init: _ProviderInit) -> None:
        self._api_key = init.api_key
        self._base_url = init.base_url
        self._defaults = dict(init.default_options)
        self._extra_body_keys = tuple(init.extra_body_keys)
        self._logger = get_logger(init.logger_name)
        self._client: _ChatCompletionsClient = init.client if init.client is not None else self._make_client()

    # ----- Abstract surface -----
    @property
    def provider_name(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    @property
    def display_name(self) -> str:  # pragma: no cover - abstract
        raise NotImplementedError

    def _make_client(self) -> _ChatCompletionsClient:  # pragma: no cover - abstract
        raise NotImplementedError

    # ----- Chat -----
    def chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions] = None,
    ) -> ChatResponse:
        """Non-streaming completion; failures become an error-flagged response."""
        opts = options or ChatOptions()
        prepared = prepare_messages(messages)
        ctx = LogContext(provider=self.provider_name, model=model)
        log_chat_start(self._logger, ctx, opts, len(prepared))
        t0 = time.perf_counter()
        try:
            params = self._build_params(model, prepared, opts, stream=False)
            resp = self._client.chat.completions.create(**params)
            response = self._to_response(resp, model)
        except Exception as e:  # noqa: BLE001 - adapter boundary returns explicit error values
            return chat_error_response(self._logger, ctx, e, provider=self.provider_name, model=model)
        log_chat_end(self._logger, ctx, response, latency_ms=(time.perf_counter() - t0) * 1000.0)
        return response

    # ----- Streaming -----
    def stream_chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions],
        sink: StreamSink,
    ) -> None:
        """Stream a completion onto ``sink`` through ``BaseStreamingAdapter``."""
        opts = options or ChatOptions()
        prepared = prepare_messages(messages)
        ctx = LogContext(provider=self.provider_name, model=model)

        def _start():
            params = self._build_params(model, prepared, opts, stream=True)
            return self._client.chat.completions.create(**params)

        BaseStreamingAdapter(
            ctx=ctx,
            provider_name=self.provider_name,
            display_name=self.display_name,
            model=model,
            starter=_start,
            translator=translate_openai_delta,
            sink=sink,
            logger=self._logger,
        ).run()

    # ----- helpers -----
    def _build_params(self, model: str, messages: Sequence[ChatMessage], options: ChatOptions, *, stream: bool) -> dict:
        return build_chat_params(
            model=model,
            messages=messages,
            options=options,
            defaults=self._defaults,
            extra_body_keys=self._extra_body_keys,
            stream=stream,
        )

    def _to_response(self, resp: Any, model: str) -> ChatResponse:
        content = extract_openai_text(resp)
        return ChatResponse.success(
            model=getattr(resp, "model", None) or model,
            content=content,
            choices=to_plain(getattr(resp, "choices", None)),
            usage=to_plain(getattr(resp, "usage", None)),
            created=getattr(resp, "created", None),
        )


__all__ = ["BaseOpenAIStyleProvider"]
