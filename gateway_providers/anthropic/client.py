"""ClaudeProvider adapter.

Implements the Claude backend on the ``anthropic`` SDK Messages API:
``client.messages.create`` for non-streaming requests and the same call with
``stream=True`` for streaming. The SDK client is created with
``max_retries=0``; the gateway performs no retries.
"""

from __future__ import annotations

import time
from typing import Any, Optional, Sequence

import anthropic

from ..base.adapter_support import chat_error_response, log_chat_end, log_chat_start
from ..base.identity import ProviderIdentity
from ..base.logging import LogContext, get_logger
from ..base.models import ChatMessage, ChatOptions, ChatResponse
from ..base.streaming import BaseStreamingAdapter, StreamSink
from ..base.utils.credentials import require_api_key
from ..base.utils.messages import prepare_messages
from .helpers import build_messages_params, extract_text, extract_usage
from .stream_helpers import translate_stream_event


class ClaudeProvider:
    """Adapter for Claude models (messages family).

    The first system message becomes the ``system`` field (generic prompt when
    absent); only user/assistant turns are sent as the conversation.
    """

    def __init__(self, api_key: Optional[str], base_url: Optional[str] = None, client: Any | None = None) -> None:
        self._api_key = require_api_key(api_key, self.provider_name, "CLAUDE_API_KEY")
        self._base_url = base_url
        self._logger = get_logger("gateway.claude")
        self._client = client if client is not None else self._create_client()

    @property
    def provider_name(self) -> str:
        return ProviderIdentity.CLAUDE.value

    @property
    def display_name(self) -> str:
        return ProviderIdentity.CLAUDE.display_name

    def chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions] = None,
    ) -> ChatResponse:
        opts = options or ChatOptions()
        prepared = prepare_messages(messages)
        ctx = LogContext(provider=self.provider_name, model=model)
        log_chat_start(self._logger, ctx, opts, len(prepared))
        t0 = time.perf_counter()
        try:
            resp = self._client.messages.create(**build_messages_params(model, prepared, opts))
            response = ChatResponse.success(
                model=getattr(resp, "model", None) or model,
                content=extract_text(resp),
                usage=extract_usage(resp),
            )
        except Exception as e:  # noqa: BLE001 - adapter boundary returns explicit error values
            return chat_error_response(self._logger, ctx, e, provider=self.provider_name, model=model)
        log_chat_end(self._logger, ctx, response, latency_ms=(time.perf_counter() - t0) * 1000.0)
        return response

    def stream_chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions],
        sink: StreamSink,
    ) -> None:
        opts = options or ChatOptions()
        prepared = prepare_messages(messages)
        ctx = LogContext(provider=self.provider_name, model=model)

        def _start():
            return self._client.messages.create(**build_messages_params(model, prepared, opts, stream=True))

        BaseStreamingAdapter(
            ctx=ctx,
            provider_name=self.provider_name,
            display_name=self.display_name,
            model=model,
            starter=_start,
            translator=translate_stream_event,
            sink=sink,
            logger=self._logger,
        ).run()

    def _create_client(self) -> anthropic.Anthropic:
        kwargs: dict = {"api_key": self._api_key, "max_retries": 0}
        if self._base_url:
            kwargs["base_url"] = self._base_url
        return anthropic.Anthropic(**kwargs)


__all__ = ["ClaudeProvider"]
