"""BaseRestProvider: shared adapter for the bespoke REST backends.

Subclasses declare their endpoints and content candidate paths as class
attributes; request shaping, streaming and failure handling live here.

Stream translation:
- Each ``data:`` line's content (first candidate path that yields a
  non-empty string) becomes a ``chunk``.
- Normal end of body produces ``finish`` with reason ``"stop"``; these
  backends do not report one.
- A non-2xx status or transport failure produces ``error`` and no finish.
"""

from __future__ import annotations

import time
from typing import Any, ClassVar, List, Optional, Sequence, Tuple

import httpx

from ..adapter_support import chat_error_response, log_chat_end, log_chat_start
from ..http import get_httpx_client
from ..identity import ProviderIdentity
from ..logging import LogContext, get_logger
from ..models import ChatMessage, ChatOptions, ChatResponse
from ..streaming import BaseStreamingAdapter, StreamSink
from ..streaming.sse import ContentPath, first_present
from ..timeouts import get_timeout_config
from ..utils.credentials import require_api_key, require_base_url
from ..utils.messages import prepare_messages
from .helpers import (
    build_headers,
    build_request_body,
    iter_response_lines,
    iter_response_payloads,
    make_payload_translator,
)


class BaseRestProvider:
    """Reusable base class for REST chat-style backends.

    Subclasses must define:
    - ``identity``: the :class:`ProviderIdentity` served.
    - ``api_key_env`` / ``base_url_env``: variable names used in error messages.
    - ``chat_path`` / ``stream_path``: endpoint paths under the base URL.
    - ``chat_content_paths`` / ``stream_content_paths``: ordered candidates.
    - ``timeout_field``: attribute of ``TimeoutConfig`` to use.
    - ``passthrough_choices``: keep the backend's ``choices`` when present.
    """

    identity: ClassVar[ProviderIdentity]
    api_key_env: ClassVar[str]
    base_url_env: ClassVar[str]
    chat_path: ClassVar[str]
    stream_path: ClassVar[str]
    chat_content_paths: ClassVar[Tuple[ContentPath, ...]]
    stream_content_paths: ClassVar[Tuple[ContentPath, ...]]
    timeout_field: ClassVar[str] = "rest_timeout_seconds"
    passthrough_choices: ClassVar[bool] = True

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str],
        http_client: Optional[httpx.Client] = None,
    ) -> None:
        name = self.identity.value
        self._api_key = require_api_key(api_key, name, self.api_key_env)
        self._base_url = require_base_url(base_url, name, self.base_url_env)
        self._logger = get_logger(f"gateway.{name}")
        self._http = http_client if http_client is not None else get_httpx_client(self._base_url, purpose=name)

    @property
    def provider_name(self) -> str:
        return self.identity.value

    @property
    def display_name(self) -> str:
        return self.identity.display_name

    @property
    def timeout_seconds(self) -> float:
        return float(getattr(get_timeout_config(), self.timeout_field))

    # ----- Chat -----
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
            resp = self._http.post(
                self._url(self.chat_path),
                json=build_request_body(prepared, model, opts),
                headers=build_headers(self._api_key),
                timeout=self.timeout_seconds,
            )
            resp.raise_for_status()
            response = self._to_response(resp.json(), model)
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
        opts = options or ChatOptions()
        prepared = prepare_messages(messages)
        ctx = LogContext(provider=self.provider_name, model=model)

        def _start():
            lines = iter_response_lines(
                self._http,
                self._url(self.stream_path),
                body=build_request_body(prepared, model, opts),
                headers=build_headers(self._api_key),
                timeout=self.timeout_seconds,
            )
            return iter_response_payloads(lines, self._logger)

        BaseStreamingAdapter(
            ctx=ctx,
            provider_name=self.provider_name,
            display_name=self.display_name,
            model=model,
            starter=_start,
            translator=make_payload_translator(self.stream_content_paths),
            sink=sink,
            logger=self._logger,
        ).run()

    # ----- helpers -----
    def _url(self, path: str) -> str:
        return f"{self._base_url}{path}"

    def _to_response(self, data: Any, model: str) -> ChatResponse:
        payload = data if isinstance(data, dict) else {}
        content = first_present(payload, self.chat_content_paths) or ""
        choices: Optional[List[Any]] = None
        if self.passthrough_choices and isinstance(payload.get("choices"), list):
            choices = payload["choices"]
        usage = payload.get("usage") if isinstance(payload.get("usage"), dict) else None
        created = payload.get("created") if isinstance(payload.get("created"), (int, float)) else None
        return ChatResponse.success(
            model=model,
            content=content,
            choices=choices,
            usage=usage,
            created=created,
        )


__all__ = ["BaseRestProvider"]
