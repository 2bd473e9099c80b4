"""Shared fixtures for the gateway test suite.

- ``log_capture`` collects records from the ``gateway`` logger hierarchy and
  decodes the structured JSON payloads.
- ``recording_provider`` builds an in-memory adapter that records every call
  and streams through the real ``BaseStreamingAdapter``.
- Pooled HTTP clients are closed after the session.
"""

from __future__ import annotations

import json
import logging
from contextlib import suppress
from typing import Any, Dict, Iterator, List, Optional, Sequence

import pytest

from gateway_providers.base.http import close_all_clients
from gateway_providers.base.identity import ProviderIdentity
from gateway_providers.base.logging import BASE_LOGGER_NAME, get_logger
from gateway_providers.base.log_support import LogContext
from gateway_providers.base.models import ChatMessage, ChatOptions, ChatResponse
from gateway_providers.base.streaming import BaseStreamingAdapter, StreamDelta, StreamSink


class _ListHandler(logging.Handler):
    """Capture log records into a list for assertions."""

    def __init__(self) -> None:
        super().__init__(level=logging.DEBUG)
        self.records: List[logging.LogRecord] = []

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def events(self, name: Optional[str] = None) -> List[Dict[str, Any]]:
        out: List[Dict[str, Any]] = []
        for record in self.records:
            try:
                payload = json.loads(record.getMessage())
            except ValueError:
                continue
            if isinstance(payload, dict) and (name is None or payload.get("event") == name):
                out.append(payload)
        return out


@pytest.fixture()
def log_capture(monkeypatch: pytest.MonkeyPatch) -> Iterator[_ListHandler]:
    """Attach a collecting handler to the shared ``gateway`` logger at DEBUG level."""
    monkeypatch.setenv("GATEWAY_LOG_LEVEL", "DEBUG")
    logger = get_logger(BASE_LOGGER_NAME)
    handler = _ListHandler()
    logger.addHandler(handler)
    try:
        yield handler
    finally:
        logger.removeHandler(handler)
        monkeypatch.delenv("GATEWAY_LOG_LEVEL", raising=False)
        get_logger(BASE_LOGGER_NAME)


class RecordingProvider:
    """In-memory adapter used wherever a real backend is irrelevant."""

    def __init__(
        self,
        identity: ProviderIdentity = ProviderIdentity.TOGETHER,
        content: str = "Hello there",
        chunks: Sequence[str] = ("Hello", " ", "there"),
        fail_with: Optional[Exception] = None,
    ) -> None:
        self.identity = identity
        self.content = content
        self.chunks = tuple(chunks)
        self.fail_with = fail_with
        self.calls: List[Dict[str, Any]] = []

    @property
    def provider_name(self) -> str:
        return self.identity.value

    @property
    def display_name(self) -> str:
        return self.identity.display_name

    def chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions] = None,
    ) -> ChatResponse:
        self.calls.append({"method": "chat", "messages": list(messages), "model": model, "options": options})
        if self.fail_with is not None:
            raise self.fail_with
        return ChatResponse.success(model=model, content=self.content)

    def stream_chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions],
        sink: StreamSink,
    ) -> None:
        self.calls.append({"method": "stream_chat", "messages": list(messages), "model": model, "options": options})
        if self.fail_with is not None:
            raise self.fail_with
        BaseStreamingAdapter(
            ctx=LogContext(provider=self.provider_name, model=model),
            provider_name=self.provider_name,
            display_name=self.display_name,
            model=model,
            starter=lambda: list(self.chunks),
            translator=lambda c: StreamDelta(content=c),
            sink=sink,
            logger=get_logger(f"gateway.{self.provider_name}"),
        ).run()


@pytest.fixture()
def recording_provider():
    """Factory fixture: ``recording_provider(identity=..., content=..., ...)``."""
    return RecordingProvider


@pytest.fixture(scope="session", autouse=True)
def close_http_clients_after_session() -> Iterator[None]:
    yield
    with suppress(Exception):
        close_all_clients()
