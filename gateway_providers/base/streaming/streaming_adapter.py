"""Base streaming adapter: the shared lifecycle loop for every backend.

Adapters supply two callables:

- ``starter()`` opens the backend stream and returns an iterable of native
  chunks. It is invoked *after* the ``start`` event has been written.
- ``translator(chunk)`` maps one native chunk to a :class:`StreamDelta`
  (text and/or a finish reason) or ``None`` to skip it.

The loop guarantees one ``start``, chunks in arrival order, exactly one
terminal event, and ``end_stream`` on every exit path.
"""
from __future__ import annotations

import logging
import time
from contextlib import ExitStack, suppress
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional

from ..constants import DEFAULT_FINISH_REASON, GENERIC_ERROR_MESSAGE
from ..errors import ProviderError, classify_exception
from ..logging import LogContext, normalized_log_event
from .events import StreamEvent
from .normalizer import create_stream_event, end_stream, write_stream_event
from .sinks import StreamSink
from .streaming_finalize import log_stream_outcome
from .streaming_metrics import StreamMetrics


@dataclass(frozen=True)
class StreamDelta:
    """Translated view of one native chunk."""

    content: Optional[str] = None
    finish_reason: Optional[str] = None


Translator = Callable[[Any], Optional[StreamDelta]]


def register_stream_cleanup(stream: Any, stack: ExitStack) -> None:
    """Register best-effort ``close()`` of the native stream."""
    close_fn = getattr(stream, "close", None)
    if callable(close_fn):
        def _safe_close() -> None:
            with suppress(Exception):
                close_fn()
        stack.callback(_safe_close)


def error_message_of(exc: BaseException) -> str:
    if isinstance(exc, ProviderError):
        return exc.message or GENERIC_ERROR_MESSAGE
    return str(exc) or GENERIC_ERROR_MESSAGE


class BaseStreamingAdapter:
    """Drive one backend stream onto a sink as normalized events."""

    def __init__(
        self,
        *,
        ctx: LogContext,
        provider_name: str,
        display_name: str,
        model: str,
        starter: Callable[[], Iterable[Any]],
        translator: Translator,
        sink: StreamSink,
        logger: logging.Logger,
    ) -> None:
        self.ctx = ctx
        self.provider_name = provider_name
        self.display_name = display_name
        self.model = model
        self._starter = starter
        self._translator = translator
        self._sink = sink
        self._logger = logger
        self._parts: List[str] = []
        self._terminated = False
        self._t0 = 0.0
        self.metrics = StreamMetrics()

    @property
    def full_content(self) -> str:
        return "".join(self._parts)

    def run(self) -> StreamMetrics:
        """Execute the streaming lifecycle; never raises for backend failures."""
        self._t0 = time.perf_counter()
        normalized_log_event(self._logger, "stream.start", self.ctx, phase="start")
        try:
            self._emit(create_stream_event("start", message=f"Connected to {self.display_name}"))
            with ExitStack() as stack:
                stream = self._starter()
                register_stream_cleanup(stream, stack)
                for chunk in stream:
                    delta = self._translator(chunk)
                    if delta is None:
                        continue
                    if delta.content:
                        self._emit_chunk(delta.content)
                    if delta.finish_reason is not None:
                        self._finish(delta.finish_reason)
                        break
            if not self._terminated:
                self._finish(DEFAULT_FINISH_REASON)
        except Exception as exc:  # noqa: BLE001 - converted into the terminal error event
            self._fail(exc)
        finally:
            end_stream(self._sink, self._logger)
        return self.metrics

    # ----- internal helpers -----

    def _emit(self, event: StreamEvent) -> bool:
        ok = write_stream_event(self._sink, event, self._logger)
        if not ok:
            self.metrics.dropped_writes += 1
        return ok

    def _emit_chunk(self, content: str) -> None:
        if self.metrics.emitted == 0:
            self.metrics.time_to_first_token_ms = (time.perf_counter() - self._t0) * 1000.0
        self.metrics.emitted += 1
        self._parts.append(content)
        self._emit(create_stream_event("chunk", content=content))

    def _finish(self, reason: str) -> None:
        if self._terminated:
            return
        self._terminated = True
        full = self.full_content
        self.metrics.content_length = len(full)
        self.metrics.total_duration_ms = (time.perf_counter() - self._t0) * 1000.0
        self._emit(
            create_stream_event(
                "finish",
                finish_reason=reason,
                full_content=full,
                content_length=len(full),
            )
        )
        log_stream_outcome(logger=self._logger, ctx=self.ctx, metrics=self.metrics, finish_reason=reason)

    def _fail(self, exc: Exception) -> None:
        if self._terminated:
            return
        self._terminated = True
        code = classify_exception(exc).value
        message = error_message_of(exc)
        self.metrics.content_length = len(self.full_content)
        self.metrics.total_duration_ms = (time.perf_counter() - self._t0) * 1000.0
        self._emit(create_stream_event("error", error=message, code=code))
        log_stream_outcome(
            logger=self._logger,
            ctx=self.ctx,
            metrics=self.metrics,
            error=message,
            error_code=code,
        )


__all__ = [
    "BaseStreamingAdapter",
    "StreamDelta",
    "Translator",
    "register_stream_cleanup",
    "error_message_of",
]
