"""Lifecycle contract of BaseStreamingAdapter.

Every run produces one ``start``, chunks in arrival order, exactly one
terminal event and then ``[DONE]`` with the sink closed, whatever the backend
does.
"""

from __future__ import annotations

from typing import Iterator, List, Optional

import httpx

from gateway_providers.base.logging import get_logger
from gateway_providers.base.log_support import LogContext
from gateway_providers.base.streaming import BaseStreamingAdapter, BufferedSink, StreamDelta


class _ClosableStream:
    def __init__(self, items: List[object], fail_after: Optional[int] = None) -> None:
        self._items = items
        self._fail_after = fail_after
        self.closed = False
        self.consumed = 0

    def __iter__(self) -> Iterator[object]:
        for i, item in enumerate(self._items):
            if self._fail_after is not None and i == self._fail_after:
                raise httpx.ReadError("connection reset")
            self.consumed += 1
            yield item

    def close(self) -> None:
        self.closed = True


def _run(starter, translator=None, sink=None):
    sink = sink if sink is not None else BufferedSink()
    adapter = BaseStreamingAdapter(
        ctx=LogContext(provider="fake", model="m"),
        provider_name="fake",
        display_name="Fake",
        model="m",
        starter=starter,
        translator=translator or (lambda c: c),
        sink=sink,
        logger=get_logger("gateway.test.stream"),
    )
    metrics = adapter.run()
    return sink, metrics


def _assert_envelope(sink: BufferedSink) -> None:
    types = [e.type for e in sink.events()]
    assert types[0] == "start"
    assert types.count("start") == 1
    assert sum(1 for t in types if t in ("finish", "error")) == 1
    assert types[-1] in ("finish", "error")
    assert sink.frames[-1] == "data: [DONE]\n\n"
    assert sink.closed


def test_chunks_concatenate_to_full_content():
    sink, metrics = _run(lambda: [StreamDelta(content="He"), None, StreamDelta(content="llo")])
    _assert_envelope(sink)
    events = sink.events()
    assert events[0].message == "Connected to Fake"
    chunks = [e.content for e in events if e.type == "chunk"]
    finish = events[-1]
    assert chunks == ["He", "llo"]
    assert finish.finish_reason == "stop"
    assert finish.full_content == "".join(chunks)
    assert finish.content_length == len(finish.full_content)
    assert metrics.emitted == 2
    assert metrics.time_to_first_token_ms is not None


def test_backend_finish_reason_stops_consumption():
    stream = _ClosableStream(
        [StreamDelta(content="a"), StreamDelta(finish_reason="length"), StreamDelta(content="ignored")]
    )
    sink, _ = _run(lambda: stream)
    _assert_envelope(sink)
    events = sink.events()
    assert events[-1].finish_reason == "length"
    assert events[-1].full_content == "a"
    assert stream.consumed == 2
    assert stream.closed


def test_content_and_finish_in_same_delta():
    sink, _ = _run(lambda: [StreamDelta(content="x", finish_reason="stop")])
    assert [e.type for e in sink.events()] == ["start", "chunk", "finish"]


def test_start_failure_emits_start_then_error(log_capture):
    def _starter():
        raise httpx.ConnectError("refused")

    sink, _ = _run(_starter)
    _assert_envelope(sink)
    events = sink.events()
    assert [e.type for e in events] == ["start", "error"]
    assert events[-1].code == "transient"
    assert events[-1].error == "refused"
    assert log_capture.events("stream.error")


def test_mid_stream_failure_keeps_emitted_chunks():
    stream = _ClosableStream([StreamDelta(content=str(i)) for i in range(5)], fail_after=3)
    sink, _ = _run(lambda: stream)
    _assert_envelope(sink)
    types = [e.type for e in sink.events()]
    assert types == ["start", "chunk", "chunk", "chunk", "error"]
    assert stream.closed


def test_translator_failure_is_terminal():
    def _translate(_chunk):
        raise ValueError("invalid chunk payload")

    sink, _ = _run(lambda: ["x"], translator=_translate)
    events = sink.events()
    assert events[-1].type == "error"
    assert events[-1].code == "validation"


def test_closed_sink_drops_writes_but_backend_runs_to_completion(log_capture):
    sink = BufferedSink()
    sink.close()
    stream = _ClosableStream([StreamDelta(content="a"), StreamDelta(content="b")])
    _, metrics = _run(lambda: stream, sink=sink)
    assert sink.frames == []
    assert stream.consumed == 2
    assert metrics.dropped_writes == 4
    end = log_capture.events("stream.end")[-1]
    assert end["dropped_writes"] == 4


def test_lifecycle_logging(log_capture):
    _run(lambda: [StreamDelta(content="a")])
    start = log_capture.events("stream.start")[-1]
    end = log_capture.events("stream.end")[-1]
    assert start["provider"] == "fake"
    assert start["phase"] == "start"
    assert end["phase"] == "finalize"
    assert end["emitted_count"] == 1
    assert end["finish_reason"] == "stop"
