"""Stream sinks: where normalized SSE frames are written.

``StreamSink`` is the minimal structural contract the normalizer depends on.
Two implementations are provided:

- :class:`BufferedSink` keeps frames in memory (programmatic callers, tests).
- :class:`QueueSink` hands frames from a producer thread to a consumer
  iterator (the HTTP streaming response). A consumer that goes away calls
  :meth:`QueueSink.cancel`; later writes become no-ops.
"""

from __future__ import annotations

import json
import queue
import threading
from typing import Iterator, List, Optional, Protocol, runtime_checkable

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL
from .events import StreamEvent


@runtime_checkable
class StreamSink(Protocol):
    """Writable, closable text sink."""

    @property
    def closed(self) -> bool: ...

    def write(self, data: str) -> None: ...

    def close(self) -> None: ...


class SinkClosedError(RuntimeError):
    """Raised by sinks on a write after close."""


class BufferedSink:
    """In-memory sink collecting raw frames in write order."""

    def __init__(self) -> None:
        self.frames: List[str] = []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: str) -> None:
        if self._closed:
            raise SinkClosedError("sink is closed")
        self.frames.append(data)

    def close(self) -> None:
        self._closed = True

    @property
    def text(self) -> str:
        return "".join(self.frames)

    @property
    def done(self) -> bool:
        """True when the terminal ``[DONE]`` frame was written."""
        return any(parse_frame(f) == SSE_DONE_SENTINEL for f in self.frames)

    def events(self) -> List[StreamEvent]:
        """Decode every JSON frame back into :class:`StreamEvent` objects."""
        out: List[StreamEvent] = []
        for frame in self.frames:
            payload = parse_frame(frame)
            if isinstance(payload, dict):
                out.append(StreamEvent.from_dict(payload))
        return out


_CLOSE = object()


class QueueSink:
    """Thread-safe producer/consumer sink.

    The producer (adapter thread) writes frames; the consumer iterates them
    until the sink is closed by the producer or cancelled by the consumer.
    """

    def __init__(self, maxsize: int = 0) -> None:
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=maxsize)
        self._lock = threading.Lock()
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def write(self, data: str) -> None:
        with self._lock:
            if self._closed:
                raise SinkClosedError("sink is closed")
            self._queue.put(data)

    def close(self) -> None:
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self._queue.put(_CLOSE)

    def cancel(self) -> None:
        """Consumer-side close: subsequent producer writes are dropped."""
        self.close()

    def __iter__(self) -> Iterator[str]:
        while True:
            item = self._queue.get()
            if item is _CLOSE:
                return
            yield item  # type: ignore[misc]


def parse_frame(frame: str) -> Optional[object]:
    """Decode one ``data: ...`` frame.

    Returns the ``[DONE]`` sentinel string, the decoded JSON payload, or
    ``None`` for frames that are not data frames or not valid JSON.
    """
    text = frame.strip()
    if not text.startswith(SSE_DATA_PREFIX):
        return None
    body = text[len(SSE_DATA_PREFIX):].strip()
    if body == SSE_DONE_SENTINEL:
        return SSE_DONE_SENTINEL
    try:
        return json.loads(body)
    except ValueError:
        return None


__all__ = [
    "StreamSink",
    "SinkClosedError",
    "BufferedSink",
    "QueueSink",
    "parse_frame",
]
