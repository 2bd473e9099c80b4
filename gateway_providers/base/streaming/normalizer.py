"""Stream normalizer: event construction and SSE framing.

Every adapter writes through these three functions so that all backends
produce byte-identical framing:

- ``create_stream_event`` stamps a new event with the current UTC time.
- ``write_stream_event`` writes ``data: <json>\\n\\n`` and reports success.
  A closed sink or a failing write is logged and returns ``False``; it never
  raises into the adapter loop.
- ``end_stream`` writes ``data: [DONE]\\n\\n`` and closes the sink. It is a
  no-op on a closed sink and swallows (and logs) any failure.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

from ..constants import SSE_DONE_FRAME
from ..logging import get_logger, log_event
from .events import StreamEvent, StreamEventType
from .sinks import StreamSink

_logger = get_logger("gateway.stream")


def create_stream_event(event_type: StreamEventType, **fields: Any) -> StreamEvent:
    """Return a new :class:`StreamEvent` of ``event_type`` timestamped now."""
    return StreamEvent(type=event_type, **fields)


def format_sse(event: StreamEvent) -> str:
    return f"data: {json.dumps(event.to_dict(), ensure_ascii=False)}\n\n"


def write_stream_event(sink: StreamSink, event: StreamEvent, logger: Optional[logging.Logger] = None) -> bool:
    """Serialize ``event`` onto ``sink``.

    Returns:
        ``True`` when the frame was written, ``False`` when the sink was closed
        or the write failed.
    """
    log = logger or _logger
    if sink.closed:
        log_event(log, "stream.sink_closed", level=logging.DEBUG, event_type=event.type)
        return False
    try:
        sink.write(format_sse(event))
        return True
    except Exception as exc:  # noqa: BLE001 - sink failures never reach the adapter loop
        log_event(
            log,
            "stream.write_error",
            level=logging.WARNING,
            event_type=event.type,
            error=str(exc),
            failure_class=exc.__class__.__name__,
        )
        return False


def end_stream(sink: StreamSink, logger: Optional[logging.Logger] = None) -> None:
    """Write the terminal ``[DONE]`` frame and close ``sink``."""
    log = logger or _logger
    if sink.closed:
        return
    try:
        sink.write(SSE_DONE_FRAME)
    except Exception as exc:  # noqa: BLE001
        log_event(log, "stream.end_error", level=logging.WARNING, error=str(exc), failure_class=exc.__class__.__name__)
    try:
        sink.close()
    except Exception as exc:  # noqa: BLE001
        log_event(log, "stream.close_error", level=logging.WARNING, error=str(exc), failure_class=exc.__class__.__name__)


__all__ = [
    "create_stream_event",
    "format_sse",
    "write_stream_event",
    "end_stream",
]
