"""Streaming package: canonical events, SSE framing, sinks and the adapter loop."""

from .events import StreamEvent, StreamEventType, TERMINAL_TYPES
from .sinks import BufferedSink, QueueSink, SinkClosedError, StreamSink, parse_frame
from .normalizer import create_stream_event, end_stream, format_sse, write_stream_event
from .sse import decode_data_line, first_present, iter_sse_payloads, resolve_path
from .streaming_metrics import StreamMetrics
from .streaming_adapter import BaseStreamingAdapter, StreamDelta

__all__ = [
    "StreamEvent",
    "StreamEventType",
    "TERMINAL_TYPES",
    "StreamSink",
    "SinkClosedError",
    "BufferedSink",
    "QueueSink",
    "parse_frame",
    "create_stream_event",
    "format_sse",
    "write_stream_event",
    "end_stream",
    "decode_data_line",
    "first_present",
    "iter_sse_payloads",
    "resolve_path",
    "StreamMetrics",
    "BaseStreamingAdapter",
    "StreamDelta",
]
