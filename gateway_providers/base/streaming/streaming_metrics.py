"""Streaming metrics collected for one adapter stream."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class StreamMetrics:
    """Collected streaming metrics for a single backend invocation.

    Fields:
      emitted: number of ``chunk`` events produced
      time_to_first_token_ms: latency from stream start to first chunk
      total_duration_ms: wall time from start event to terminal event
      content_length: length of the accumulated content
      dropped_writes: frames that could not be written (closed or failing sink)
    """

    emitted: int = 0
    time_to_first_token_ms: Optional[float] = None
    total_duration_ms: Optional[float] = None
    content_length: int = 0
    dropped_writes: int = 0


__all__ = ["StreamMetrics"]
