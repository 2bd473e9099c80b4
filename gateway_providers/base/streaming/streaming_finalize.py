"""Finalize-phase logging for adapter streams.

Keeps the consolidated end-of-stream log record (metrics plus outcome) in
one place so every backend reports the same keys.
"""
from __future__ import annotations

import logging
from typing import Optional

from ..logging import LogContext, normalized_log_event
from .streaming_metrics import StreamMetrics


def log_stream_outcome(
    *,
    logger: logging.Logger,
    ctx: LogContext,
    metrics: StreamMetrics,
    finish_reason: Optional[str] = None,
    error: Optional[str] = None,
    error_code: Optional[str] = None,
) -> None:
    """Emit ``stream.end`` (success) or ``stream.error`` with collected metrics."""
    normalized_log_event(
        logger,
        "stream.end" if error is None else "stream.error",
        ctx,
        phase="finalize",
        attempt=None,
        emitted=metrics.emitted > 0,
        tokens=None,
        error_code=error_code,
        level=logging.INFO if error is None else logging.WARNING,
        emitted_count=metrics.emitted,
        content_length=metrics.content_length,
        time_to_first_token_ms=metrics.time_to_first_token_ms,
        total_duration_ms=metrics.total_duration_ms,
        dropped_writes=metrics.dropped_writes or None,
        finish_reason=finish_reason,
        error=error,
    )


__all__ = ["log_stream_outcome"]
