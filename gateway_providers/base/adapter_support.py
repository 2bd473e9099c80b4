"""Logging and failure shaping shared by every adapter family.

Keeps the ``chat.*`` event schema and the error-response conversion identical
across the SDK and REST adapters.
"""
from __future__ import annotations

import logging
from typing import Optional

from .errors import to_provider_error
from .logging import LogContext, normalized_log_event
from .models import ChatOptions, ChatResponse, error_response


def log_chat_start(logger: logging.Logger, ctx: LogContext, options: ChatOptions, message_count: int) -> None:
    normalized_log_event(
        logger,
        "chat.start",
        ctx,
        phase="start",
        message_count=message_count,
        temperature=options.temperature,
        max_tokens=options.max_tokens,
    )


def log_chat_end(logger: logging.Logger, ctx: LogContext, response: ChatResponse, latency_ms: Optional[float] = None) -> None:
    normalized_log_event(
        logger,
        "chat.end",
        ctx,
        phase="finalize",
        emitted=bool(response.content),
        tokens=response.usage,
        response_length=response.response_length,
        latency_ms=latency_ms,
    )


def chat_error_response(
    logger: logging.Logger,
    ctx: LogContext,
    exc: Exception,
    *,
    provider: str,
    model: str,
) -> ChatResponse:
    """Classify ``exc``, log ``chat.error`` and return the error-flagged response."""
    err = to_provider_error(exc, provider=provider, model=model)
    normalized_log_event(
        logger,
        "chat.error",
        ctx,
        phase="finalize",
        error_code=err.code.value,
        emitted=False,
        level=logging.WARNING,
        error=err.message,
        failure_class=exc.__class__.__name__,
    )
    return error_response(err, model, err.code)


__all__ = ["log_chat_start", "log_chat_end", "chat_error_response"]
