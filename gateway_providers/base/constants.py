"""Base shared constants for the gateway.

Central location to avoid scattering magic strings across adapters, the
stream normalizer and the service layer.
"""
from __future__ import annotations

# Content returned to callers whenever a request fails.
ERROR_FALLBACK_CONTENT = "Sorry, I encountered an error processing your request. Please try again."

# Error text used when an exception carries no message.
GENERIC_ERROR_MESSAGE = "AI service error"

# Model name reported by responses that failed before a backend was chosen.
ERROR_MODEL_NAME = "error"

# Finish reason used when a backend ends its stream without reporting one.
DEFAULT_FINISH_REASON = "stop"

# Server-sent event framing
SSE_DATA_PREFIX = "data:"
SSE_DONE_SENTINEL = "[DONE]"
SSE_DONE_FRAME = "data: [DONE]\n\n"

__all__ = [
    "ERROR_FALLBACK_CONTENT",
    "GENERIC_ERROR_MESSAGE",
    "ERROR_MODEL_NAME",
    "DEFAULT_FINISH_REASON",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "SSE_DONE_FRAME",
]
