"""
Normalized gateway error codes (taxonomy).

Defines the `ErrorCode` enumeration used across provider adapters, the
registry, the dispatcher and the service layer. Values are lowercase
snake_case and are considered a stable public contract for logging and for
clients that branch on the ``code`` field of stream error events.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    TRANSIENT = "transient"
    UNSUPPORTED = "unsupported"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    SERVER_ERROR = "server_error"
    INTERNAL = "internal"
    UNAVAILABLE = "unavailable"
    UNKNOWN = "unknown"
    # Gateway-level failures raised before any backend is contacted.
    CONFIGURATION = "configuration"
    UNSUPPORTED_MODEL = "unsupported_model"
    NOT_CONFIGURED = "not_configured"


__all__ = ["ErrorCode"]
