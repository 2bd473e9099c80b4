"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements timeout detection for the stdlib, ``httpx`` and both backend SDKs,
HTTP status extraction with a status-to-code map, transport error handling,
and message-based heuristics as a fallback.
"""
from __future__ import annotations

import json
from typing import Dict, Optional

import anthropic
import httpx
import openai

from .error_code import ErrorCode
from .provider_error import ProviderError

_TIMEOUT_TYPES = (
    TimeoutError,
    httpx.TimeoutException,
    openai.APITimeoutError,
    anthropic.APITimeoutError,
)

_TRANSPORT_TYPES = (
    httpx.TransportError,
    openai.APIConnectionError,
    anthropic.APIConnectionError,
    ConnectionError,
)


def _extract_status(exc: Exception) -> Optional[int]:
    """Attempt to extract an HTTP status code from a backend exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def _code_for_status(status: int) -> ErrorCode:
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    if status >= 400:
        return ErrorCode.VALIDATION
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:
    """Substring heuristic mapping for exceptions without structure."""
    pattern_groups = (
        (ErrorCode.TIMEOUT, ("timeout", "timed out")),
        (ErrorCode.AUTH, ("api key", "unauthorized", "forbidden", "authentication", "authorization")),
        (ErrorCode.UNSUPPORTED, ("unsupported", "not supported")),
        (ErrorCode.NOT_FOUND, ("not found", "does not exist")),
        (ErrorCode.CONFLICT, ("conflict", "already exists")),
        (ErrorCode.UNAVAILABLE, ("unavailable", "temporarily down")),
        (ErrorCode.VALIDATION, ("validation", "invalid", "malformed")),
        (ErrorCode.SERVER_ERROR, ("server error", "internal error")),
    )
    if "rate" in msg and "limit" in msg:
        return ErrorCode.RATE_LIMIT
    for code, patterns in pattern_groups:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: Exception) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (stdlib, httpx, SDKs).
        3. HTTP status mapping.
        4. Transport/connection failures (``TRANSIENT``).
        5. JSON decoding failures (``VALIDATION``).
        6. Message substring heuristics.
        7. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, _TIMEOUT_TYPES):
        return ErrorCode.TIMEOUT
    status = _extract_status(exc)
    if status is not None:
        return _code_for_status(status)
    if isinstance(exc, _TRANSPORT_TYPES):
        return ErrorCode.TRANSIENT
    if isinstance(exc, json.JSONDecodeError):
        return ErrorCode.VALIDATION
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def to_provider_error(exc: Exception, *, provider: str, model: Optional[str]) -> ProviderError:
    """Wrap ``exc`` into a :class:`ProviderError` unless it already is one."""
    if isinstance(exc, ProviderError):
        return exc
    code = classify_exception(exc)
    return ProviderError(
        code=code,
        message=str(exc) or exc.__class__.__name__,
        provider=provider,
        model=model,
        retryable=code in (ErrorCode.TRANSIENT, ErrorCode.RATE_LIMIT, ErrorCode.TIMEOUT),
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "to_provider_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
