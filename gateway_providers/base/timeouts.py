"""Timeout configuration for REST backends.

SDK-backed adapters rely on their SDK's own timeout defaults; the REST
adapters read their per-request timeouts from here so no numeric literal is
scattered across adapters.

Environment overrides (optional, positive floats):
    GATEWAY_REST_TIMEOUT_SECONDS  (chat REST backend, default 30)
    GATEWAY_SQL_TIMEOUT_SECONDS   (text-to-SQL backend, default 60)

The configuration is cached per distinct set of override values so tests can
adjust the environment at runtime.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from ..config.defaults import REST_CHAT_DEFAULT_TIMEOUT_SECONDS, REST_SQL_DEFAULT_TIMEOUT_SECONDS


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values (seconds).

    Attributes:
        rest_timeout_seconds: Per-request timeout for the chat REST backend.
        sql_timeout_seconds: Per-request timeout for the text-to-SQL backend.
    """

    rest_timeout_seconds: float = REST_CHAT_DEFAULT_TIMEOUT_SECONDS
    sql_timeout_seconds: float = REST_SQL_DEFAULT_TIMEOUT_SECONDS


_CACHED: Optional[Tuple[Tuple[str, str], TimeoutConfig]] = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the (cached) :class:`TimeoutConfig` for the current environment."""
    global _CACHED  # noqa: PLW0603 - module cache
    guard = (
        os.getenv("GATEWAY_REST_TIMEOUT_SECONDS", ""),
        os.getenv("GATEWAY_SQL_TIMEOUT_SECONDS", ""),
    )
    if _CACHED is not None and _CACHED[0] == guard:
        return _CACHED[1]
    cfg = TimeoutConfig(
        rest_timeout_seconds=_parse_env_float("GATEWAY_REST_TIMEOUT_SECONDS", REST_CHAT_DEFAULT_TIMEOUT_SECONDS),
        sql_timeout_seconds=_parse_env_float("GATEWAY_SQL_TIMEOUT_SECONDS", REST_SQL_DEFAULT_TIMEOUT_SECONDS),
    )
    _CACHED = (guard, cfg)
    return cfg


__all__ = ["TimeoutConfig", "get_timeout_config"]
