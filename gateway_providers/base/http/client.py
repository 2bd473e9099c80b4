"""Shared HTTP client pool for the REST backends.

Purpose:
    Provide a thread-safe pool of reusable ``httpx.Client`` instances so REST
    adapters do not allocate a connection pool per request.

Timeout strategy:
    Pooled clients carry no default timeout of their own; adapters pass the
    per-request timeout from :func:`get_timeout_config` on every call.

Lifecycle:
    Clients are cached by ``(base_url, purpose)`` and closed at interpreter
    exit via ``atexit``. Tests may call :func:`close_all_clients` explicitly.
"""

from __future__ import annotations

import atexit
import threading
from typing import Dict, Optional, Tuple

import httpx

_CLIENTS: Dict[Tuple[Optional[str], str], httpx.Client] = {}
_LOCK = threading.RLock()


def get_httpx_client(base_url: Optional[str], purpose: str) -> httpx.Client:
    """Return a pooled ``httpx.Client`` for the given base URL and purpose.

    Parameters:
        base_url: API base URL set on the client so adapters can use relative
            paths. ``None`` groups clients under a shared key.
        purpose: Short pool discriminator (e.g. ``"tc_wrapper"``).
    """
    key = (base_url, purpose)
    client = _CLIENTS.get(key)
    if client is not None:
        return client

    with _LOCK:
        client = _CLIENTS.get(key)
        if client is not None:
            return client
        client = httpx.Client(base_url=base_url) if base_url else httpx.Client()
        _CLIENTS[key] = client
        return client


def close_all_clients() -> None:
    """Close and clear all pooled HTTP clients."""
    with _LOCK:
        for c in _CLIENTS.values():
            try:
                c.close()
            except Exception:  # nosec B110 - best-effort shutdown; close errors are non-actionable
                pass
        _CLIENTS.clear()


atexit.register(close_all_clients)

__all__ = ["get_httpx_client", "close_all_clients"]
