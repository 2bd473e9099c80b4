"""Credential validation shared by adapter constructors.

A credential that was supplied but is unusable (blank or placeholder key,
blank or non-http(s) base URL) raises :class:`ConfigurationError` so the
registry can record the failure against that backend alone.
"""
from __future__ import annotations

from typing import Optional
from urllib.parse import urlparse

from ...config.env import is_placeholder
from ..errors import ConfigurationError


def require_api_key(api_key: Optional[str], provider: str, env_var: str) -> str:
    if api_key is None or not str(api_key).strip():
        raise ConfigurationError(f"{env_var} is empty or not set", provider=provider)
    if is_placeholder(api_key):
        raise ConfigurationError(f"{env_var} holds a placeholder value", provider=provider)
    return str(api_key).strip()


def require_base_url(base_url: Optional[str], provider: str, env_var: str) -> str:
    """Return ``base_url`` without a trailing slash, or raise when unusable."""
    if base_url is None or not str(base_url).strip():
        raise ConfigurationError(f"{env_var} is empty or not set", provider=provider)
    url = str(base_url).strip()
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError(f"{env_var} must be an http(s) URL, got {url!r}", provider=provider)
    return url.rstrip("/")


def optional_base_url(base_url: Optional[str], provider: str, env_var: str) -> Optional[str]:
    """Like :func:`require_base_url` but ``None`` (unset) is allowed."""
    if base_url is None:
        return None
    return require_base_url(base_url, provider, env_var)


__all__ = ["require_api_key", "require_base_url", "optional_base_url"]
