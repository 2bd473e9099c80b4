"""Unified configuration layer for the gateway.

Goals
-----
* Centralize defaults (models, base URLs, prompts) in ``config.defaults``.
* Build an immutable snapshot of backend credentials from the environment
  exactly once per registry initialization: ``load_registry_config()``.
* Keep the "unset means absent, blank means broken" distinction intact so
  the registry can tell an opt-out from a misconfiguration.

Environment Variable Conventions
--------------------------------
<IDENTITY>_API_KEY and, where applicable, <IDENTITY>_BASE_URL, e.g.
``TOGETHER_API_KEY``, ``TC_BASE_URL``. ``ANTHROPIC_API_KEY`` is accepted as an
alias for ``CLAUDE_API_KEY``.

A ``.env`` file (path from ``DOTENV_FILE``, default ``.env``) is read once
when loading from the real process environment. Values already present in the
environment win unless they look like placeholders.

Public API
----------
* ProviderCredentials, RegistryConfig
* load_registry_config(environ: Mapping | None = None) -> RegistryConfig
"""
from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Dict, Mapping, Optional

from .env import ENV_MAP, is_placeholder, lookup_api_key, lookup_base_url

_DOTENV_LOADED = False


@dataclass(frozen=True)
class ProviderCredentials:
    """Credentials for one backend as read from the environment.

    ``api_key`` may be an empty string: the variable was set but blank, which
    the adapter rejects at construction time.
    """

    api_key: Optional[str]
    base_url: Optional[str] = None
    source: Optional[str] = None


@dataclass(frozen=True)
class RegistryConfig:
    """Immutable snapshot of configured backends keyed by identity value."""

    credentials: Dict[str, ProviderCredentials] = field(default_factory=dict)

    def get(self, identity: str) -> Optional[ProviderCredentials]:
        return self.credentials.get(identity)

    def configured(self) -> list[str]:
        """Identity values for which a credential was supplied (valid or not)."""
        return list(self.credentials.keys())


def _load_dotenv_once() -> None:
    """Lightweight .env loader (no external dependency).

    Parses KEY=VALUE lines, ignoring comments and blank lines. Safe to call
    multiple times. Overrides existing environment variables only if their
    current values appear to be placeholders.
    """
    global _DOTENV_LOADED
    if _DOTENV_LOADED:
        return
    path = os.getenv("DOTENV_FILE", ".env")
    if not os.path.isfile(path):
        _DOTENV_LOADED = True
        return
    try:
        with open(path, "r", encoding="utf-8") as fh:
            for line in fh:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                k, v = line.split("=", 1)
                k = k.strip()
                v = v.strip().strip('"').strip("'")
                if k and (k not in os.environ or is_placeholder(os.environ.get(k))):
                    os.environ[k] = v
    finally:
        _DOTENV_LOADED = True


def load_registry_config(environ: Optional[Mapping[str, str]] = None) -> RegistryConfig:
    """Read backend credentials into a :class:`RegistryConfig`.

    Parameters
    ----------
    environ: Mapping | None
        Source mapping. ``None`` means the process environment (after a
        one-time ``.env`` load). Tests pass a plain dict for isolation.

    Returns
    -------
    RegistryConfig
        Only identities whose API key variable is set appear in the result.
    """
    if environ is None:
        _load_dotenv_once()
        environ = os.environ
    creds: Dict[str, ProviderCredentials] = {}
    for identity in ENV_MAP:
        api_key, source = lookup_api_key(identity, environ)
        if api_key is None:
            continue
        creds[identity] = ProviderCredentials(
            api_key=api_key,
            base_url=lookup_base_url(identity, environ),
            source=source,
        )
    return RegistryConfig(credentials=creds)


__all__ = [
    "ProviderCredentials",
    "RegistryConfig",
    "load_registry_config",
]
