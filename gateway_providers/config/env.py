"""gateway_providers.config.env
=============================

Centralized environment variable mapping for backend credentials.

Purpose
-------
- Single source of truth for mapping provider identities to the environment
  variables that carry their API key and (optionally) base URL.
- Small lookup helpers that distinguish an *unset* variable (the backend is
  silently absent) from a *set but blank* one (the backend is present but
  misconfigured and must fail construction).

Design Notes
------------
- Canonical names come first in ``ENV_ALIASES``; aliases are consulted only
  when the canonical variable is unset.
- Helpers never raise; callers decide how to proceed.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional, Tuple

# Identity value → canonical API key variable
ENV_MAP: Dict[str, str] = {
    "together": "TOGETHER_API_KEY",
    "openai": "OPENAI_API_KEY",
    "claude": "CLAUDE_API_KEY",
    "tc_wrapper": "TC_API_KEY",
    "sql_api": "SQL_API_KEY",
}

# Identity value → ordered tuple of acceptable key variables (canonical first)
ENV_ALIASES: Dict[str, Tuple[str, ...]] = {
    "claude": ("CLAUDE_API_KEY", "ANTHROPIC_API_KEY"),
}

# Identity value → base URL variable. REST identities require it.
BASE_URL_ENV_MAP: Dict[str, str] = {
    "together": "TOGETHER_BASE_URL",
    "openai": "OPENAI_BASE_URL",
    "tc_wrapper": "TC_BASE_URL",
    "sql_api": "SQL_BASE_URL",
}


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the value looks like a placeholder copied from a sample ``.env``.

    Heuristics: contains 'placeholder', 'changeme', or 'your_'. Case-insensitive.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return "placeholder" in v or "changeme" in v or v.startswith("your_")


def get_env_var_candidates(identity: str) -> Iterable[str]:
    """Yield acceptable API key variable names for an identity, canonical first."""
    key = (identity or "").lower()
    canonical = ENV_MAP.get(key)
    if canonical:
        yield canonical
    for alias in ENV_ALIASES.get(key, ()):
        if alias != canonical:
            yield alias


def lookup_api_key(identity: str, environ: Mapping[str, str]) -> Tuple[Optional[str], Optional[str]]:
    """Return ``(value, env_var_name)`` for the first *set* candidate variable.

    A variable that is present but empty still counts as set; the empty value
    is returned so that construction can reject it.
    """
    for name in get_env_var_candidates(identity):
        if name in environ:
            return environ[name], name
    return None, None


def lookup_base_url(identity: str, environ: Mapping[str, str]) -> Optional[str]:
    """Return the configured base URL for an identity, or ``None`` when unset."""
    name = BASE_URL_ENV_MAP.get((identity or "").lower())
    if not name:
        return None
    return environ.get(name)


__all__ = [
    "ENV_MAP",
    "ENV_ALIASES",
    "BASE_URL_ENV_MAP",
    "is_placeholder",
    "get_env_var_candidates",
    "lookup_api_key",
    "lookup_base_url",
]
