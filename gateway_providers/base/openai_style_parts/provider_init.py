"""Initialization dataclass for OpenAI-style providers.

Pure data container bundling what ``BaseOpenAIStyleProvider`` needs from its
concrete subclass. No I/O occurs here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple


@dataclass(frozen=True)
class _ProviderInit:
    """Initialization bundle for ``BaseOpenAIStyleProvider``.

    Attributes:
        api_key: Validated credential passed to the SDK client.
        base_url: Endpoint for the OpenAI-compatible API (``None`` = SDK default).
        logger_name: Structured logger name (e.g., ``gateway.openai``).
        default_options: Sampling defaults applied when an option is unset.
        extra_body_keys: Option names sent through ``extra_body`` because the
            OpenAI SDK does not know them (e.g. ``top_k`` for Together).
        client: Optional pre-built SDK client (tests inject fakes here).
    """

    api_key: str
    base_url: Optional[str]
    logger_name: str
    default_options: Dict[str, Any] = field(default_factory=dict)
    extra_body_keys: Tuple[str, ...] = ()
    client: Any | None = None


__all__ = ["_ProviderInit"]
