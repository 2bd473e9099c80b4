"""Closed set of backend identities and the adapter family each belongs to."""

from __future__ import annotations

from enum import Enum
from typing import Dict


class ProviderFamily(str, Enum):
    """Structural family: decides request shape and stream decoding."""

    SDK_COMPLETIONS = "sdk_completions"
    SDK_MESSAGES = "sdk_messages"
    REST_CHAT = "rest_chat"
    REST_SQL = "rest_sql"


class ProviderIdentity(str, Enum):
    """Backend identities known to the gateway. Never taken from user input."""

    TOGETHER = "together"
    OPENAI = "openai"
    CLAUDE = "claude"
    TC_WRAPPER = "tc_wrapper"
    SQL_API = "sql_api"

    @property
    def family(self) -> ProviderFamily:
        return _FAMILIES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_FAMILIES: Dict[ProviderIdentity, ProviderFamily] = {
    ProviderIdentity.TOGETHER: ProviderFamily.SDK_COMPLETIONS,
    ProviderIdentity.OPENAI: ProviderFamily.SDK_COMPLETIONS,
    ProviderIdentity.CLAUDE: ProviderFamily.SDK_MESSAGES,
    ProviderIdentity.TC_WRAPPER: ProviderFamily.REST_CHAT,
    ProviderIdentity.SQL_API: ProviderFamily.REST_SQL,
}

_DISPLAY_NAMES: Dict[ProviderIdentity, str] = {
    ProviderIdentity.TOGETHER: "Together AI",
    ProviderIdentity.OPENAI: "OpenAI",
    ProviderIdentity.CLAUDE: "Claude",
    ProviderIdentity.TC_WRAPPER: "TC Wrapper",
    ProviderIdentity.SQL_API: "SQL API",
}


__all__ = ["ProviderFamily", "ProviderIdentity"]
