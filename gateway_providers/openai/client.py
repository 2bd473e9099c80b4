"""OpenAI adapter built on BaseOpenAIStyleProvider.

Chat and streaming orchestration are inherited from the base class; this
module only pins the identity, the sampling defaults and the SDK client.
"""

from __future__ import annotations

from typing import Any, Optional

from openai import OpenAI

from ..base.identity import ProviderIdentity
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..base.utils.credentials import optional_base_url, require_api_key
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_OPTIONS

__all__ = ["OpenAIProvider"]


class OpenAIProvider(BaseOpenAIStyleProvider):
    """OpenAI chat-completions adapter.

    Defaults: max_tokens 4096, temperature 0.7, top_p 0.9, presence and
    frequency penalties 0.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        client: Any | None = None,
    ) -> None:
        name = ProviderIdentity.OPENAI.value
        init = _ProviderInit(
            api_key=require_api_key(api_key, name, "OPENAI_API_KEY"),
            base_url=optional_base_url(base_url, name, "OPENAI_BASE_URL") or OPENAI_DEFAULT_BASE_URL,
            logger_name="gateway.openai",
            default_options=OPENAI_DEFAULT_OPTIONS,
            client=client,
        )
        super().__init__(init)

    @property
    def provider_name(self) -> str:
        return ProviderIdentity.OPENAI.value

    @property
    def display_name(self) -> str:
        return ProviderIdentity.OPENAI.display_name

    def _make_client(self) -> OpenAI:
        return OpenAI(api_key=self._api_key, base_url=self._base_url, max_retries=0)
