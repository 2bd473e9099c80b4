"""Together AI adapter over Together's OpenAI-compatible endpoint.

Uses the ``openai`` SDK pointed at ``https://api.together.xyz/v1``. Sampling
parameters the OpenAI API does not define (``top_k``, ``repetition_penalty``,
``min_p``) are forwarded through ``extra_body``.
"""

from __future__ import annotations

from typing import Any, Optional

from openai import OpenAI

from ..base.identity import ProviderIdentity
from ..base.openai_style_parts import BaseOpenAIStyleProvider, _ProviderInit
from ..base.utils.credentials import optional_base_url, require_api_key
from ..config.defaults import TOGETHER_DEFAULT_BASE_URL, TOGETHER_DEFAULT_OPTIONS

__all__ = ["TogetherProvider", "TOGETHER_EXTRA_BODY_KEYS"]

TOGETHER_EXTRA_BODY_KEYS = ("top_k", "repetition_penalty", "min_p")


class TogetherProvider(BaseOpenAIStyleProvider):
    """Together AI chat-completions adapter (DeepSeek, Llama models)."""

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        client: Any | None = None,
    ) -> None:
        name = ProviderIdentity.TOGETHER.value
        init = _ProviderInit(
            api_key=require_api_key(api_key, name, "TOGETHER_API_KEY"),
            base_url=optional_base_url(base_url, name, "TOGETHER_BASE_URL") or TOGETHER_DEFAULT_BASE_URL,
            logger_name="gateway.together",
            default_options=TOGETHER_DEFAULT_OPTIONS,
            extra_body_keys=TOGETHER_EXTRA_BODY_KEYS,
            client=client,
        )
        super().__init__(init)

    @property
    def provider_name(self) -> str:
        return ProviderIdentity.TOGETHER.value

    @property
    def display_name(self) -> str:
        return ProviderIdentity.TOGETHER.display_name

    def _make_client(self) -> OpenAI:
        return OpenAI(api_key=self._api_key, base_url=self._base_url, max_retries=0)
