"""OpenAI-style adapter building blocks (base class, params, translators)."""

from .base import BaseOpenAIStyleProvider
from .provider_init import _ProviderInit
from .style_helpers import build_chat_params, extract_openai_text, to_plain, translate_openai_delta

__all__ = [
    "BaseOpenAIStyleProvider",
    "_ProviderInit",
    "build_chat_params",
    "extract_openai_text",
    "to_plain",
    "translate_openai_delta",
]
