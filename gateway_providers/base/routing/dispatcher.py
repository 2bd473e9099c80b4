"""Model dispatcher: static model name → backend identity lookup.

Resolution is an exact, case-sensitive match against ``MODEL_PROVIDER_MAP``.
Unknown names fail before any adapter is touched; a known name whose backend
is not configured fails with the registry's not-configured error.
"""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Tuple

from ...config.defaults import DEFAULT_MODEL
from ..errors import UnsupportedModelError
from ..identity import ProviderIdentity
from ..interfaces import ChatProvider
from ..registry import ProviderRegistry

MODEL_PROVIDER_MAP: Dict[str, ProviderIdentity] = {
    # Claude
    "claude-3-5-sonnet-20241022": ProviderIdentity.CLAUDE,
    "claude-3-5-haiku-20241022": ProviderIdentity.CLAUDE,
    "claude-3-opus-20240229": ProviderIdentity.CLAUDE,
    # Together AI
    "deepseek-ai/DeepSeek-V3": ProviderIdentity.TOGETHER,
    "meta-llama/Llama-3.3-70B-Instruct-Turbo": ProviderIdentity.TOGETHER,
    # OpenAI
    "gpt-4o": ProviderIdentity.OPENAI,
    "gpt-4o-mini": ProviderIdentity.OPENAI,
    "gpt-4-turbo": ProviderIdentity.OPENAI,
    # REST backends
    "tc-wrapper": ProviderIdentity.TC_WRAPPER,
    "text-to-sql": ProviderIdentity.SQL_API,
}


class ModelDispatcher:
    """Resolve model names to identities and adapters."""

    def __init__(
        self,
        registry: ProviderRegistry,
        model_map: Optional[Mapping[str, ProviderIdentity]] = None,
        default_model: str = DEFAULT_MODEL,
    ) -> None:
        self._registry = registry
        self._map: Dict[str, ProviderIdentity] = dict(model_map if model_map is not None else MODEL_PROVIDER_MAP)
        self.default_model = default_model

    def resolve(self, model: str) -> ProviderIdentity:
        """Return the identity serving ``model``.

        Raises:
            UnsupportedModelError: When ``model`` is not in the table.
        """
        identity = self._map.get(model)
        if identity is None:
            raise UnsupportedModelError(model)
        return identity

    def provider_for(self, model: Optional[str]) -> Tuple[str, ChatProvider]:
        """Return ``(effective_model, adapter)``; a missing model means the default.

        Raises:
            UnsupportedModelError: Unknown model.
            ProviderNotConfiguredError: Backend has no live adapter.
        """
        effective = model or self.default_model
        identity = self.resolve(effective)
        return effective, self._registry.get(identity)

    def supported_models(self) -> List[str]:
        return list(self._map.keys())


__all__ = ["MODEL_PROVIDER_MAP", "ModelDispatcher"]
