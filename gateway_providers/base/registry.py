"""Provider registry.

Purpose
-------
Own the set of live adapters, built once from a :class:`RegistryConfig`
snapshot. The registry is an explicitly constructed object handed to the
gateway by the composition root; there is no process-global instance.

Construction semantics
----------------------
- An identity with no credentials is silently absent.
- Each configured identity is constructed in isolation. A constructor failure
  is recorded as ``"<Display name>: <reason>"`` and does not affect the other
  identities.
- Zero usable adapters is fatal: state is reset and
  :class:`RegistryInitializationError` is raised.

Adapters are imported lazily using ``importlib`` so that an identity that is
not configured never imports its adapter module.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from importlib import import_module
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..config import ProviderCredentials, RegistryConfig
from .errors import ProviderError, ProviderNotConfiguredError, RegistryInitializationError
from .identity import ProviderIdentity
from .interfaces import ChatProvider
from .logging import get_logger, log_event

AdapterFactory = Callable[[ProviderCredentials], ChatProvider]

# Identity → adapter import path and class name
_PROVIDERS: Dict[ProviderIdentity, Dict[str, str]] = {
    ProviderIdentity.TOGETHER: {"module": "gateway_providers.together.client", "class": "TogetherProvider"},
    ProviderIdentity.OPENAI: {"module": "gateway_providers.openai.client", "class": "OpenAIProvider"},
    ProviderIdentity.CLAUDE: {"module": "gateway_providers.anthropic.client", "class": "ClaudeProvider"},
    ProviderIdentity.TC_WRAPPER: {"module": "gateway_providers.tc_wrapper.client", "class": "TCWrapperProvider"},
    ProviderIdentity.SQL_API: {"module": "gateway_providers.sql_api.client", "class": "SQLAPIProvider"},
}


def _default_factory(identity: ProviderIdentity) -> AdapterFactory:
    spec = _PROVIDERS[identity]

    def _build(creds: ProviderCredentials) -> ChatProvider:
        klass = getattr(import_module(spec["module"]), spec["class"])
        return klass(api_key=creds.api_key, base_url=creds.base_url)

    return _build


def _reason(exc: Exception) -> str:
    if isinstance(exc, ProviderError):
        return exc.message
    return str(exc) or exc.__class__.__name__


@dataclass(frozen=True)
class HealthReport:
    """Registry health snapshot."""

    is_healthy: bool
    provider_count: int
    available_providers: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "is_healthy": self.is_healthy,
            "provider_count": self.provider_count,
            "available_providers": list(self.available_providers),
            "errors": list(self.errors),
        }


class ProviderRegistry:
    """Identity → adapter map with recorded construction failures."""

    def __init__(self, factories: Optional[Mapping[ProviderIdentity, AdapterFactory]] = None) -> None:
        self._factories: Dict[ProviderIdentity, AdapterFactory] = {
            identity: _default_factory(identity) for identity in ProviderIdentity
        }
        if factories:
            self._factories.update(factories)
        self._providers: Dict[ProviderIdentity, ChatProvider] = {}
        self._errors: List[str] = []
        self._initialized = False
        self._lock = threading.RLock()
        self._logger = get_logger("gateway.registry")

    # ----- lifecycle -----
    def initialize(self, config: RegistryConfig) -> "ProviderRegistry":
        """Build adapters for every configured identity.

        Raises:
            RegistryInitializationError: When no adapter could be built.
        """
        with self._lock:
            self._clear()
            for identity in ProviderIdentity:
                creds = config.get(identity.value)
                if creds is None:
                    continue
                self._build_one(identity, creds)
            if not self._providers:
                errors = list(self._errors)
                self._clear()
                log_event(self._logger, "registry.initialized", provider_count=0, errors=errors or None)
                raise RegistryInitializationError(errors)
            self._initialized = True
            log_event(
                self._logger,
                "registry.initialized",
                provider_count=len(self._providers),
                available_providers=self.available(),
                errors=list(self._errors) or None,
            )
            return self

    def register(self, identity: ProviderIdentity, provider: ChatProvider) -> None:
        """Install an already-built adapter and mark the registry initialized."""
        with self._lock:
            self._providers[ProviderIdentity(identity)] = provider
            self._initialized = True

    def reset(self) -> None:
        """Drop every adapter and recorded error; the registry becomes uninitialized."""
        with self._lock:
            self._clear()
        log_event(self._logger, "registry.reset")

    # ----- queries -----
    def get(self, identity: ProviderIdentity | str) -> ChatProvider:
        """Return the live adapter for ``identity``.

        Raises:
            ProviderNotConfiguredError: When the registry is uninitialized or
                the identity has no adapter.
        """
        try:
            key = ProviderIdentity(identity)
        except ValueError:
            raise ProviderNotConfiguredError(str(identity), self.available(), initialized=self._initialized) from None
        provider = self._providers.get(key)
        if provider is not None:
            return provider
        raise ProviderNotConfiguredError(key.value, self.available(), initialized=self._initialized)

    def available(self) -> List[str]:
        return [identity.value for identity in ProviderIdentity if identity in self._providers]

    def is_available(self, identity: ProviderIdentity | str) -> bool:
        try:
            return ProviderIdentity(identity) in self._providers
        except ValueError:
            return False

    @property
    def provider_count(self) -> int:
        return len(self._providers)

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def initialization_errors(self) -> List[str]:
        return list(self._errors)

    def status(self) -> Dict[str, bool]:
        """Availability of every known identity."""
        return {identity.value: identity in self._providers for identity in ProviderIdentity}

    def health_check(self) -> HealthReport:
        return HealthReport(
            is_healthy=self._initialized and bool(self._providers),
            provider_count=len(self._providers),
            available_providers=self.available(),
            errors=list(self._errors),
        )

    # ----- internal -----
    def _clear(self) -> None:
        self._providers = {}
        self._errors = []
        self._initialized = False

    def _build_one(self, identity: ProviderIdentity, creds: ProviderCredentials) -> None:
        try:
            provider = self._factories[identity](creds)
        except Exception as exc:  # noqa: BLE001 - recorded per identity, never fatal on its own
            message = f"{identity.display_name}: {_reason(exc)}"
            self._errors.append(message)
            log_event(
                self._logger,
                "registry.provider.failed",
                provider=identity.value,
                error=message,
                failure_class=exc.__class__.__name__,
            )
            return
        self._providers[identity] = provider
        log_event(
            self._logger,
            "registry.provider.ready",
            provider=identity.value,
            family=identity.family.value,
            source=creds.source,
        )


__all__ = ["ProviderRegistry", "HealthReport", "AdapterFactory"]
