"""
Gateway-level error types raised outside a backend call.

These cover configuration problems detected while building adapters and
resolution failures (unknown model, backend not configured) detected before
any backend is contacted. All but :class:`RegistryInitializationError` are
:class:`ProviderError` subclasses so callers can surface ``message`` and
``code`` uniformly.
"""
from __future__ import annotations

from typing import Iterable, List, Optional

from .error_code import ErrorCode
from .provider_error import ProviderError


class ConfigurationError(ProviderError):
    """Raised by an adapter constructor when its credentials are unusable."""

    def __init__(self, message: str, provider: str) -> None:
        super().__init__(code=ErrorCode.CONFIGURATION, message=message, provider=provider)


class ResolutionError(ProviderError):
    """Base class for failures mapping a request onto an adapter."""


class UnsupportedModelError(ResolutionError):
    """The requested model name is not in the static model table."""

    def __init__(self, model: str) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED_MODEL,
            message=f"Unsupported model: {model}. Please check the model name.",
            provider="gateway",
            model=model,
        )


class ProviderNotConfiguredError(ResolutionError):
    """The model maps to a backend that has no live adapter in the registry."""

    def __init__(self, identity: str, available: Iterable[str], model: Optional[str] = None, *, initialized: bool = True) -> None:
        names = list(available)
        if not initialized:
            message = f"Provider registry is not initialized; provider {identity} is unavailable."
        else:
            listing = ", ".join(names) if names else "none"
            message = f"Provider {identity} is not configured. Available providers: {listing}"
        super().__init__(
            code=ErrorCode.NOT_CONFIGURED,
            message=message,
            provider=identity,
            model=model,
        )
        self.available = names


class RegistryInitializationError(RuntimeError):
    """Fatal: registry initialization produced zero usable adapters.

    Attributes:
        errors: Recorded per-backend failures (``"<Name>: <reason>"``).
    """

    def __init__(self, errors: Iterable[str]) -> None:
        self.errors: List[str] = list(errors)
        detail = "; ".join(self.errors) if self.errors else "no provider credentials configured"
        super().__init__(f"No AI providers could be initialized: {detail}")


__all__ = [
    "ConfigurationError",
    "ResolutionError",
    "UnsupportedModelError",
    "ProviderNotConfiguredError",
    "RegistryInitializationError",
]
