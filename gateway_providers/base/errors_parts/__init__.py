"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `gateway_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .gateway_errors import (
    ConfigurationError,
    ProviderNotConfiguredError,
    RegistryInitializationError,
    ResolutionError,
    UnsupportedModelError,
)
from .classification import classify_exception, to_provider_error

__all__ = [
    "ErrorCode",
    "ProviderError",
    "ConfigurationError",
    "ResolutionError",
    "UnsupportedModelError",
    "ProviderNotConfiguredError",
    "RegistryInitializationError",
    "classify_exception",
    "to_provider_error",
]
