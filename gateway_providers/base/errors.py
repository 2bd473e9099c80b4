"""Unified gateway error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``gateway_providers.base.errors_parts`` to keep a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.gateway_errors import (
    ConfigurationError,
    ProviderNotConfiguredError,
    RegistryInitializationError,
    ResolutionError,
    UnsupportedModelError,
)
from .errors_parts.classification import classify_exception, to_provider_error

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
