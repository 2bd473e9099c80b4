"""
Canonical chat models public surface.

Re-exports the one-class-per-file implementations under
``gateway_providers.base.models_parts``.
"""

from .models_parts.message import ChatMessage, Role, ROLES
from .models_parts.chat_options import ChatOptions, WIRE_NAMES
from .models_parts.chat_response import ChatResponse, assistant_choices, error_response

__all__ = [
    "ChatMessage",
    "Role",
    "ROLES",
    "ChatOptions",
    "WIRE_NAMES",
    "ChatResponse",
    "assistant_choices",
    "error_response",
]
