"""Models parts package public surface.

Re-exports individual DTOs; `gateway_providers.base.models` remains the
primary stable import path.
"""

from .message import ChatMessage, Role, ROLES
from .chat_options import ChatOptions, WIRE_NAMES
from .chat_response import ChatResponse, assistant_choices, error_response

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
