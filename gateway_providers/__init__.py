"""gateway_providers package

Multi-backend chat gateway: one request/response and streaming contract over
OpenAI-compatible SDK backends (Together AI, OpenAI), the Anthropic Messages
API (Claude) and two bespoke REST services (a chat wrapper and a text-to-SQL
service).

Public API (re-exported):
    - Version: ``__version__``
    - Models: :class:`ChatMessage`, :class:`ChatOptions`, :class:`ChatResponse`
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode`
    - Composition: :class:`ProviderRegistry`, :class:`ModelDispatcher`,
      :class:`ChatGateway`, :func:`load_registry_config`

Adapter modules are imported lazily by the registry, only for configured
backends.
"""

from .base.errors import ErrorCode, ProviderError
from .base.models import ChatMessage, ChatOptions, ChatResponse
from .base.registry import ProviderRegistry
from .base.routing import ModelDispatcher
from .config import load_registry_config
from .service.gateway import ChatGateway

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "ChatMessage",
    "ChatOptions",
    "ChatResponse",
    "ErrorCode",
    "ProviderError",
    "ProviderRegistry",
    "ModelDispatcher",
    "ChatGateway",
    "load_registry_config",
]
