"""ChatGateway: request orchestration over the registry and dispatcher.

Purpose
-------
Single entry point used by the HTTP layer (and programmatic callers):
prepare messages, resolve the model to an adapter, delegate, and make sure
resolution failures are reported in the same shapes as backend failures.

Failure semantics
-----------------
- ``chat`` never raises. Resolution failures return an error response whose
  ``model`` is ``"error"``; backend failures keep the requested model.
- ``chat_stream`` never raises. On a resolution failure a single ``error``
  event is written followed by ``[DONE]``; no adapter is invoked and no
  ``start`` event is emitted.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from ..base.constants import ERROR_MODEL_NAME
from ..base.errors import ResolutionError, classify_exception
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import ChatMessage, ChatOptions, ChatResponse, error_response
from ..base.registry import ProviderRegistry
from ..base.routing import ModelDispatcher
from ..base.streaming import StreamSink, create_stream_event, end_stream, write_stream_event
from ..base.streaming.streaming_adapter import error_message_of
from ..base.utils.messages import prepare_messages
from ..config import RegistryConfig, load_registry_config


class ChatGateway:
    """Orchestrates chat requests across configured backends."""

    def __init__(self, registry: ProviderRegistry, dispatcher: Optional[ModelDispatcher] = None) -> None:
        self.registry = registry
        self.dispatcher = dispatcher or ModelDispatcher(registry)
        self._logger = get_logger("gateway.service")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ChatGateway":
        """Build a registry from the environment and wrap it.

        Raises:
            RegistryInitializationError: When no backend could be initialized.
        """
        return cls.from_config(load_registry_config(environ))

    @classmethod
    def from_config(cls, config: RegistryConfig) -> "ChatGateway":
        registry = ProviderRegistry()
        registry.initialize(config)
        return cls(registry)

    # ----- chat -----
    def chat(
        self,
        messages: Optional[Sequence[ChatMessage]],
        model: Optional[str] = None,
        options: Optional[ChatOptions] = None,
    ) -> ChatResponse:
        prepared = prepare_messages(messages)
        try:
            effective, provider = self.dispatcher.provider_for(model)
        except ResolutionError as err:
            self._log_resolution_error(model, err)
            return error_response(err, ERROR_MODEL_NAME, err.code)
        try:
            return provider.chat(prepared, effective, options or ChatOptions())
        except Exception as exc:  # noqa: BLE001 - adapters should not raise; keep the contract if one does
            code = classify_exception(exc)
            log_event(
                self._logger,
                "gateway.adapter.error",
                LogContext(provider=provider.provider_name, model=effective),
                level=logging.ERROR,
                error=str(exc),
                error_code=code.value,
            )
            return error_response(exc, effective, code)

    # ----- streaming -----
    def chat_stream(
        self,
        messages: Optional[Sequence[ChatMessage]],
        model: Optional[str],
        options: Optional[ChatOptions],
        sink: StreamSink,
    ) -> None:
        prepared = prepare_messages(messages)
        try:
            effective, provider = self.dispatcher.provider_for(model)
        except ResolutionError as err:
            self._log_resolution_error(model, err)
            write_stream_event(sink, create_stream_event("error", error=err.message, code=err.code.value), self._logger)
            end_stream(sink, self._logger)
            return
        try:
            provider.stream_chat(prepared, effective, options or ChatOptions(), sink)
        except Exception as exc:  # noqa: BLE001 - terminal event + [DONE] even for a misbehaving adapter
            code = classify_exception(exc)
            log_event(
                self._logger,
                "gateway.adapter.error",
                LogContext(provider=provider.provider_name, model=effective),
                level=logging.ERROR,
                error=str(exc),
                error_code=code.value,
            )
            write_stream_event(sink, create_stream_event("error", error=error_message_of(exc), code=code.value), self._logger)
        finally:
            end_stream(sink, self._logger)

    # ----- introspection -----
    def health(self) -> Dict[str, Any]:
        return self.registry.health_check().to_dict()

    def status(self) -> Dict[str, Any]:
        return {
            "health": self.health(),
            "provider_status": self.registry.status(),
            "available_providers": self.registry.available(),
            "initialization_errors": self.registry.initialization_errors(),
            "supported_models": self.dispatcher.supported_models(),
        }

    def _log_resolution_error(self, model: Optional[str], err: ResolutionError) -> None:
        normalized_log_event(
            self._logger,
            "gateway.resolve.error",
            LogContext(model=model),
            phase="resolve",
            error_code=err.code.value,
            emitted=False,
            level=logging.WARNING,
            error=err.message,
        )


__all__ = ["ChatGateway"]
