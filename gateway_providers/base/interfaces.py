"""ChatProvider Protocol: the adapter contract every backend implements."""

from __future__ import annotations

from typing import Optional, Protocol, Sequence, runtime_checkable

from .models import ChatMessage, ChatOptions, ChatResponse
from .streaming.sinks import StreamSink


@runtime_checkable
class ChatProvider(Protocol):
    """Uniform chat surface over structurally different backends.

    Implementations map :class:`ChatOptions` onto their wire parameters,
    normalize output into :class:`ChatResponse` or stream events, and never
    leak SDK objects upstream.
    """

    @property
    def provider_name(self) -> str:
        """Identity value, e.g. ``"openai"`` or ``"tc_wrapper"``."""
        ...

    @property
    def display_name(self) -> str:
        """Human-readable backend name used in start banners and error records."""
        ...

    def chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions] = None,
    ) -> ChatResponse:
        """Execute a non-streaming completion.

        Failure handling: backend failures are returned as an error-flagged
        ``ChatResponse`` carrying the requested model; they are not raised.
        """
        ...

    def stream_chat(
        self,
        messages: Sequence[ChatMessage],
        model: str,
        options: Optional[ChatOptions],
        sink: StreamSink,
    ) -> None:
        """Stream a completion onto ``sink`` as normalized events.

        Always ends the sink, on success and on every failure path.
        """
        ...


__all__ = ["ChatProvider"]
