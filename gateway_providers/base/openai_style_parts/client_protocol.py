"""Protocol for the chat-completions client surface used by OpenAI-style adapters.

Concrete adapters pass an ``openai.OpenAI`` instance; tests pass fakes that
expose the same ``chat.completions.create(**params)`` shape.
"""

from __future__ import annotations

from typing import Protocol


class _ChatCompletionsClient(Protocol):
    """Structural hint: ``client.chat.completions.create(**params)``.

    Returns a completion object (``choices[0].message``) or, with
    ``stream=True``, an iterator of chunks (``choices[0].delta``).
    """

    class _ChatNS(Protocol):  # pragma: no cover - structural hint only
        class _CompletionsNS(Protocol):
            def create(self, **params): ...

        completions: _CompletionsNS

    chat: _ChatNS


__all__ = ["_ChatCompletionsClient"]
