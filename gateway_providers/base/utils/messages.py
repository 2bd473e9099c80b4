"""Message preparation helpers shared across adapters.

Helpers here are pure: they never mutate their input and always return a new
list. ``prepare_messages`` is idempotent, so it is safe for both the gateway
and an adapter to apply it.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from ...config.defaults import DEFAULT_SYSTEM_PROMPT, DEFAULT_USER_PROMPT, GENERIC_SYSTEM_PROMPT
from ..models import ChatMessage


def default_messages() -> List[ChatMessage]:
    """Conversation used when a request arrives with no messages."""
    return [ChatMessage(role="user", content=DEFAULT_USER_PROMPT)]


def ensure_system_message(messages: Sequence[ChatMessage], system_prompt: str = DEFAULT_SYSTEM_PROMPT) -> List[ChatMessage]:
    """Prepend ``system_prompt`` unless a system message is already present.

    Existing order is preserved; a system message found later in the list
    counts as present.
    """
    if any(m.role == "system" for m in messages):
        return list(messages)
    return [ChatMessage(role="system", content=system_prompt), *messages]


def prepare_messages(messages: Optional[Iterable[ChatMessage]]) -> List[ChatMessage]:
    """Normalize an inbound conversation.

    An empty or missing conversation becomes :func:`default_messages`; the
    result always contains a system message.
    """
    items = list(messages or [])
    if not items:
        items = default_messages()
    return ensure_system_message(items)


def split_system_message(messages: Sequence[ChatMessage]) -> Tuple[str, List[ChatMessage]]:
    """Return ``(system_text, conversation)`` for backends with a separate system field.

    ``system_text`` is the first system message's content or a generic prompt;
    ``conversation`` holds every non-system message in order.
    """
    system_text: Optional[str] = None
    conversation: List[ChatMessage] = []
    for m in messages:
        if m.role == "system":
            if system_text is None:
                system_text = m.content
            continue
        conversation.append(m)
    return system_text or GENERIC_SYSTEM_PROMPT, conversation


def to_wire_messages(messages: Sequence[ChatMessage]) -> List[dict]:
    return [m.to_dict() for m in messages]


__all__ = [
    "default_messages",
    "ensure_system_message",
    "prepare_messages",
    "split_system_message",
    "to_wire_messages",
]
