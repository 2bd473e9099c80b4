"""Anthropic request shaping and response extraction helpers.

The Messages API takes the system prompt as a separate field and accepts only
user/assistant turns in ``messages``.
"""

from __future__ import annotations

from typing import Any, Dict, Optional, Sequence

from ..base.models import ChatMessage, ChatOptions
from ..base.openai_style_parts.style_helpers import to_plain
from ..base.utils.messages import split_system_message, to_wire_messages
from ..config.defaults import CLAUDE_DEFAULT_OPTIONS


def build_messages_params(
    model: str,
    messages: Sequence[ChatMessage],
    options: ChatOptions,
    *,
    stream: bool = False,
) -> Dict[str, Any]:
    """Assemble ``client.messages.create`` keyword arguments.

    ``top_k`` is forwarded only when the caller set it; the other sampling
    fields fall back to the Claude defaults.
    """
    system_text, conversation = split_system_message(messages)
    params: Dict[str, Any] = {
        "model": model,
        "system": system_text,
        "messages": to_wire_messages(conversation),
        **options.with_defaults(CLAUDE_DEFAULT_OPTIONS),
    }
    if options.top_k is not None:
        params["top_k"] = options.top_k
    if stream:
        params["stream"] = True
    return params


def extract_text(resp: Any) -> str:
    """Text of the first content block when it is a text block, else ``""``."""
    blocks = getattr(resp, "content", None) or []
    if not blocks:
        return ""
    first = blocks[0]
    if getattr(first, "type", None) != "text":
        return ""
    return getattr(first, "text", None) or ""


def extract_usage(resp: Any) -> Optional[Dict[str, Any]]:
    """Usage mapping with a derived ``total_tokens`` when both counts exist."""
    usage = to_plain(getattr(resp, "usage", None))
    if not isinstance(usage, dict):
        return None
    inp, out = usage.get("input_tokens"), usage.get("output_tokens")
    if isinstance(inp, int) and isinstance(out, int):
        usage.setdefault("total_tokens", inp + out)
    return usage


__all__ = ["build_messages_params", "extract_text", "extract_usage"]
