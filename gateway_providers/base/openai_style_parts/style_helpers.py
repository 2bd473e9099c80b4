"""
Helper utilities for OpenAI-style Chat Completions adapters.

Purpose:
- Translate canonical messages and options into SDK parameters.
- Interpret SDK responses and stream chunks.

No network I/O happens here; functions only prepare inputs or read outputs.
"""

from __future__ import annotations

import typing as _t

from ..models import ChatMessage, ChatOptions
from ..streaming import StreamDelta
from ..utils.messages import to_wire_messages


def build_chat_params(
    *,
    model: str,
    messages: _t.Sequence[ChatMessage],
    options: ChatOptions,
    defaults: _t.Mapping[str, _t.Any],
    extra_body_keys: _t.Iterable[str] = (),
    stream: bool = False,
) -> dict:
    """Assemble ``chat.completions.create`` keyword arguments.

    Options named in ``extra_body_keys`` travel under ``extra_body`` so the
    SDK forwards them verbatim to the backend.
    """
    merged = options.with_defaults(defaults)
    extra_keys = set(extra_body_keys)
    params: dict = {
        "model": model,
        "messages": to_wire_messages(messages),
        "stream": stream,
    }
    extra_body = {}
    for name, value in merged.items():
        if value is None:
            continue
        if name in extra_keys:
            extra_body[name] = value
        else:
            params[name] = value
    if extra_body:
        params["extra_body"] = extra_body
    return params


def to_plain(obj: _t.Any) -> _t.Any:
    """Convert SDK (pydantic) objects into plain JSON-friendly data."""
    if obj is None:
        return None
    dump = getattr(obj, "model_dump", None)
    if callable(dump):
        return dump(exclude_none=True)
    if isinstance(obj, dict):
        return {k: to_plain(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_plain(v) for v in obj]
    return obj


def extract_openai_text(resp: _t.Any) -> str:
    """Assistant text of the first choice, or ``""`` when absent."""
    choices = getattr(resp, "choices", None) or []
    if not choices:
        return ""
    message = getattr(choices[0], "message", None)
    return getattr(message, "content", None) or ""


def translate_openai_delta(chunk: _t.Any) -> _t.Optional[StreamDelta]:
    """Map a streamed chunk to a :class:`StreamDelta`.

    Chunks without choices (e.g. trailing usage-only chunks) are skipped.
    """
    choices = getattr(chunk, "choices", None) or []
    if not choices:
        return None
    choice = choices[0]
    delta = getattr(choice, "delta", None)
    content = getattr(delta, "content", None) if delta is not None else None
    reason = getattr(choice, "finish_reason", None)
    if not content and reason is None:
        return None
    return StreamDelta(content=content or None, finish_reason=reason)


__all__ = [
    "build_chat_params",
    "to_plain",
    "extract_openai_text",
    "translate_openai_delta",
]
