"""Anthropic streaming translator.

Maps raw Messages API stream events onto :class:`StreamDelta`:

- ``content_block_delta`` with a ``text_delta`` delta → text fragment.
- ``message_stop`` → finish with reason ``"stop"``.

Every other event type (``message_start``, ``content_block_start``, pings,
``message_delta``) is skipped.
"""

from __future__ import annotations

from typing import Any, Optional

from ..base.constants import DEFAULT_FINISH_REASON
from ..base.streaming import StreamDelta


def translate_stream_event(event: Any) -> Optional[StreamDelta]:  # noqa: ANN401 - SDK type
    event_type = getattr(event, "type", None)
    if event_type == "content_block_delta":
        delta = getattr(event, "delta", None)
        if getattr(delta, "type", None) != "text_delta":
            return None
        text = getattr(delta, "text", None)
        return StreamDelta(content=text) if text else None
    if event_type == "message_stop":
        return StreamDelta(finish_reason=DEFAULT_FINISH_REASON)
    return None


__all__ = ["translate_stream_event"]
