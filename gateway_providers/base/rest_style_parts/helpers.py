"""Request/response helpers for the bespoke REST backends.

Purpose:
- Build the shared request body and headers.
- Open a streaming POST and yield its body line by line.
- Decode ``data:`` lines and translate each payload into a :class:`StreamDelta`.

Timeout strategy:
- Timeouts are passed per request by the caller (see ``base.timeouts``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, Optional, Sequence, Union

import httpx

from ..logging import log_event
from ..models import ChatMessage, ChatOptions
from ..streaming import StreamDelta
from ..streaming.sse import ContentPath, first_present, iter_sse_payloads
from ..utils.messages import to_wire_messages


def build_request_body(messages: Sequence[ChatMessage], model: str, options: ChatOptions) -> Dict[str, Any]:
    """``{messages, model, options}`` with options in camelCase wire form."""
    return {
        "messages": to_wire_messages(messages),
        "model": model,
        "options": options.to_wire(),
    }


def build_headers(api_key: str) -> Dict[str, str]:
    return {
        "Authorization": f"Bearer {api_key}",
        "Content-Type": "application/json",
    }


def iter_response_lines(
    client: httpx.Client,
    url: str,
    *,
    body: Dict[str, Any],
    headers: Dict[str, str],
    timeout: float,
) -> Iterator[str]:
    """POST ``body`` and yield response lines as they arrive.

    Non-2xx statuses raise ``httpx.HTTPStatusError`` on first iteration; a
    transport failure mid-body propagates out of the iterator.
    """
    with client.stream("POST", url, json=body, headers=headers, timeout=timeout) as resp:
        resp.raise_for_status()
        yield from resp.iter_lines()


def iter_response_payloads(lines: Iterable[Union[str, bytes]], logger: logging.Logger) -> Iterator[Any]:
    """Decode body lines into JSON payloads.

    Malformed ``data:`` lines are dropped and logged at debug level; ``[DONE]``
    and non-``data:`` lines are ignored.
    """

    def _on_error(line: Union[str, bytes], exc: ValueError) -> None:
        log_event(logger, "stream.decode_error", level=logging.DEBUG, error=str(exc))

    return iter_sse_payloads(lines, on_error=_on_error)


def make_payload_translator(paths: Sequence[ContentPath]):
    """Build a translator mapping one decoded payload to a text delta."""

    def _translate(payload: Any) -> Optional[StreamDelta]:
        content = first_present(payload, paths)
        return StreamDelta(content=content) if content else None

    return _translate


__all__ = [
    "build_request_body",
    "build_headers",
    "iter_response_lines",
    "iter_response_payloads",
    "make_payload_translator",
]
