"""Helpers for decoding ``data:``-prefixed JSON lines from REST backends.

Candidate paths are explicit ordered tuples; the first one that resolves to a
non-empty string wins. Path items are mapping keys (``str``) or list indexes
(``int``).
"""

from __future__ import annotations

import json
from typing import Any, Callable, Iterable, Iterator, Optional, Sequence, Tuple, Union

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL

PathItem = Union[str, int]
ContentPath = Tuple[PathItem, ...]


def decode_data_line(line: Union[str, bytes, None]) -> Optional[Any]:
    """Decode a single body line.

    Returns:
        The parsed JSON payload, or ``None`` for blank lines, non-``data:``
        lines and the ``[DONE]`` sentinel.

    Raises:
        ValueError: When a ``data:`` line does not carry valid JSON.
    """
    if not line:
        return None
    text = line.decode("utf-8", errors="replace") if isinstance(line, bytes) else str(line)
    text = text.strip()
    if not text.startswith(SSE_DATA_PREFIX):
        return None
    body = text[len(SSE_DATA_PREFIX):].strip()
    if not body or body == SSE_DONE_SENTINEL:
        return None
    return json.loads(body)


def resolve_path(payload: Any, path: ContentPath) -> Any:
    """Walk ``path`` through nested mappings/lists; ``None`` when any step is missing."""
    node = payload
    for step in path:
        if isinstance(step, int):
            if not isinstance(node, list) or not -len(node) <= step < len(node):
                return None
            node = node[step]
        else:
            if not isinstance(node, dict):
                return None
            node = node.get(step)
        if node is None:
            return None
    return node


def first_present(payload: Any, paths: Sequence[ContentPath]) -> Optional[str]:
    """Return the first non-empty string found along ``paths``."""
    for path in paths:
        value = resolve_path(payload, path)
        if isinstance(value, str) and value:
            return value
    return None


def iter_sse_payloads(
    lines: Iterable[Union[str, bytes]],
    on_error: Optional[Callable[[Union[str, bytes], ValueError], None]] = None,
) -> Iterator[Any]:
    """Yield decoded payloads, skipping non-``data:`` lines and ``[DONE]``.

    Malformed ``data:`` lines are skipped; ``on_error`` (when given) is called
    with the offending line and the decode error.
    """
    for line in lines:
        try:
            payload = decode_data_line(line)
        except ValueError as exc:
            if on_error is not None:
                on_error(line, exc)
            continue
        if payload is not None:
            yield payload


__all__ = [
    "ContentPath",
    "decode_data_line",
    "resolve_path",
    "first_present",
    "iter_sse_payloads",
]
