"""Canonical stream lifecycle events.

A stream is ``start``, zero or more ``chunk``, then exactly one of
``finish`` or ``error``. Every event carries an ISO-8601 UTC timestamp.
Serialization only includes the fields that belong to the event type.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Literal, Mapping, Optional

from ..log_support import ISO

StreamEventType = Literal["start", "chunk", "finish", "error"]
TERMINAL_TYPES = ("finish", "error")

_FIELDS_BY_TYPE: Dict[str, tuple] = {
    "start": ("message",),
    "chunk": ("content",),
    "finish": ("finish_reason", "full_content", "content_length"),
    "error": ("error", "code"),
}


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).strftime(ISO)


@dataclass
class StreamEvent:
    """One lifecycle event of a normalized stream.

    Fields:
      type: ``start`` | ``chunk`` | ``finish`` | ``error``
      timestamp: ISO-8601 UTC creation time
      message: start banner (``start`` only)
      content: non-empty text fragment (``chunk`` only)
      finish_reason, full_content, content_length: ``finish`` only
      error, code: message and normalized error code (``error`` only)
    """

    type: StreamEventType
    timestamp: str = field(default_factory=utc_timestamp)
    message: Optional[str] = None
    content: Optional[str] = None
    finish_reason: Optional[str] = None
    full_content: Optional[str] = None
    content_length: Optional[int] = None
    error: Optional[str] = None
    code: Optional[str] = None

    @property
    def is_terminal(self) -> bool:
        return self.type in TERMINAL_TYPES

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"type": self.type}
        for name in _FIELDS_BY_TYPE.get(self.type, ()):
            value = getattr(self, name)
            if value is not None:
                data[name] = value
        data["timestamp"] = self.timestamp
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "StreamEvent":
        known = {k: data[k] for k in cls.__dataclass_fields__ if k in data}
        return cls(**known)


__all__ = [
    "StreamEvent",
    "StreamEventType",
    "TERMINAL_TYPES",
    "utc_timestamp",
]
