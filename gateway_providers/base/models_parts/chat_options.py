"""
Sampling options shared by every adapter.

All fields are optional. Each adapter supplies its own defaults for the
fields it understands and ignores the rest. An explicit zero is a real value
and must not be replaced by a default, so adapters use :meth:`ChatOptions.pick`
rather than truthiness.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict, Mapping, Optional

# snake_case field → camelCase wire key used by the REST backends and inbound JSON.
WIRE_NAMES: Dict[str, str] = {
    "max_tokens": "maxTokens",
    "temperature": "temperature",
    "top_p": "topP",
    "top_k": "topK",
    "repetition_penalty": "repetitionPenalty",
    "min_p": "minP",
    "presence_penalty": "presencePenalty",
    "frequency_penalty": "frequencyPenalty",
}


@dataclass(frozen=True)
class ChatOptions:
    """Optional sampling parameters for a chat request."""

    max_tokens: Optional[int] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    top_k: Optional[int] = None
    repetition_penalty: Optional[float] = None
    min_p: Optional[float] = None
    presence_penalty: Optional[float] = None
    frequency_penalty: Optional[float] = None

    def pick(self, name: str, default: Any = None) -> Any:
        """Return the field value, or ``default`` only when the field is unset."""
        value = getattr(self, name)
        return default if value is None else value

    def with_defaults(self, defaults: Mapping[str, Any]) -> Dict[str, Any]:
        """Merge ``defaults`` with the set fields; set fields win."""
        return {name: self.pick(name, default) for name, default in defaults.items()}

    def to_dict(self) -> Dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_wire(self) -> Dict[str, Any]:
        """camelCase rendering of the set fields for REST request bodies."""
        return {WIRE_NAMES[k]: v for k, v in self.to_dict().items()}

    @classmethod
    def from_mapping(cls, data: Optional[Mapping[str, Any]]) -> "ChatOptions":
        """Build from snake_case or camelCase keys; unknown keys are ignored."""
        if not data:
            return cls()
        values: Dict[str, Any] = {}
        for f in fields(cls):
            if f.name in data:
                values[f.name] = data[f.name]
            elif WIRE_NAMES[f.name] in data:
                values[f.name] = data[WIRE_NAMES[f.name]]
        return cls(**values)


__all__ = ["ChatOptions", "WIRE_NAMES"]
