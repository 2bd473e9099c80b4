"""
Chat message DTO used across adapters.

Defines the `ChatMessage` dataclass and the `Role` literal. Only the three
conversational roles are accepted; anything else is rejected at construction.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Literal, Mapping

# Message roles accepted by the gateway.
Role = Literal["system", "user", "assistant"]
ROLES = ("system", "user", "assistant")


@dataclass(frozen=True)
class ChatMessage:
    """A single conversational turn.

    Attributes:
        role: ``"system"``, ``"user"`` or ``"assistant"``.
        content: Plain text content.

    Raises:
        ValueError: When ``role`` is not one of :data:`ROLES`.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"invalid message role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ChatMessage":
        return cls(role=data.get("role"), content=str(data.get("content") or ""))


__all__ = ["ChatMessage", "Role", "ROLES"]
