"""Validated inbound DTOs (pydantic)."""

from .chat import ChatOptionsDTO, ChatRequestDTO, MessageDTO

__all__ = ["ChatOptionsDTO", "ChatRequestDTO", "MessageDTO"]
