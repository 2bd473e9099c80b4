"""
Pydantic DTOs for inbound chat requests.

Purpose
-------
Validate the HTTP request body before it reaches the gateway: message roles,
option types and numeric bounds. Options accept both camelCase (``maxTokens``)
and snake_case (``max_tokens``) keys.

Fallback semantics: validation either succeeds or raises
``pydantic.ValidationError``; the service layer turns that into a 422.
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ..models import ChatMessage, ChatOptions

Role = Literal["system", "user", "assistant"]


class MessageDTO(BaseModel):
    """One inbound message; ``role`` must be system, user or assistant."""

    role: Role
    content: str

    def to_domain(self) -> ChatMessage:
        return ChatMessage(role=self.role, content=self.content)


class ChatOptionsDTO(BaseModel):
    """Sampling options; unset fields stay ``None`` so adapter defaults apply."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    max_tokens: Optional[int] = Field(default=None, gt=0)
    temperature: Optional[float] = Field(default=None, ge=0.0, le=2.0)
    top_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    top_k: Optional[int] = Field(default=None, ge=0)
    repetition_penalty: Optional[float] = Field(default=None, gt=0.0)
    min_p: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    presence_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)
    frequency_penalty: Optional[float] = Field(default=None, ge=-2.0, le=2.0)

    def to_domain(self) -> ChatOptions:
        return ChatOptions(**self.model_dump(exclude_none=True))


class ChatRequestDTO(BaseModel):
    """Inbound chat request.

    Parameters:
        messages: Conversation; may be empty (a default prompt is used).
        model: Model name; omitted means the gateway default.
        options: Optional sampling options.
        stream: Stream SSE events (default) or return one JSON response.
    """

    messages: List[MessageDTO] = Field(default_factory=list)
    model: Optional[str] = None
    options: Optional[ChatOptionsDTO] = None
    stream: bool = True

    def domain_messages(self) -> List[ChatMessage]:
        return [m.to_domain() for m in self.messages]

    def domain_options(self) -> ChatOptions:
        return self.options.to_domain() if self.options else ChatOptions()


__all__ = ["Role", "MessageDTO", "ChatOptionsDTO", "ChatRequestDTO"]
