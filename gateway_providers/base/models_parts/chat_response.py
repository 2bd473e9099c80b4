"""
ChatResponse DTO representing the canonical non-streaming result.

``choices`` and ``usage`` are passed through from the backend as plain data.
An error-flagged response always carries the fixed fallback content with zero
usage; :func:`error_response` is the only place that builds one.
"""
from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from ..constants import ERROR_FALLBACK_CONTENT, GENERIC_ERROR_MESSAGE
from ..errors_parts.error_code import ErrorCode
from ..errors_parts.provider_error import ProviderError


def assistant_choices(content: str) -> List[Dict[str, Any]]:
    """Single-choice list wrapping ``content`` as an assistant message."""
    return [{"message": {"role": "assistant", "content": content}}]


@dataclass
class ChatResponse:
    """Provider-agnostic response from a chat invocation.

    Attributes:
        model: Model that served the request (``"error"`` when resolution failed).
        content: Assistant text, or the fallback text on error.
        choices: Backend choice list (opaque).
        usage: Backend usage mapping (opaque).
        created: Unix seconds.
        response_length: Length of ``content`` as delivered by the backend.
        error: Error message when the request failed.
        error_code: Normalized :class:`ErrorCode` value when the request failed.
    """

    model: str
    content: str
    choices: List[Any] = field(default_factory=list)
    usage: Dict[str, Any] = field(default_factory=dict)
    created: int = field(default_factory=lambda: int(time.time()))
    response_length: int = 0
    error: Optional[str] = None
    error_code: Optional[str] = None

    @property
    def is_error(self) -> bool:
        return self.error is not None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "model": self.model,
            "content": self.content,
            "choices": self.choices,
            "usage": self.usage,
            "created": self.created,
            "response_length": self.response_length,
        }
        if self.error is not None:
            data["error"] = self.error
            data["error_code"] = self.error_code
        return data

    @classmethod
    def success(
        cls,
        *,
        model: str,
        content: Optional[str],
        choices: Optional[List[Any]] = None,
        usage: Optional[Dict[str, Any]] = None,
        created: Optional[int] = None,
    ) -> "ChatResponse":
        text = content or ""
        return cls(
            model=model,
            content=text,
            choices=list(choices) if choices else assistant_choices(text),
            usage=dict(usage) if usage else {"total_tokens": 0},
            created=int(created) if created else int(time.time()),
            response_length=len(text),
        )


def error_response(
    error: Any,
    model: str,
    code: ErrorCode | str | None = None,
) -> ChatResponse:
    """Build the error-flagged :class:`ChatResponse`.

    Parameters:
        error: Exception or message. Empty values fall back to a generic text.
        model: Requested model, or ``"error"`` when no backend was chosen.
        code: Optional normalized error code.
    """
    if isinstance(error, ProviderError):
        message = error.message
    else:
        message = str(error) if error is not None else ""
    code_value = code.value if isinstance(code, ErrorCode) else code
    return ChatResponse(
        model=model,
        content=ERROR_FALLBACK_CONTENT,
        choices=assistant_choices(ERROR_FALLBACK_CONTENT),
        usage={"total_tokens": 0},
        created=int(time.time()),
        response_length=0,
        error=message or GENERIC_ERROR_MESSAGE,
        error_code=code_value or ErrorCode.UNKNOWN.value,
    )


__all__ = ["ChatResponse", "assistant_choices", "error_response"]
