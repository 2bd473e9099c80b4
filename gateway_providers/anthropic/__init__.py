"""Claude (Anthropic Messages API) adapter package."""

from .client import ClaudeProvider

__all__ = ["ClaudeProvider"]
