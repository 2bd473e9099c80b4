"""Together AI adapter package."""

from .client import TogetherProvider

__all__ = ["TogetherProvider"]
