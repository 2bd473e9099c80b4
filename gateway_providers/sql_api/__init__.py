"""Text-to-SQL REST adapter package."""

from .client import SQLAPIProvider

__all__ = ["SQLAPIProvider"]
