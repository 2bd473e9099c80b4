"""TC Wrapper REST adapter package."""

from .client import TCWrapperProvider

__all__ = ["TCWrapperProvider"]
