"""Service layer: gateway orchestrator and the FastAPI application."""

from .gateway import ChatGateway

__all__ = ["ChatGateway"]
