"""Model routing (static model → backend dispatch)."""

from .dispatcher import MODEL_PROVIDER_MAP, ModelDispatcher

__all__ = ["MODEL_PROVIDER_MAP", "ModelDispatcher"]
