"""pygame viewer for traced levels."""

from .view import TraceView, ensure_pygame

__all__ = ["TraceView", "ensure_pygame"]
