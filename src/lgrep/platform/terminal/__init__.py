"""Terminal input helpers."""

from .keypress import KeypressListener

__all__ = ["KeypressListener"]
