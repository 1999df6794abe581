"""Core converter."""

from .converter import ColorConverter

__all__ = ["ColorConverter"]
