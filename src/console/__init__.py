"""Interactive console surface."""

from .menu import InteractiveMenu

__all__ = ["InteractiveMenu"]
