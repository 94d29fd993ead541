"""API utility functions."""

from .decorators import with_timing

__all__ = [
    "with_timing",
]
