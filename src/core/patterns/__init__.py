"""Core patterns module.

Provides reusable design pattern base classes.
"""

from .singleton import ThreadSafeSingleton

__all__ = ["ThreadSafeSingleton"]
