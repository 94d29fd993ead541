"""Thread-safe singleton base class.

Used by the Singleton demo to show the production form of the pattern: one
shared instance per subclass, created lazily under double-checked locking.
"""

import logging
import threading
from abc import ABC
from typing import ClassVar, Dict, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='ThreadSafeSingleton')


class ThreadSafeSingleton(ABC):
    """Abstract base class for thread-safe singletons.

    Each subclass gets its own instance. Subclasses put one-time setup in
    ``_initialize()`` and never override ``__new__`` or ``__init__``.

    Usage:
        class Settings(ThreadSafeSingleton):
            def _initialize(self):
                self.mode = "Default"

        Settings.get_instance() is Settings.get_instance()  # True
    """

    _instances: ClassVar[Dict[type, 'ThreadSafeSingleton']] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    def __new__(cls: type[T]) -> T:
        """Create the subclass instance with double-checked locking."""
        instance = cls._instances.get(cls)
        if instance is None:
            with cls._lock:
                # Double-check after acquiring lock
                instance = cls._instances.get(cls)
                if instance is None:
                    instance = super().__new__(cls)
                    instance._initialize()
                    cls._instances[cls] = instance
        return instance  # type: ignore

    def _initialize(self) -> None:
        """Override in subclasses for one-time initialization."""

    @classmethod
    def get_instance(cls: type[T]) -> T:
        """Get the singleton instance, creating it on first call."""
        return cls()

    @classmethod
    def has_instance(cls) -> bool:
        return cls in cls._instances

    @classmethod
    def reset_instance(cls) -> None:
        """Drop the subclass instance (for testing).

        The next ``get_instance()`` call runs ``_initialize()`` again.
        """
        with cls._lock:
            instance = cls._instances.pop(cls, None)
            if instance is not None:
                logger.debug(f"{cls.__name__} singleton reset")
