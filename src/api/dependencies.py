"""Shared dependencies for API routes.

The registry and dispatcher are process-wide and read-only, so a single
dispatcher instance serves every request. Tests swap the dispatcher through
``app.dependency_overrides``.
"""

import logging
import threading
from typing import Optional

from src.core.dispatcher import PatternDispatcher
from src.core.registry import get_registry

logger = logging.getLogger(__name__)

_dispatcher: Optional[PatternDispatcher] = None
_dispatcher_lock = threading.Lock()


def get_dispatcher() -> PatternDispatcher:
    """Dispatcher dependency (created once, on first request)."""
    global _dispatcher

    if _dispatcher is None:
        with _dispatcher_lock:
            if _dispatcher is None:
                _dispatcher = PatternDispatcher(get_registry())
                logger.info("PatternDispatcher initialized")
    return _dispatcher


def reset_dispatcher() -> None:
    """Reset the dispatcher singleton (for testing)."""
    global _dispatcher
    with _dispatcher_lock:
        _dispatcher = None
