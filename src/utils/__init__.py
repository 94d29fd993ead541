"""Utility modules for the design patterns showcase."""

from .log_utils import configure_logging
from .timer_utils import elapsed_ms

__all__ = [
    "configure_logging",
    "elapsed_ms",
]
