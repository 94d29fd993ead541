"""API utility decorators."""

import functools
import logging
import time
from typing import Any, Callable

from src.utils.timer_utils import elapsed_ms

logger = logging.getLogger(__name__)


def with_timing(timing_field: str = "processing_time_ms"):
    """
    Decorator that records how long an endpoint took.

    Injects the elapsed milliseconds into the returned response object (or
    dict) when it has a ``processing_time_ms`` field. Exceptions are logged
    with their duration and re-raised so the exception handlers can build
    the error response.

    Args:
        timing_field: Name of the timing field in the response

    Usage:
        @router.get("/{pattern_id}/before")
        @with_timing()
        async def run_before(pattern_id: str):
            return PhaseResponse(...)
    """
    def decorator(func: Callable) -> Callable:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> Any:
            start_time = time.perf_counter()

            try:
                result = await func(*args, **kwargs)
            except Exception as e:
                logger.debug(f"{func.__name__} failed after {elapsed_ms(start_time):.1f}ms: {e}")
                raise

            processing_time = elapsed_ms(start_time)
            if hasattr(result, timing_field):
                setattr(result, timing_field, processing_time)
            elif isinstance(result, dict) and timing_field in result:
                result[timing_field] = processing_time

            return result

        return wrapper
    return decorator
