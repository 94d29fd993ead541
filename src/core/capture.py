"""
Scoped capture of standard output.

Each OutputCapture owns its own in-memory buffer. The active buffer is held in
a context variable, so concurrent scopes in different threads or asyncio tasks
never see each other's text, and nested scopes restore the outer buffer when
they close.

While at least one scope is open anywhere in the process, ``sys.stdout`` is a
routing stream that forwards every write to the buffer of the current context,
or to the original stream when the current context has no open scope. The
original ``sys.stdout`` object is put back when the last scope closes.

Usage:
    from src.core.capture import OutputCapture

    with OutputCapture() as capture:
        print("hello")

    capture.get_output()  # "hello\\n"
"""

import io
import logging
import sys
import threading
from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

logger = logging.getLogger(__name__)

# Buffer of the innermost open scope in the current execution context
_current_buffer: ContextVar[Optional[io.StringIO]] = ContextVar(
    'capture_buffer',
    default=None
)

_router_lock = threading.Lock()
_router: Optional["_ContextRoutedStream"] = None
_open_scopes = 0


class _ContextRoutedStream(io.TextIOBase):
    """Text stream that writes to the current context's capture buffer."""

    def __init__(self, original: Optional[TextIO]):
        super().__init__()
        self.original = original

    def _target(self) -> Optional[TextIO]:
        buffer = _current_buffer.get()
        return buffer if buffer is not None else self.original

    def writable(self) -> bool:
        return True

    def write(self, text: str) -> int:
        target = self._target()
        if target is None:
            return len(text)
        return target.write(text)

    def flush(self) -> None:
        target = self._target()
        if target is not None:
            target.flush()

    def isatty(self) -> bool:
        if _current_buffer.get() is not None or self.original is None:
            return False
        return self.original.isatty()

    @property
    def encoding(self) -> str:
        return getattr(self.original, "encoding", None) or "utf-8"


def _open_scope() -> None:
    global _router, _open_scopes

    with _router_lock:
        if _router is None:
            _router = _ContextRoutedStream(sys.stdout)
            sys.stdout = _router
        _open_scopes += 1


def _close_scope() -> None:
    global _router, _open_scopes

    with _router_lock:
        _open_scopes -= 1
        if _open_scopes == 0 and _router is not None:
            # Leave sys.stdout alone if someone else replaced it meanwhile
            if sys.stdout is _router:
                sys.stdout = _router.original
            _router = None


@dataclass(frozen=True)
class CapturedOutput:
    """Text produced by one capture scope, and the error that ended it (if any)."""

    text: str
    error: Optional[Exception] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class OutputCapture:
    """
    Capture everything printed to standard output inside a ``with`` block.

    The scope is released on every exit path, including when the wrapped code
    raises; the buffer stays readable through ``get_output()`` afterwards.
    A capture object is single-use.
    """

    def __init__(self):
        self._buffer = io.StringIO()
        self._token: Optional[Token] = None
        self._active = False
        self._released = False

    @property
    def active(self) -> bool:
        return self._active

    def acquire(self) -> "OutputCapture":
        """Open the scope: install a fresh buffer as the output destination."""
        if self._active or self._released:
            raise RuntimeError("OutputCapture scopes cannot be reopened")

        _open_scope()
        self._token = _current_buffer.set(self._buffer)
        self._active = True
        return self

    def release(self) -> None:
        """Close the scope and restore the previous destination. Idempotent."""
        if not self._active:
            return

        try:
            _current_buffer.reset(self._token)
        except ValueError:
            # Token belongs to another context; the caller's own scope stays as it is
            logger.warning("Capture released outside the context that opened it")
        finally:
            self._token = None
            self._active = False
            self._released = True
            _close_scope()

    def get_output(self) -> str:
        """Return everything captured so far."""
        return self._buffer.getvalue()

    def __enter__(self) -> "OutputCapture":
        return self.acquire()

    def __exit__(self, *args) -> None:
        self.release()


def capture_call(func: Callable[[], None]) -> CapturedOutput:
    """
    Run ``func`` in its own capture scope.

    Errors raised by ``func`` are returned in the result rather than
    propagated; the scope is already released when that happens.

    Args:
        func: Zero-argument callable that prints text

    Returns:
        CapturedOutput with the text written before ``func`` returned or failed
    """
    capture = OutputCapture()
    try:
        with capture:
            func()
    except Exception as e:
        return CapturedOutput(text=capture.get_output(), error=e)
    return CapturedOutput(text=capture.get_output())


__all__ = [
    "CapturedOutput",
    "OutputCapture",
    "capture_call",
]
