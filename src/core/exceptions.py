"""
Custom exceptions for the pattern registry and demo execution.
"""

from typing import Optional, Dict, Any


class PatternShowcaseError(Exception):
    """Base exception for pattern showcase errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DuplicatePatternError(PatternShowcaseError):
    """
    Raised when two entries are registered under the same pattern id.

    This is a startup configuration error: the process should not start.
    """

    def __init__(self, pattern_id: str):
        self.pattern_id = pattern_id
        super().__init__(
            message=f"Pattern '{pattern_id}' is registered more than once",
            details={"pattern_id": pattern_id},
        )


class InvalidPatternError(PatternShowcaseError):
    """Raised when a pattern entry has an unusable id."""

    def __init__(self, pattern_id: str, reason: str):
        self.pattern_id = pattern_id
        super().__init__(
            message=f"Invalid pattern id '{pattern_id}': {reason}",
            details={"pattern_id": pattern_id, "reason": reason},
        )


class RegistryFrozenError(PatternShowcaseError):
    """Raised when entries are registered after the registry was populated."""

    def __init__(self):
        super().__init__(message="Pattern registry is already populated and read-only")


class PatternExecutionError(PatternShowcaseError):
    """
    Raised by the HTTP layer when a before/after operation fails.

    Carries the partial output captured before the failure so the
    exception handler can return it in the HTTP 500 body.
    """

    def __init__(
        self,
        pattern_id: Optional[str],
        error: str,
        phase: Optional[str] = None,
        partial_output: str = "",
    ):
        self.pattern_id = pattern_id
        self.phase = phase
        self.partial_output = partial_output
        super().__init__(
            message=error,
            details={"pattern_id": pattern_id, "phase": phase},
        )

    def to_response_dict(self) -> Dict[str, Any]:
        """Convert to HTTP 500 response body."""
        return {
            "success": False,
            "error": self.message,
            "pattern": self.pattern_id,
            "phase": self.phase,
            "output": self.partial_output,
        }


__all__ = [
    "PatternShowcaseError",
    "DuplicatePatternError",
    "InvalidPatternError",
    "RegistryFrozenError",
    "PatternExecutionError",
]
