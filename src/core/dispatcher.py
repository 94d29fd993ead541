"""
Pattern dispatcher - turns a (mode, pattern id) request into registry lookups
and capture-wrapped demo runs.

Every method returns a ``DispatchResult`` instead of raising: lookup misses,
demo failures and malformed requests are all explicit result statuses, so the
console and HTTP surfaces decide how to present them.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Generic, List, Optional, TypeVar, Union

from src.constants import (
    COMPARE_PHASE_DESCRIPTIONS,
    PHASE_DESCRIPTIONS,
    RUN_ALL_HEADER,
)

from .capture import capture_call
from .registry import PatternCategory, PatternEntry, PatternRegistry, Phase

logger = logging.getLogger(__name__)

T = TypeVar('T')


class DispatchMode(str, Enum):
    """Supported dispatch modes."""
    BEFORE = "before"
    AFTER = "after"
    COMPARE = "compare"
    ALL = "all"
    CATEGORIES = "categories"
    LIST = "list"


PATTERN_MODES = {DispatchMode.BEFORE, DispatchMode.AFTER, DispatchMode.COMPARE}


class DispatchStatus(str, Enum):
    """Outcome of a dispatch."""
    OK = "ok"
    NOT_FOUND = "not_found"
    FAILED = "failed"
    INVALID = "invalid"


@dataclass(frozen=True)
class PhaseRun:
    """Captured output of one before/after operation."""
    pattern: PatternEntry
    phase: Phase
    output: str

    @property
    def description(self) -> str:
        return PHASE_DESCRIPTIONS[self.phase.value]

    @property
    def compare_description(self) -> str:
        return COMPARE_PHASE_DESCRIPTIONS[self.phase.value]


@dataclass(frozen=True)
class Comparison:
    """Before and after outputs of one pattern, captured separately."""
    pattern: PatternEntry
    before: PhaseRun
    after: PhaseRun


@dataclass(frozen=True)
class AllRun:
    """Output of every pattern's before and after operation."""
    output: str
    total_patterns: int


@dataclass(frozen=True)
class DispatchResult(Generic[T]):
    """
    Explicit result of a dispatch.

    ``value`` is set when status is OK. For FAILED results, ``error``,
    ``pattern_id``, ``phase`` and ``partial_output`` describe what broke.
    """
    status: DispatchStatus
    value: Optional[T] = None
    error: Optional[str] = None
    pattern_id: Optional[str] = None
    phase: Optional[Phase] = None
    partial_output: str = ""

    @property
    def ok(self) -> bool:
        return self.status is DispatchStatus.OK

    @classmethod
    def success(cls, value: T, pattern_id: Optional[str] = None) -> "DispatchResult[T]":
        return cls(status=DispatchStatus.OK, value=value, pattern_id=pattern_id)

    @classmethod
    def not_found(cls, pattern_id: str) -> "DispatchResult[T]":
        return cls(
            status=DispatchStatus.NOT_FOUND,
            error=f"Pattern '{pattern_id}' not found",
            pattern_id=pattern_id,
        )

    @classmethod
    def invalid(cls, error: str) -> "DispatchResult[T]":
        return cls(status=DispatchStatus.INVALID, error=error)

    @classmethod
    def failure(
        cls,
        error: Exception,
        pattern_id: Optional[str] = None,
        phase: Optional[Phase] = None,
        partial_output: str = "",
    ) -> "DispatchResult[T]":
        return cls(
            status=DispatchStatus.FAILED,
            error=str(error) or error.__class__.__name__,
            pattern_id=pattern_id,
            phase=phase,
            partial_output=partial_output,
        )


class PatternDispatcher:
    """
    Runs pattern demos on behalf of the console and HTTP surfaces.

    Usage:
        dispatcher = PatternDispatcher(get_registry())
        result = dispatcher.compare("strategy")
        if result.ok:
            print(result.value.after.output)
    """

    def __init__(self, registry: PatternRegistry):
        self.registry = registry

    def run_phase(self, pattern_id: str, phase: Union[Phase, str]) -> DispatchResult[PhaseRun]:
        """Run one before/after operation in its own capture scope."""
        phase = Phase(phase)
        entry = self.registry.get(pattern_id)
        if entry is None:
            logger.info(f"Pattern '{pattern_id}' not found")
            return DispatchResult.not_found(pattern_id)

        captured = capture_call(entry.operation(phase))
        if not captured.ok:
            logger.error(
                f"{entry.name} {phase.value} demo failed: {captured.error}",
                exc_info=captured.error,
            )
            return DispatchResult.failure(
                captured.error,
                pattern_id=entry.id,
                phase=phase,
                partial_output=captured.text,
            )

        return DispatchResult.success(
            PhaseRun(pattern=entry, phase=phase, output=captured.text),
            pattern_id=entry.id,
        )

    def compare(self, pattern_id: str) -> DispatchResult[Comparison]:
        """Run before then after, each in its own non-overlapping scope."""
        before = self.run_phase(pattern_id, Phase.BEFORE)
        if not before.ok:
            return before  # type: ignore[return-value]

        after = self.run_phase(pattern_id, Phase.AFTER)
        if not after.ok:
            return after  # type: ignore[return-value]

        entry = before.value.pattern
        return DispatchResult.success(
            Comparison(pattern=entry, before=before.value, after=after.value),
            pattern_id=entry.id,
        )

    def run_all(self) -> DispatchResult[AllRun]:
        """Run every pattern's before and after in one scope, in registration order."""
        entries = self.registry.list_all()
        progress: Dict[str, Union[str, Phase, None]] = {"pattern_id": None, "phase": None}

        def run_everything() -> None:
            print(RUN_ALL_HEADER)
            for entry in entries:
                for phase in (Phase.BEFORE, Phase.AFTER):
                    progress["pattern_id"] = entry.id
                    progress["phase"] = phase
                    entry.operation(phase)()

        captured = capture_call(run_everything)
        if not captured.ok:
            logger.error(f"Run-all failed at '{progress['pattern_id']}': {captured.error}")
            return DispatchResult.failure(
                captured.error,
                pattern_id=progress["pattern_id"],
                phase=progress["phase"],
                partial_output=captured.text,
            )

        logger.info(f"Ran all {len(entries)} patterns")
        return DispatchResult.success(AllRun(output=captured.text, total_patterns=len(entries)))

    def categories(self) -> DispatchResult[Dict[PatternCategory, List[PatternEntry]]]:
        """Patterns grouped by category. Nothing is executed."""
        return DispatchResult.success(self.registry.group_by_category())

    def list_patterns(self) -> DispatchResult[List[PatternEntry]]:
        """All pattern entries in registration order. Nothing is executed."""
        return DispatchResult.success(self.registry.list_all())

    def dispatch(
        self,
        mode: Union[DispatchMode, str],
        pattern_id: Optional[str] = None,
    ) -> DispatchResult:
        """
        Single entry point routing a mode to the matching method.

        Args:
            mode: One of before, after, compare, all, categories, list
            pattern_id: Required for before, after and compare

        Returns:
            DispatchResult; INVALID for an unknown mode or a missing pattern id
        """
        try:
            mode = DispatchMode(mode)
        except ValueError:
            return DispatchResult.invalid(f"Unknown mode '{mode}'")

        if mode in PATTERN_MODES and not pattern_id:
            return DispatchResult.invalid(f"Mode '{mode.value}' requires a pattern id")

        if mode is DispatchMode.BEFORE:
            return self.run_phase(pattern_id, Phase.BEFORE)
        if mode is DispatchMode.AFTER:
            return self.run_phase(pattern_id, Phase.AFTER)
        if mode is DispatchMode.COMPARE:
            return self.compare(pattern_id)
        if mode is DispatchMode.ALL:
            return self.run_all()
        if mode is DispatchMode.CATEGORIES:
            return self.categories()
        return self.list_patterns()


__all__ = [
    "DispatchMode",
    "DispatchStatus",
    "DispatchResult",
    "PhaseRun",
    "Comparison",
    "AllRun",
    "PatternDispatcher",
]
