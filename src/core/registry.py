"""
Pattern Registry - central, read-only store of the demo patterns.

The registry is populated exactly once from the built-in catalog and then
only read. Lookups are case-insensitive; misses return ``None`` instead of
raising.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Iterable, Iterator, List, Optional

from .exceptions import DuplicatePatternError, InvalidPatternError, RegistryFrozenError

logger = logging.getLogger(__name__)


class PatternCategory(str, Enum):
    """Categories of design patterns"""
    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"


class Phase(str, Enum):
    """The two demonstrations every pattern provides"""
    BEFORE = "before"
    AFTER = "after"


@dataclass(frozen=True)
class PatternEntry:
    """
    One registered pattern demo.

    ``before`` shows the problem, ``after`` shows the pattern solving it.
    Both are zero-argument callables whose only effect is printing text.
    """
    id: str
    name: str
    category: PatternCategory
    description: str
    before: Callable[[], None]
    after: Callable[[], None]

    def operation(self, phase: Phase) -> Callable[[], None]:
        """Return the callable for a phase."""
        return self.before if Phase(phase) is Phase.BEFORE else self.after


class PatternRegistry:
    """
    Read-only registry of pattern entries.

    Entries are kept in registration order; that order drives console menu
    numbering and the "run all" sequence.
    """

    def __init__(self, entries: Optional[Iterable[PatternEntry]] = None):
        self._patterns: Dict[str, PatternEntry] = {}
        self._frozen = False
        if entries is not None:
            self.register(entries)

    def register(self, entries: Iterable[PatternEntry]) -> None:
        """
        Populate the registry. May only be called once.

        Every entry is validated before any is stored, so a failed call
        leaves the registry empty.

        Raises:
            RegistryFrozenError: If the registry was already populated
            InvalidPatternError: If an id is empty or not lowercase
            DuplicatePatternError: If two entries share an id
        """
        if self._frozen:
            raise RegistryFrozenError()

        staged: Dict[str, PatternEntry] = {}
        for entry in entries:
            if not entry.id or not entry.id.strip():
                raise InvalidPatternError(entry.id, "id must not be empty")
            if entry.id != entry.id.lower():
                raise InvalidPatternError(entry.id, "id must be lowercase")
            if entry.id in staged:
                raise DuplicatePatternError(entry.id)
            staged[entry.id] = entry

        self._patterns = staged
        self._frozen = True
        logger.info(f"Pattern registry populated with {len(staged)} patterns")

    def get(self, pattern_id: str) -> Optional[PatternEntry]:
        """Get a pattern by id (case-insensitive). Returns None if absent."""
        pattern = self._patterns.get(pattern_id.lower())
        logger.debug(f"get('{pattern_id}') -> {'found' if pattern else 'not found'}")
        return pattern

    def list_all(self) -> List[PatternEntry]:
        """List all registered patterns in registration order"""
        return list(self._patterns.values())

    def ids(self) -> List[str]:
        return list(self._patterns.keys())

    def group_by_category(self) -> Dict[PatternCategory, List[PatternEntry]]:
        """
        Partition entries by category.

        Categories appear in the order their first entry was registered;
        each list keeps registration order.
        """
        grouped: Dict[PatternCategory, List[PatternEntry]] = {}
        for entry in self._patterns.values():
            grouped.setdefault(entry.category, []).append(entry)
        return grouped

    @property
    def frozen(self) -> bool:
        return self._frozen

    def __len__(self) -> int:
        return len(self._patterns)

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(list(self._patterns.values()))

    def __contains__(self, pattern_id: object) -> bool:
        return isinstance(pattern_id, str) and pattern_id.lower() in self._patterns


# Global registry instance (singleton)
_registry: Optional[PatternRegistry] = None
_registry_lock = threading.Lock()


def get_registry() -> PatternRegistry:
    """
    Get or create the process-wide registry populated from the catalog.

    Raises:
        DuplicatePatternError: If the catalog is misconfigured
    """
    global _registry

    if _registry is None:
        with _registry_lock:
            # Double-check after acquiring lock
            if _registry is None:
                from src.demos.catalog import PATTERN_CATALOG

                _registry = PatternRegistry(PATTERN_CATALOG)
    return _registry


def reset_registry() -> None:
    """Reset the registry singleton (for testing)."""
    global _registry
    with _registry_lock:
        _registry = None


__all__ = [
    "PatternCategory",
    "Phase",
    "PatternEntry",
    "PatternRegistry",
    "get_registry",
    "reset_registry",
]
