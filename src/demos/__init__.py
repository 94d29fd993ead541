"""
Design pattern demos.

Each module holds one pattern as a ``before()`` (the problem) and ``after()``
(the pattern applied) pair of zero-argument functions that print their
results.
"""

from .catalog import PATTERN_CATALOG

__all__ = ["PATTERN_CATALOG"]
