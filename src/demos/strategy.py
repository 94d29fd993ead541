"""Strategy: encapsulate interchangeable algorithms.

Both demos turn "Hello" into "HELLO" and "hello". The difference is where the
algorithm choice lives.
"""

from abc import ABC, abstractmethod


# =============================================================================
# Before: algorithm selected by a string flag inside the context
# =============================================================================

class Context:
    """Context with hard-coded algorithm selection."""

    def operation(self, data: str, algorithm: str) -> str:
        # Every new algorithm means another branch here
        if algorithm == "A":
            return data.upper()
        if algorithm == "B":
            return data.lower()
        return data


def before() -> None:
    ctx = Context()
    print(f"StrategyBefore A: {ctx.operation('Hello', 'A')}")
    print(f"StrategyBefore B: {ctx.operation('Hello', 'B')}")


# =============================================================================
# After: each algorithm is its own strategy object
# =============================================================================

class Operation(ABC):
    """Family of interchangeable text transformations."""

    @abstractmethod
    def execute(self, text: str) -> str:
        ...


class UpperOp(Operation):
    def execute(self, text: str) -> str:
        return text.upper()


class LowerOp(Operation):
    def execute(self, text: str) -> str:
        return text.lower()


class StrategyContext:
    """
    Uses a strategy without knowing its concrete type.

    The strategy is injected at construction; ``do`` just delegates.
    """

    def __init__(self, operation: Operation):
        self._operation = operation

    def do(self, text: str) -> str:
        return self._operation.execute(text)


def after() -> None:
    ctx_a = StrategyContext(UpperOp())
    ctx_b = StrategyContext(LowerOp())

    print(f"StrategyAfter A: {ctx_a.do('Hello')}")
    print(f"StrategyAfter B: {ctx_b.do('Hello')}")
