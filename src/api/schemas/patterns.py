"""Pattern API schemas."""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from src.core.dispatcher import AllRun, Comparison, PhaseRun
from src.core.registry import PatternEntry


# =============================================================================
# Pattern Metadata
# =============================================================================

class PatternEndpoints(BaseModel):
    """Links to the runnable endpoints of one pattern."""
    before: str = Field(..., examples=["/api/patterns/singleton/before"])
    after: str = Field(..., examples=["/api/patterns/singleton/after"])
    compare: str = Field(..., examples=["/api/patterns/singleton/compare"])


class PatternSummary(BaseModel):
    """Metadata of one registered pattern."""
    id: str = Field(..., examples=["singleton"])
    name: str = Field(..., examples=["Singleton"])
    category: str = Field(..., examples=["Creational"])
    description: str = Field(..., examples=["Ensures a class has only one instance"])
    endpoints: PatternEndpoints

    @classmethod
    def from_entry(cls, entry: PatternEntry, base_path: str) -> "PatternSummary":
        return cls(
            id=entry.id,
            name=entry.name,
            category=entry.category.value,
            description=entry.description,
            endpoints=PatternEndpoints(
                before=f"{base_path}/{entry.id}/before",
                after=f"{base_path}/{entry.id}/after",
                compare=f"{base_path}/{entry.id}/compare",
            ),
        )


class PatternListResponse(BaseModel):
    """All registered patterns in registration order."""
    success: bool = True
    count: int = Field(..., examples=[15])
    patterns: List[PatternSummary]


class CategoryPattern(BaseModel):
    """Pattern metadata as listed under its category."""
    id: str
    name: str
    description: str

    @classmethod
    def from_entry(cls, entry: PatternEntry) -> "CategoryPattern":
        return cls(id=entry.id, name=entry.name, description=entry.description)


CategoriesResponse = Dict[str, List[CategoryPattern]]


# =============================================================================
# Demo Output
# =============================================================================

class PhaseResponse(BaseModel):
    """Captured output of a before or after demo."""
    success: bool = True
    pattern: str = Field(..., examples=["Strategy"])
    phase: str = Field(..., examples=["before"])
    description: str = Field(..., examples=["Problem demonstration (without pattern)"])
    output: str = Field(..., examples=["StrategyBefore A: HELLO\nStrategyBefore B: hello\n"])
    processing_time_ms: Optional[float] = None

    @classmethod
    def from_run(cls, run: PhaseRun) -> "PhaseResponse":
        return cls(
            pattern=run.pattern.name,
            phase=run.phase.value,
            description=run.description,
            output=run.output,
        )


class PhaseOutput(BaseModel):
    """One side of a comparison."""
    description: str
    output: str

    @classmethod
    def from_run(cls, run: PhaseRun) -> "PhaseOutput":
        return cls(description=run.compare_description, output=run.output)


class CompareResponse(BaseModel):
    """Before and after outputs of one pattern side by side."""
    success: bool = True
    pattern: str = Field(..., examples=["Strategy"])
    category: str = Field(..., examples=["Behavioral"])
    description: str = Field(..., examples=["Encapsulates interchangeable algorithms"])
    before: PhaseOutput
    after: PhaseOutput
    processing_time_ms: Optional[float] = None

    @classmethod
    def from_comparison(cls, comparison: Comparison) -> "CompareResponse":
        return cls(
            pattern=comparison.pattern.name,
            category=comparison.pattern.category.value,
            description=comparison.pattern.description,
            before=PhaseOutput.from_run(comparison.before),
            after=PhaseOutput.from_run(comparison.after),
        )


class RunAllResponse(BaseModel):
    """Output of every pattern's before and after demo."""
    success: bool = True
    message: str = Field(..., examples=["All patterns executed"])
    total_patterns: int = Field(..., examples=[15])
    output: str
    processing_time_ms: Optional[float] = None

    @classmethod
    def from_run(cls, run: AllRun, message: str) -> "RunAllResponse":
        return cls(message=message, total_patterns=run.total_patterns, output=run.output)
