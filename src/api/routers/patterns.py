"""Pattern demo API endpoints.

Every demo runs inside its own output capture scope; the captured console
text is returned as JSON.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, Request

from src.constants import RUN_ALL_MESSAGE
from src.core.dispatcher import DispatchResult, DispatchStatus, PatternDispatcher
from src.core.exceptions import PatternExecutionError
from src.core.registry import Phase

from ..dependencies import get_dispatcher
from ..schemas.errors import BASE_ERROR_RESPONSES, PATTERN_ERROR_RESPONSES
from ..schemas.patterns import (
    CategoriesResponse,
    CategoryPattern,
    CompareResponse,
    PatternListResponse,
    PatternSummary,
    PhaseResponse,
    RunAllResponse,
)
from ..utils import with_timing

logger = logging.getLogger(__name__)
router = APIRouter()


def _raise_for_status(result: DispatchResult) -> None:
    """Turn a non-OK dispatch result into the matching HTTP error."""
    if result.status is DispatchStatus.NOT_FOUND:
        raise HTTPException(status_code=404, detail=result.error)
    if result.status is DispatchStatus.FAILED:
        raise PatternExecutionError(
            pattern_id=result.pattern_id,
            error=result.error,
            phase=result.phase.value if result.phase else None,
            partial_output=result.partial_output,
        )
    if result.status is DispatchStatus.INVALID:
        raise HTTPException(status_code=400, detail=result.error)


def _base_path(request: Request) -> str:
    """Path of the pattern collection, e.g. /api/patterns."""
    return request.url.path.rstrip("/")


@router.get(
    "",
    response_model=PatternListResponse,
    responses=BASE_ERROR_RESPONSES,
    operation_id="listPatterns",
    summary="List all available patterns",
)
async def list_patterns(
    request: Request,
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """
    List every registered pattern in registration order, with links to its
    before, after and compare endpoints.
    """
    result = dispatcher.list_patterns()
    base_path = _base_path(request)
    patterns = [PatternSummary.from_entry(entry, base_path) for entry in result.value]
    return PatternListResponse(count=len(patterns), patterns=patterns)


@router.get(
    "/all",
    response_model=RunAllResponse,
    responses=BASE_ERROR_RESPONSES,
    operation_id="runAllPatterns",
    summary="Run all patterns (before and after)",
)
@with_timing()
async def run_all(dispatcher: PatternDispatcher = Depends(get_dispatcher)):
    """
    Run every pattern's before and after demo, in registration order, inside
    one capture scope and return the combined output.
    """
    result = dispatcher.run_all()
    _raise_for_status(result)
    return RunAllResponse.from_run(result.value, message=RUN_ALL_MESSAGE)


@router.get(
    "/categories",
    response_model=CategoriesResponse,
    responses=BASE_ERROR_RESPONSES,
    operation_id="getPatternsByCategory",
    summary="Get patterns grouped by category",
)
async def get_by_category(dispatcher: PatternDispatcher = Depends(get_dispatcher)):
    """
    Patterns grouped by category (Creational, Structural, Behavioral).
    Nothing is executed.
    """
    result = dispatcher.categories()
    return {
        category.value: [CategoryPattern.from_entry(entry) for entry in entries]
        for category, entries in result.value.items()
    }


@router.get(
    "/{pattern_id}",
    response_model=PatternSummary,
    responses=PATTERN_ERROR_RESPONSES,
    operation_id="getPattern",
    summary="Get one pattern's metadata",
)
async def get_pattern(
    request: Request,
    pattern_id: str = Path(..., description="Pattern id (case-insensitive)"),
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """Metadata and endpoint links of a single pattern."""
    entry = dispatcher.registry.get(pattern_id)
    if entry is None:
        raise HTTPException(status_code=404, detail=f"Pattern '{pattern_id}' not found")

    base_path = _base_path(request).rsplit("/", 1)[0]
    return PatternSummary.from_entry(entry, base_path)


@router.get(
    "/{pattern_id}/before",
    response_model=PhaseResponse,
    responses=PATTERN_ERROR_RESPONSES,
    operation_id="runBefore",
    summary="Run the problem demo (without the pattern)",
)
@with_timing()
async def run_before(
    pattern_id: str = Path(..., description="Pattern id (case-insensitive)"),
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """Run the "before" demo of a pattern and return its console output."""
    result = dispatcher.run_phase(pattern_id, Phase.BEFORE)
    _raise_for_status(result)
    return PhaseResponse.from_run(result.value)


@router.get(
    "/{pattern_id}/after",
    response_model=PhaseResponse,
    responses=PATTERN_ERROR_RESPONSES,
    operation_id="runAfter",
    summary="Run the solution demo (with the pattern)",
)
@with_timing()
async def run_after(
    pattern_id: str = Path(..., description="Pattern id (case-insensitive)"),
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """Run the "after" demo of a pattern and return its console output."""
    result = dispatcher.run_phase(pattern_id, Phase.AFTER)
    _raise_for_status(result)
    return PhaseResponse.from_run(result.value)


@router.get(
    "/{pattern_id}/compare",
    response_model=CompareResponse,
    responses=PATTERN_ERROR_RESPONSES,
    operation_id="comparePattern",
    summary="Compare before and after for a pattern",
)
@with_timing()
async def compare(
    pattern_id: str = Path(..., description="Pattern id (case-insensitive)"),
    dispatcher: PatternDispatcher = Depends(get_dispatcher),
):
    """
    Run the before and after demos one after the other, each in its own
    capture scope, and return both outputs.
    """
    result = dispatcher.compare(pattern_id)
    _raise_for_status(result)
    return CompareResponse.from_comparison(result.value)
