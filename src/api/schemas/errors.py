"""Shared error response definitions for OpenAPI documentation."""

from .common import ErrorResponse, ExecutionErrorResponse

BASE_ERROR_RESPONSES = {
    500: {"model": ErrorResponse, "description": "Internal server error"},
}

PATTERN_ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Pattern not found"},
    500: {"model": ExecutionErrorResponse, "description": "Demo raised while running"},
}
