"""Common schema models shared across API endpoints."""

from datetime import datetime
from enum import Enum
from typing import Optional, Dict, Any, List

from pydantic import BaseModel, Field

from src.constants import SERVICE_VERSION


class HealthStatusEnum(str, Enum):
    """Health status values for service components."""
    healthy = "healthy"
    unhealthy = "unhealthy"
    degraded = "degraded"


class ErrorResponse(BaseModel):
    """Standard error response."""
    success: bool = Field(default=False, examples=[False])
    error: str = Field(..., examples=["Pattern 'bogus' not found"])
    message: Optional[str] = None
    status_code: Optional[int] = Field(default=None, examples=[404])
    details: Optional[List[Dict[str, Any]]] = None
    request_id: Optional[str] = Field(default=None, examples=["a1b2c3d4"])


class ExecutionErrorResponse(BaseModel):
    """Error response for a demo that raised while running."""
    success: bool = False
    error: str = Field(..., examples=["division by zero"])
    pattern: Optional[str] = Field(default=None, examples=["strategy"])
    phase: Optional[str] = Field(default=None, examples=["after"])
    output: str = Field(default="", description="Output captured before the failure")
    request_id: Optional[str] = None


class HealthStatus(BaseModel):
    """Service health status."""
    status: HealthStatusEnum = Field(default=HealthStatusEnum.healthy, examples=["healthy"])
    version: str = Field(default=SERVICE_VERSION, examples=[SERVICE_VERSION])
    timestamp: datetime
    components: Dict[str, Dict[str, Any]] = Field(default_factory=dict)
