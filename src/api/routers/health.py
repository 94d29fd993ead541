"""Health check API endpoint."""

import logging
from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from src.config import get_settings
from src.constants import SERVICE_NAME, SERVICE_VERSION
from src.core.registry import get_registry

from ..schemas.common import HealthStatus, HealthStatusEnum

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get(
    "/health",
    response_model=HealthStatus,
    operation_id="getHealth",
    summary="Check service health",
)
async def health_check():
    """
    Check the health of the service.

    Returns status of:
    - Pattern registry (number of registered patterns)
    """
    components: Dict[str, Dict[str, Any]] = {}

    try:
        registry = get_registry()
        components["pattern_registry"] = {
            "status": HealthStatusEnum.healthy.value if len(registry) else HealthStatusEnum.degraded.value,
            "patterns": len(registry),
        }
    except Exception as e:
        logger.error(f"Registry health check failed: {e}")
        components["pattern_registry"] = {
            "status": HealthStatusEnum.unhealthy.value,
            "message": str(e),
        }

    statuses = {c.get("status") for c in components.values()}
    if HealthStatusEnum.unhealthy.value in statuses:
        status = HealthStatusEnum.unhealthy
    elif HealthStatusEnum.degraded.value in statuses:
        status = HealthStatusEnum.degraded
    else:
        status = HealthStatusEnum.healthy

    return HealthStatus(
        status=status,
        version=SERVICE_VERSION,
        timestamp=datetime.now(timezone.utc),
        components=components,
    )


@router.get(
    "/",
    response_model=Dict[str, str],
    operation_id="getRoot",
    summary="Get API information",
)
async def root():
    """Root endpoint with API information and documentation links."""
    return {
        "service": SERVICE_NAME,
        "version": SERVICE_VERSION,
        "patterns": f"{get_settings().api_prefix}/patterns",
        "docs": "/docs",
        "health": "/health",
    }
