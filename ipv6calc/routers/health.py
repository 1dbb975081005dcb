"""Service status endpoints for container orchestrators.

- /health: service name and version
- /health/ready: engine limits resolve from the environment
- /health/live: the process answers HTTP
"""

import logging

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from .. import __version__
from ..config import get_allocation_prefix_length, get_max_batch_addresses, get_max_subnets

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "service": "IPv6 Calculator API",
        "version": __version__,
    }


@router.get("/health/ready")
async def readiness_check():
    """Report whether the engine limits the endpoints read per request are usable.

    Settings are re-read from the environment on every request, so a value
    changed after startup (e.g. PLAN_MAX_SUBNETS=0) would make the plan and
    batch endpoints fail. Readiness resolves the same settings and returns
    them, or 503 with the configuration error.
    """
    try:
        limits = {
            "max_subnets": get_max_subnets(),
            "max_batch_addresses": get_max_batch_addresses(),
            "allocation_prefix_length": get_allocation_prefix_length(),
        }
    except ValueError as e:
        logger.warning("Readiness check failed", extra={"error": str(e)})
        return JSONResponse(status_code=503, content={"status": "not_ready", "detail": str(e)})

    return {"status": "ready", "limits": limits}


@router.get("/health/live")
async def liveness_check():
    return {"status": "alive"}
