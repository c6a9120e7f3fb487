"""
Roster API - Health Check Route
===============================

What:  Liveness endpoint for monitoring and load balancer probes.
How:   There are no external dependencies to probe; the check reports the
       version, the size of the shared service store and process uptime.
"""

import time

from fastapi import APIRouter, Depends

from app import __version__
from app.dependencies import get_user_service
from app.schemas.user import HealthResponse
from app.services.user_repository import UserRepository

router = APIRouter(tags=["Health"])

# Initialized once when the module loads
_start_time = time.time()


@router.get("/health", response_model=HealthResponse, summary="Service health check")
async def health_check(
    service: UserRepository = Depends(get_user_service),
) -> HealthResponse:
    return HealthResponse(
        status="healthy",
        version=__version__,
        users=len(service),
        uptime_seconds=round(time.time() - _start_time, 2),
    )
