"""
Deciservice — Health Check Route
==================================

What:  Health check endpoint for monitoring and load balancer probes.
How:   Asks the notes resource to reach its store and reports aggregate status.
Who:   Called by Docker health checks, load balancers, and monitoring systems.

Status levels:
    - healthy:   database reachable (HTTP 200)
    - unhealthy: database unreachable (HTTP 503, stop routing traffic)
"""

import logging
import time

from fastapi import APIRouter, Response, status

from deciservice import __version__
from deciservice.dependencies import NotesResourceDep
from deciservice.schemas.note import HealthResponse

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Set once when the module loads, for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    responses={503: {"description": "Database unreachable", "model": HealthResponse}},
)
async def health_check(
    response: Response,
    notes_resource: NotesResourceDep,
) -> HealthResponse:
    """
    Check the health of the service and its database.

    The check is a lightweight SELECT 1, cheap enough for probes every few seconds.
    """
    if await notes_resource.health_check():
        db_status, overall = "connected", "healthy"
    else:
        db_status, overall = "disconnected", "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthResponse(
        status=overall,
        version=__version__,
        database=db_status,
        uptime_seconds=round(time.time() - _start_time, 2),
    )
