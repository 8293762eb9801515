"""Health Probe: liveness endpoint for container orchestration.

Invariants:
    - GET /api/health always returns 200 if process is up
    - Never calls Gemini
"""

from fastapi import APIRouter, status

from motivation_api import __version__
from motivation_api.schemas.quote import HealthResponse

router = APIRouter(prefix="/api/health", tags=["health"])


@router.get("", status_code=status.HTTP_200_OK, response_model=HealthResponse)
async def health_check():
    """Basic liveness probe. Returns 200 if the process is up."""
    return HealthResponse(
        status="healthy", service="motivation-api", version=__version__,
    )
