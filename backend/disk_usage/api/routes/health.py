"""Health check: independent of the disk query and its cache."""

from fastapi import APIRouter

from disk_usage.schemas.health import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Liveness probe."""
    return HealthResponse()
