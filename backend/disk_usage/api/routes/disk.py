"""Disk usage of the configured path."""

from fastapi import APIRouter

from disk_usage.schemas.disk import DiskStats, DiskStatsErrorResponse
from disk_usage.services import get_stats_provider

router = APIRouter()


@router.get(
    "/disk",
    response_model=DiskStats,
    responses={500: {"model": DiskStatsErrorResponse}},
)
async def disk_stats():
    """Current (or at most CACHE_MS old) df figures for DISK_PATH."""
    return await get_stats_provider().get_stats()
