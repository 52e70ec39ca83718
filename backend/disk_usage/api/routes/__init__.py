"""API route registration."""

from fastapi import APIRouter

from disk_usage.api.routes import disk, health

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(disk.router, tags=["disk"])
