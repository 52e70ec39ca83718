"""Business logic services: singleton registry."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from disk_usage.config import settings

if TYPE_CHECKING:
    from disk_usage.services.disk_stats import DiskStatsProvider

logger = logging.getLogger(__name__)

_stats_provider: DiskStatsProvider | None = None


def init_services() -> None:
    """Create the df query and the stats provider from settings."""
    global _stats_provider

    from disk_usage.services.df_query import DfQuery
    from disk_usage.services.disk_stats import DiskStatsProvider

    query = DfQuery(binary=settings.df_binary, timeout=settings.df_timeout_seconds)
    _stats_provider = DiskStatsProvider(
        path=settings.disk_path,
        query=query,
        cache_seconds=settings.cache_seconds,
    )
    logger.debug(
        "Disk stats provider initialized (path=%s, cache=%dms, timeout=%dms)",
        settings.disk_path, settings.cache_ms, settings.df_timeout_ms,
    )


def shutdown_services() -> None:
    global _stats_provider
    _stats_provider = None


def get_stats_provider() -> DiskStatsProvider:
    if _stats_provider is None:
        raise RuntimeError("Services not initialized: call init_services() first")
    return _stats_provider
