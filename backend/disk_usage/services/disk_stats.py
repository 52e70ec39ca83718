"""Disk stats provider: df output parsing plus a short-lived cache."""

from __future__ import annotations

import logging
import time
from datetime import datetime, timezone
from typing import Callable, NamedTuple

from disk_usage.schemas.disk import DiskStats
from disk_usage.services.df_query import DfQuery
from disk_usage.services.errors import ParseError

logger = logging.getLogger(__name__)

BLOCK_SIZE = 1024
MIN_FIELDS = 6  # filesystem, total, used, free, used%, mount point


class CacheEntry(NamedTuple):
    """Last successful computation. Replaced as a whole, never mutated."""

    timestamp: float | None = None
    record: DiskStats | None = None


def _to_int(value: str) -> int:
    """Lenient integer coercion: anything non-numeric counts as 0."""
    digits = value[1:] if value[:1] in ("+", "-") else value
    if value.isascii() and digits.isdigit():
        return int(value)
    return 0


def _used_percent(text: str, used_bytes: int, total_bytes: int) -> int:
    reported = _to_int(text[:-1] if text.endswith("%") else text)
    if reported:
        return reported
    if not total_bytes:
        return 0
    # round half up
    return (used_bytes * 200 + total_bytes) // (total_bytes * 2)


def parse_df_output(path: str, stdout: str, now: datetime | None = None) -> DiskStats:
    """Turn df -k output into a DiskStats record.

    Only the last non-empty line is read, so header variants and wrapped
    output (long device names pushed onto their own line) are tolerated.
    Numeric fields are coerced leniently; only a missing header/data line
    or a short data row is fatal.
    """
    lines = [line.strip() for line in stdout.splitlines()]
    lines = [line for line in lines if line]
    if len(lines) < 2:
        raise ParseError("unexpected df output format: expected a header and a data line")

    fields = lines[-1].split()
    if len(fields) < MIN_FIELDS:
        raise ParseError(
            f"unexpected df output format: expected at least {MIN_FIELDS} fields, got {len(fields)}"
        )

    total_bytes = _to_int(fields[1]) * BLOCK_SIZE
    used_bytes = _to_int(fields[2]) * BLOCK_SIZE
    free_bytes = _to_int(fields[3]) * BLOCK_SIZE

    return DiskStats(
        path=path,
        mount_point=" ".join(fields[5:]),
        total_bytes=total_bytes,
        used_bytes=used_bytes,
        free_bytes=free_bytes,
        used_percent=_used_percent(fields[4], used_bytes, total_bytes),
        updated_at=now or datetime.now(timezone.utc),
    )


class DiskStatsProvider:
    """Serves DiskStats for one path, re-running df at most once per window.

    Concurrent callers that find the cache stale may each run df; the last
    one to finish owns the cache slot.
    """

    def __init__(
        self,
        path: str,
        query: DfQuery,
        cache_seconds: float = 5.0,
        clock: Callable[[], float] = time.monotonic,
    ):
        self._path = path
        self._query = query
        self._cache_seconds = cache_seconds
        self._clock = clock
        self._cache = CacheEntry()

    @property
    def path(self) -> str:
        return self._path

    @property
    def cache(self) -> CacheEntry:
        return self._cache

    def _cached(self) -> DiskStats | None:
        entry = self._cache
        if entry.record is None or entry.timestamp is None:
            return None
        if self._clock() - entry.timestamp < self._cache_seconds:
            return entry.record
        return None

    async def get_stats(self) -> DiskStats:
        """Return the cached record while fresh, otherwise query and parse df.

        Raises QueryError or ParseError; the cache is left untouched on failure.
        """
        cached = self._cached()
        if cached is not None:
            return cached

        stdout = await self._query.query_with_fallback(self._path)
        record = parse_df_output(self._path, stdout)
        self._cache = CacheEntry(timestamp=self._clock(), record=record)
        logger.debug("Disk stats refreshed for %s: %s%% used", self._path, record.used_percent)
        return record
