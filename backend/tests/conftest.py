"""Test fixtures: fake df query, controllable clock and FastAPI test client."""

from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from disk_usage.main import create_app
from disk_usage.services.disk_stats import DiskStatsProvider

DF_HEADER = "Filesystem     1024-blocks      Used Available Capacity Mounted on"
DF_OUTPUT = f"{DF_HEADER}\n/dev/sda1 1048576 524288 524288 50% /mnt/plexdrive\n"


class FakeClock:
    """Monotonic clock stand-in, advanced by hand."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def advance(self, seconds: float) -> None:
        self.now += seconds

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def df_query():
    query = MagicMock()
    query.query_with_fallback = AsyncMock(return_value=DF_OUTPUT)
    return query


@pytest.fixture
def provider(df_query, clock):
    return DiskStatsProvider(
        path="/mnt/plexdrive",
        query=df_query,
        cache_seconds=5.0,
        clock=clock,
    )


@pytest_asyncio.fixture
async def client():
    """Async test client; the lifespan does not run, so services are patched per test."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
