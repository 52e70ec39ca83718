"""Disk statistics schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class DiskStats(BaseModel):
    """Usage of the configured path, as reported by df. Serialised in camelCase."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    path: str
    mount_point: str
    total_bytes: int
    used_bytes: int
    free_bytes: int
    used_percent: int
    updated_at: datetime


class DiskStatsErrorResponse(BaseModel):
    error: str = "disk stats failed"
    message: str
