"""Errors raised while acquiring disk statistics."""


class DiskStatsError(Exception):
    """Base class: anything the /disk route reports as a 500."""


class ExecError(DiskStatsError):
    """A single df invocation failed (non-zero exit, timeout, missing binary)."""


class QueryError(DiskStatsError):
    """Every df argument variant failed."""


class ParseError(DiskStatsError):
    """df output did not have the expected tabular shape."""
