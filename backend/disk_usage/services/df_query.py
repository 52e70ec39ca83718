"""OS usage query: runs df against a path with a timeout and one fallback."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum

from disk_usage.services.errors import ExecError, QueryError

logger = logging.getLogger(__name__)


class DfVariant(str, Enum):
    """df argument forms, in fallback order."""

    POSIX = "posix"
    PLAIN = "plain"


DF_ARGS: dict[DfVariant, tuple[str, ...]] = {
    DfVariant.POSIX: ("-kP",),  # portable output, 1K blocks
    DfVariant.PLAIN: ("-k",),
}

FALLBACK_ORDER = (DfVariant.POSIX, DfVariant.PLAIN)


class DfQuery:
    """Invokes the df utility and returns its raw stdout."""

    DEFAULT_TIMEOUT = 5.0  # seconds

    def __init__(self, binary: str = "df", timeout: float = DEFAULT_TIMEOUT):
        self._binary = binary
        self._timeout = timeout

    async def query(self, path: str, variant: DfVariant = DfVariant.POSIX) -> str:
        """Run df once with the given argument variant.

        Raises ExecError on non-zero exit, timeout or when the binary
        cannot be started. A timed-out child is killed and reaped before
        the error is raised.
        """
        args = [self._binary, *DF_ARGS[variant], path]
        cmd = " ".join(args)
        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as e:
            raise ExecError(f"{cmd} could not be started: {e}") from e

        try:
            stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=self._timeout)
        except asyncio.TimeoutError:
            await self._kill(process)
            raise ExecError(f"{cmd} timed out after {int(self._timeout * 1000)} ms") from None
        except BaseException:
            await self._kill(process)
            raise

        if process.returncode != 0:
            message = stderr.decode(errors="replace").strip() or stdout.decode(errors="replace").strip()
            raise ExecError(f"{cmd} exited with code {process.returncode}: {message}")
        return stdout.decode(errors="replace")

    async def query_with_fallback(self, path: str) -> str:
        """Try each variant in FALLBACK_ORDER; QueryError if all of them fail."""
        last_error: ExecError | None = None
        for variant in FALLBACK_ORDER:
            try:
                return await self.query(path, variant)
            except ExecError as e:
                last_error = e
                if variant is not FALLBACK_ORDER[-1]:
                    logger.warning("df %s variant failed, falling back: %s", variant.value, e)
        raise QueryError(str(last_error)) from last_error

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is not None:
            return
        try:
            process.kill()
        except ProcessLookupError:
            pass
        await process.wait()
