"""Sync tool process runner"""

import asyncio
import logging
import sys
import time
from pathlib import Path
from typing import Callable, Optional, TextIO

from ..api.exceptions import ExternalToolError
from ..constants import DEFAULT_SYNC_TOOL, MSG_SYNC_TOOL_HINT, SYNC_TOOL_URL
from ..models.job import DeployJob
from ..models.result import JobResult
from .sync_command import SyncCommand

logger = logging.getLogger(__name__)

# Conventional shell status for a missing executable
COMMAND_NOT_FOUND = 127


class CommandRunner:
    """Runs sync commands as subprocesses and forwards their output

    Output is forwarded verbatim once the process finishes. When stderr
    mentions the sync tool, an install/configure hint follows it.
    """

    def __init__(self,
                 tool: str = DEFAULT_SYNC_TOOL,
                 timeout: Optional[float] = None,
                 stdout: Optional[TextIO] = None,
                 stderr: Optional[TextIO] = None):
        """
        Args:
            tool: Sync tool executable; its base name is matched in stderr
            timeout: Seconds before a job is killed, None waits forever
            stdout: Stream for forwarded stdout (default: sys.stdout)
            stderr: Stream for forwarded stderr (default: sys.stderr)
        """
        self.tool_name = Path(tool).name
        self.timeout = timeout
        self._stdout = stdout
        self._stderr = stderr

    @property
    def stdout(self) -> TextIO:
        return self._stdout or sys.stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr or sys.stderr

    async def run(self,
                  command: SyncCommand,
                  job: Optional[DeployJob] = None,
                  callback: Optional[Callable[[JobResult], None]] = None) -> JobResult:
        """
        Execute one sync command

        Args:
            command: Command to run
            job: Job the command was built from
            callback: Called once with the result, unless the run aborts

        Returns:
            JobResult

        Raises:
            ExternalToolError: If the command failed and still wrote to stdout
        """
        logger.debug(f"Running: {command}")
        start_time = time.monotonic()
        result = await self._execute(command, job)
        result.duration = time.monotonic() - start_time

        # Failure with stdout aborts the run; failure without it is reported
        # through stderr and the run carries on.
        if result.error and result.stdout:
            raise ExternalToolError(
                f"{command.tool} exited with status {result.returncode}",
                returncode=result.returncode,
                stdout=result.stdout,
                stderr=result.stderr,
            )

        if result.stdout:
            self._write(self.stdout, result.stdout)

        if result.stderr:
            self._write(self.stderr, result.stderr)
            if self.tool_name in result.stderr:
                self._write(self.stderr, MSG_SYNC_TOOL_HINT.format(
                    tool=self.tool_name, url=SYNC_TOOL_URL
                ))

        if result.error:
            logger.info(f"Sync failed ({result.returncode}): {command.source} -> {command.destination}")
        else:
            logger.info(f"Synced {command.source} -> {command.destination}")

        if callback:
            callback(result)

        return result

    async def _execute(self, command: SyncCommand, job: Optional[DeployJob]) -> JobResult:
        try:
            process = await asyncio.create_subprocess_exec(
                *command.argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError:
            return JobResult(
                job=job,
                returncode=COMMAND_NOT_FOUND,
                stderr=f"{command.tool}: command not found\n",
                error=True,
            )
        except PermissionError as e:
            return JobResult(
                job=job,
                returncode=COMMAND_NOT_FOUND - 1,
                stderr=f"{command.tool}: {e.strerror}\n",
                error=True,
            )

        try:
            out, err = await asyncio.wait_for(process.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            await self._kill(process)
            return JobResult(
                job=job,
                returncode=process.returncode,
                stderr=f"Sync of {command.source} timed out after {self.timeout:g}s\n",
                error=True,
                timed_out=True,
            )
        except asyncio.CancelledError:
            await self._kill(process)
            raise

        return JobResult(
            job=job,
            returncode=process.returncode,
            stdout=out.decode('utf-8', errors='replace'),
            stderr=err.decode('utf-8', errors='replace'),
            error=process.returncode != 0,
        )

    @staticmethod
    async def _kill(process: asyncio.subprocess.Process) -> None:
        if process.returncode is None:
            try:
                process.kill()
            except ProcessLookupError:
                pass
            await process.wait()

    @staticmethod
    def _write(stream: TextIO, text: str) -> None:
        stream.write(text)
        stream.flush()
