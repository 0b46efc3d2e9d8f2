"""Sync tool command construction"""

import shlex
from dataclasses import dataclass, field
from typing import List, Optional

from ..api.exceptions import ValidationError
from ..constants import DEFAULT_BUCKET, DEFAULT_SCHEME, DEFAULT_SYNC_TOOL, DEFAULT_CACHE_MAX_AGE
from ..models.job import DeployJob


@dataclass(frozen=True)
class SyncCommand:
    """Argument vector for one sync tool invocation"""

    argv: List[str] = field(default_factory=list)

    @property
    def tool(self) -> str:
        return self.argv[0]

    @property
    def source(self) -> str:
        return self.argv[-2]

    @property
    def destination(self) -> str:
        return self.argv[-1]

    def __str__(self) -> str:
        return shlex.join(self.argv)


def build_sync_command(directory: str,
                       remote_path: str,
                       expiry: str,
                       mime_type: Optional[str] = None,
                       cache_safe: bool = False,
                       tool: str = DEFAULT_SYNC_TOOL,
                       bucket: str = DEFAULT_BUCKET,
                       scheme: str = DEFAULT_SCHEME,
                       cache_max_age: int = DEFAULT_CACHE_MAX_AGE) -> SyncCommand:
    """
    Build a recursive, world-readable sync of ``directory`` to the bucket

    Args:
        directory: Local directory (or file) to sync, passed verbatim
        remote_path: Remote prefix such as ``/2.0/`` or ``/``
        expiry: HTTP-date for the ``Expires`` header
        mime_type: Overrides the guessed MIME type
        cache_safe: Add a short ``Cache-Control: max-age`` header
        tool: Sync executable
        bucket: Destination bucket
        scheme: URI scheme of the bucket
        cache_max_age: Seconds for the ``Cache-Control`` header

    Returns:
        SyncCommand

    Raises:
        ValidationError: On empty directory, remote path or expiry
    """
    if not directory:
        raise ValidationError("Sync directory must not be empty")
    if not remote_path:
        raise ValidationError("Remote path must not be empty")
    if not expiry:
        raise ValidationError("Expiry date must not be empty")
    if not tool or not bucket or not scheme:
        raise ValidationError("Sync tool, bucket and scheme are required")

    argv = [tool, "sync", "--recursive", "--acl-public", "--guess-mime-type"]

    if cache_safe:
        argv += ["--add-header", f"Cache-Control: max-age={cache_max_age}"]

    if mime_type:
        argv += ["--mime-type", mime_type]

    argv += ["--add-header", f"Expires: {expiry}"]
    argv += [directory, f"{scheme}://{bucket}{remote_path}"]

    return SyncCommand(argv=argv)


def command_for_job(job: DeployJob,
                    tool: str = DEFAULT_SYNC_TOOL,
                    bucket: str = DEFAULT_BUCKET,
                    scheme: str = DEFAULT_SCHEME,
                    cache_max_age: int = DEFAULT_CACHE_MAX_AGE) -> SyncCommand:
    """Render a deploy job into its sync command"""
    return build_sync_command(
        job.directory,
        job.remote_path,
        job.expiry,
        mime_type=job.mime_type,
        cache_safe=job.cache_safe,
        tool=tool,
        bucket=bucket,
        scheme=scheme,
        cache_max_age=cache_max_age,
    )
