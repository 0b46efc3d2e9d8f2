"""Core building blocks of a deploy run"""

from .version_reader import VersionReader
from .expiry import far_future_expiry, near_future_expiry, http_date
from .staging import StagingAssembler
from .sync_command import SyncCommand, build_sync_command, command_for_job
from .runner import CommandRunner

__all__ = [
    'VersionReader',
    'far_future_expiry',
    'near_future_expiry',
    'http_date',
    'StagingAssembler',
    'SyncCommand',
    'build_sync_command',
    'command_for_job',
    'CommandRunner',
]
