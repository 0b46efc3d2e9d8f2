"""pasteup-deploy - publish the pasteup docs site to object storage.

Stages the css, js and docs trees and syncs them to a bucket under a
version-pinned prefix and, optionally, the bucket root.
"""

from .__version__ import __version__, __version_info__, __license__

from .constants import DeployMode

# Data models
from .models import DeployConfig, DeployJob, JobResult, DeployResult

# Building blocks
from .core import (
    VersionReader,
    StagingAssembler,
    SyncCommand,
    CommandRunner,
    build_sync_command,
    far_future_expiry,
    near_future_expiry,
)

# Services
from .services import ConfigService, DeployService

# Exceptions
from .api.exceptions import (
    DeployToolError,
    ValidationError,
    ConfigError,
    VersionFileError,
    ParseError,
    StagingError,
    ExternalToolError,
)

__all__ = [
    # Version information
    "__version__",
    "__version_info__",
    "__license__",

    "DeployMode",

    # Data models
    "DeployConfig",
    "DeployJob",
    "JobResult",
    "DeployResult",

    # Building blocks
    "VersionReader",
    "StagingAssembler",
    "SyncCommand",
    "CommandRunner",
    "build_sync_command",
    "far_future_expiry",
    "near_future_expiry",

    # Services
    "ConfigService",
    "DeployService",

    # Exceptions
    "DeployToolError",
    "ValidationError",
    "ConfigError",
    "VersionFileError",
    "ParseError",
    "StagingError",
    "ExternalToolError",
]
