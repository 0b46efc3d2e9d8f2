"""Public API of pasteup-deploy"""

from .exceptions import (
    DeployToolError,
    ValidationError,
    ConfigError,
    VersionFileError,
    ParseError,
    StagingError,
    ExternalToolError,
)

__all__ = [
    "DeployToolError",
    "ValidationError",
    "ConfigError",
    "VersionFileError",
    "ParseError",
    "StagingError",
    "ExternalToolError",
]
