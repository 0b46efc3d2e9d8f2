"""Exception definitions for pasteup-deploy"""

from typing import Optional

from ..constants import ErrorCode


class DeployToolError(Exception):
    """Base exception for pasteup-deploy"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.error_code = error_code


class ValidationError(DeployToolError):
    """Invalid deploy job parameters"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.VALIDATION_FAILED)


class ConfigError(DeployToolError):
    """Configuration error"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.CONFIG_FORMAT_ERROR)


class VersionFileError(DeployToolError):
    """Version document could not be read"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Cannot read version file {path}: {reason}",
                         ErrorCode.VERSION_FILE_UNREADABLE)
        self.path = path


class ParseError(DeployToolError):
    """Version document is malformed"""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Malformed version file {path}: {reason}",
                         ErrorCode.VERSION_FORMAT_ERROR)
        self.path = path


class StagingError(DeployToolError):
    """Staging directory could not be created, filled or removed"""

    def __init__(self, message: str):
        super().__init__(message, ErrorCode.STAGING_FAILED)


class ExternalToolError(DeployToolError):
    """Sync tool failed in a way that aborts the run"""

    def __init__(self, message: str,
                 returncode: Optional[int] = None,
                 stdout: str = "",
                 stderr: str = ""):
        super().__init__(message, ErrorCode.SYNC_FAILED)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
