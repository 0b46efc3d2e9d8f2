"""Data models for pasteup-deploy"""

from .config import DeployConfig
from .job import DeployJob
from .result import JobResult, DeployResult

__all__ = [
    'DeployConfig',
    'DeployJob',
    'JobResult',
    'DeployResult',
]
