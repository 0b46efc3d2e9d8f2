"""Service layer for pasteup-deploy"""

from .config_service import ConfigService
from .deploy_service import DeployService

__all__ = [
    'ConfigService',
    'DeployService',
]
