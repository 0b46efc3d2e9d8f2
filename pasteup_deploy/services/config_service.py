"""Configuration loading service"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from ..api.exceptions import ConfigError
from ..constants import PROJECT_CONFIG_FILE, ENV_CONFIG_PATH, ENV_BUCKET, ENV_SYNC_TOOL
from ..models.config import DeployConfig

logger = logging.getLogger(__name__)


class ConfigService:
    """Builds a DeployConfig from file, environment and explicit overrides

    Precedence, lowest first: defaults, the YAML config file, environment
    variables, overrides passed by the caller.
    """

    def __init__(self, project_root: Optional[Path] = None, config_path: Optional[Path] = None):
        """Initialize config service

        Args:
            project_root: Project root directory (default: cwd)
            config_path: Explicit config file; must exist if given
        """
        self.project_root = Path(project_root) if project_root else Path.cwd()

        if config_path is None and os.environ.get(ENV_CONFIG_PATH):
            config_path = Path(os.environ[ENV_CONFIG_PATH])

        self.explicit_path = config_path is not None
        self.config_path = Path(config_path) if config_path else self.project_root / PROJECT_CONFIG_FILE

    def load_file(self) -> Dict[str, Any]:
        """Load configuration values from the YAML file

        Returns:
            Parsed values, empty if no default config file exists
        """
        if not self.config_path.exists():
            if self.explicit_path:
                raise ConfigError(f"Configuration file not found: {self.config_path}")
            return {}

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                content = f.read()
        except OSError as e:
            raise ConfigError(f"Cannot read {self.config_path}: {e}") from e

        # Simple environment variable expansion
        content = os.path.expandvars(content)

        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {self.config_path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"{self.config_path} must contain a mapping")

        logger.debug(f"Loaded configuration from {self.config_path}")
        return data

    @staticmethod
    def load_env() -> Dict[str, Any]:
        """Read overrides from environment variables"""
        data = {}
        if os.environ.get(ENV_BUCKET):
            data['bucket'] = os.environ[ENV_BUCKET]
        if os.environ.get(ENV_SYNC_TOOL):
            data['tool'] = os.environ[ENV_SYNC_TOOL]
        return data

    def load(self, **overrides) -> DeployConfig:
        """Build the effective configuration

        Args:
            **overrides: Values that win over file and environment;
                ``None`` values are ignored

        Returns:
            DeployConfig
        """
        data: Dict[str, Any] = {}
        data.update(self.load_file())
        data.update(self.load_env())
        data.update({k: v for k, v in overrides.items() if v is not None})

        # Relative project roots in the file are relative to the file
        root = data.get('project_root')
        if root is None:
            data['project_root'] = self.project_root
        elif not Path(root).is_absolute():
            data['project_root'] = (self.config_path.parent / root).resolve()

        return DeployConfig.from_dict(data)
