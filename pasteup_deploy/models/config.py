"""Configuration data models"""

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Dict, Optional, Any

from ..api.exceptions import ConfigError
from ..constants import (
    DEFAULT_BUCKET,
    DEFAULT_SCHEME,
    DEFAULT_SYNC_TOOL,
    DEFAULT_STAGING_DIR,
    DEFAULT_CSS_SOURCE,
    DEFAULT_JS_SOURCE,
    DEFAULT_DOCS_SOURCE,
    DEFAULT_VERSIONS_FILE,
    DEFAULT_CACHE_MAX_AGE,
)


@dataclass
class DeployConfig:
    """Settings for one deploy run

    Relative paths are resolved against ``project_root``.
    """

    bucket: str = DEFAULT_BUCKET
    scheme: str = DEFAULT_SCHEME
    tool: str = DEFAULT_SYNC_TOOL

    project_root: Path = field(default_factory=Path.cwd)
    staging_dir: str = DEFAULT_STAGING_DIR
    css_source: str = DEFAULT_CSS_SOURCE
    js_source: str = DEFAULT_JS_SOURCE
    docs_source: str = DEFAULT_DOCS_SOURCE
    versions_file: str = DEFAULT_VERSIONS_FILE

    cache_max_age: int = DEFAULT_CACHE_MAX_AGE
    timeout: Optional[float] = None
    dry_run: bool = False

    def __post_init__(self):
        """Validate configuration"""
        self.project_root = Path(self.project_root)

        for name in ("bucket", "scheme", "tool", "staging_dir", "css_source",
                     "js_source", "docs_source", "versions_file"):
            value = getattr(self, name)
            if not isinstance(value, str) or not value.strip():
                raise ConfigError(f"'{name}' must be a non-empty string")

        if "/" in self.bucket:
            raise ConfigError(f"Invalid bucket name: {self.bucket}")

        try:
            self.cache_max_age = int(self.cache_max_age)
        except (TypeError, ValueError):
            raise ConfigError(f"'cache_max_age' must be an integer: {self.cache_max_age!r}")
        if self.cache_max_age < 0:
            raise ConfigError("'cache_max_age' must not be negative")

        if self.timeout is not None:
            try:
                self.timeout = float(self.timeout)
            except (TypeError, ValueError):
                raise ConfigError(f"'timeout' must be a number: {self.timeout!r}")
            if self.timeout <= 0:
                raise ConfigError("'timeout' must be positive")

    def resolve(self, path: str) -> Path:
        """Resolve a configured path relative to the project root"""
        resolved = Path(path)
        if resolved.is_absolute():
            return resolved
        return self.project_root / resolved

    @property
    def staging_path(self) -> Path:
        return self.resolve(self.staging_dir)

    @property
    def css_path(self) -> Path:
        return self.resolve(self.css_source)

    @property
    def js_path(self) -> Path:
        return self.resolve(self.js_source)

    @property
    def docs_path(self) -> Path:
        return self.resolve(self.docs_source)

    @property
    def versions_path(self) -> Path:
        return self.resolve(self.versions_file)

    def remote_uri(self, remote_path: str) -> str:
        """Full URI for a remote path prefix, e.g. ``s3://pasteup/2.0/``"""
        return f"{self.scheme}://{self.bucket}{remote_path}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        data = {}
        for f in fields(self):
            value = getattr(self, f.name)
            data[f.name] = str(value) if isinstance(value, Path) else value
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'DeployConfig':
        """Create from dictionary, rejecting unknown keys"""
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("Configuration must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {', '.join(unknown)}")

        return cls(**data)
