"""Deploy job model"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class DeployJob:
    """One sync of a local directory to a remote path prefix

    ``directory`` is passed to the sync tool verbatim: a trailing slash
    syncs the directory's contents, without one the directory itself is
    created under ``remote_path``.
    """

    name: str
    directory: str
    remote_path: str
    expiry: str
    mime_type: Optional[str] = None
    cache_safe: bool = False

    @property
    def is_version_pinned(self) -> bool:
        return self.remote_path != "/"
