"""Operation result models"""

from dataclasses import dataclass, field
from typing import List, Optional

from .job import DeployJob


@dataclass
class JobResult:
    """Outcome of a single sync invocation"""

    job: Optional[DeployJob]
    returncode: Optional[int]
    stdout: str = ""
    stderr: str = ""
    error: bool = False
    timed_out: bool = False
    duration: float = 0.0

    @property
    def success(self) -> bool:
        return not self.error


@dataclass
class DeployResult:
    """Outcome of a deploy run"""

    version: str
    mode: str
    jobs: List[DeployJob] = field(default_factory=list)
    results: List[JobResult] = field(default_factory=list)
    dry_run: bool = False
    duration: float = 0.0

    @property
    def failed(self) -> List[JobResult]:
        return [r for r in self.results if r.error]

    @property
    def success(self) -> bool:
        return not self.failed
