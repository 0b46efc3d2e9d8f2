"""Deploy orchestration service"""

import logging
import time
from datetime import datetime
from typing import Callable, List, Optional

from ..constants import (
    DeployMode,
    STAGED_CSS_DIR,
    STAGED_JS_DIR,
    STAGED_DOCS_DIR,
    VERSIONS_MIME_TYPE,
)
from ..core.expiry import far_future_expiry, near_future_expiry, utc_now
from ..core.runner import CommandRunner
from ..core.staging import StagingAssembler
from ..core.sync_command import SyncCommand, command_for_job
from ..core.version_reader import VersionReader
from ..models.config import DeployConfig
from ..models.job import DeployJob
from ..models.result import DeployResult, JobResult
from ..utils.async_utils import join_all, run_async

logger = logging.getLogger(__name__)


class DeployService:
    """Publishes the staged site to version-pinned and latest paths

    A run reads the current version, stages the css/js/docs trees, starts
    one sync per target concurrently, waits for all of them and then
    removes the staging directory whatever the outcome.
    """

    def __init__(self,
                 config: Optional[DeployConfig] = None,
                 runner: Optional[CommandRunner] = None,
                 clock: Optional[Callable[[], datetime]] = None):
        """Initialize deploy service

        Args:
            config: Deploy configuration
            runner: Command runner (built from config if omitted)
            clock: Returns the current time, used for expiry headers
        """
        self.config = config or DeployConfig()
        self.runner = runner or CommandRunner(tool=self.config.tool, timeout=self.config.timeout)
        self.clock = clock or utc_now
        self.version_reader = VersionReader(self.config.versions_path)
        self.assembler = StagingAssembler(
            self.config.css_path,
            self.config.js_path,
            self.config.docs_path,
        )

    def current_version(self) -> str:
        """Read the version about to be deployed"""
        return self.version_reader.current_version()

    def build_jobs(self, mode: DeployMode, version: str) -> List[DeployJob]:
        """Build the sync jobs for a run

        Version-only runs publish js and css under ``/<version>/`` plus the
        version document. Full runs also publish docs, js and css to the
        bucket root.

        Args:
            mode: Deploy mode
            version: Version being deployed

        Returns:
            List of deploy jobs
        """
        now = self.clock()
        far_future = far_future_expiry(now)
        near_future = near_future_expiry(now)

        staging = self.config.staging_path
        js_dir = str(staging / STAGED_JS_DIR)
        css_dir = str(staging / STAGED_CSS_DIR)
        # Trailing slash: sync the contents of docs, not the directory itself
        docs_dir = f"{staging / STAGED_DOCS_DIR}/"
        pinned = f"/{version}/"

        jobs = [
            DeployJob("js", js_dir, pinned, far_future, cache_safe=True),
            DeployJob("css", css_dir, pinned, far_future, cache_safe=True),
            DeployJob("versions", str(self.config.versions_path), "/", near_future,
                      mime_type=VERSIONS_MIME_TYPE, cache_safe=True),
        ]

        if mode == DeployMode.FULL:
            jobs += [
                DeployJob("docs-latest", docs_dir, "/", near_future, cache_safe=True),
                DeployJob("js-latest", js_dir, "/", near_future, cache_safe=True),
                DeployJob("css-latest", css_dir, "/", near_future, cache_safe=True),
            ]

        return jobs

    def command_for(self, job: DeployJob) -> SyncCommand:
        """Render a job into a sync command for the configured bucket"""
        return command_for_job(
            job,
            tool=self.config.tool,
            bucket=self.config.bucket,
            scheme=self.config.scheme,
            cache_max_age=self.config.cache_max_age,
        )

    async def deploy(self, mode: DeployMode) -> DeployResult:
        """Run a deploy

        Args:
            mode: Deploy mode

        Returns:
            DeployResult with one JobResult per job (none for dry runs)

        Raises:
            VersionFileError, ParseError: Bad version document
            StagingError: Staging failed
            ExternalToolError: A sync failed fatally
        """
        start_time = time.monotonic()
        version = self.current_version()
        staging = self.config.staging_path
        # Never remove a directory this run did not create
        owns_staging = not staging.exists()

        logger.info(f"Deploying version {version} ({mode.value})")

        try:
            self.assembler.assemble(staging)
            jobs = self.build_jobs(mode, version)
            # Invalid job parameters fail here, before any sync starts
            commands = [self.command_for(job) for job in jobs]

            result = DeployResult(
                version=version,
                mode=mode.value,
                jobs=jobs,
                dry_run=self.config.dry_run,
            )

            if not self.config.dry_run:
                result.results = await self._run_jobs(jobs, commands)
        finally:
            if owns_staging:
                self.assembler.remove(staging)

        result.duration = time.monotonic() - start_time
        logger.info(f"Deploy of {version} finished in {result.duration:.2f}s")
        return result

    async def deploy_full(self) -> DeployResult:
        """Publish the version-pinned and latest copies"""
        return await self.deploy(DeployMode.FULL)

    async def deploy_version(self) -> DeployResult:
        """Publish only the version-pinned copy and the version document"""
        return await self.deploy(DeployMode.VERSION_ONLY)

    def run(self, mode: DeployMode) -> DeployResult:
        """Synchronous wrapper around :meth:`deploy`"""
        return run_async(self.deploy(mode))

    async def _run_jobs(self, jobs: List[DeployJob], commands: List[SyncCommand]) -> List[JobResult]:
        def on_progress(completed: int, total: int) -> None:
            logger.debug(f"{completed}/{total} sync jobs finished")

        return await join_all(
            (self.runner.run(command, job=job) for job, command in zip(jobs, commands)),
            callback=on_progress,
        )
