"""Shared fixtures for pasteup-deploy tests"""

import json
from datetime import datetime, timezone
from pathlib import Path

import pytest

from pasteup_deploy.models import DeployConfig, JobResult


FIXED_NOW = datetime(2020, 1, 1, 0, 0, 0, tzinfo=timezone.utc)
FAR_FUTURE = "Tue, 01 Jan 2030 00:00:00 GMT"
NEAR_FUTURE = "Wed, 01 Jan 2020 00:01:00 GMT"


def write_file(path: Path, content: str = "") -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content)
    return path


@pytest.fixture
def site(tmp_path):
    """A pasteup checkout: docs with build/ and static/, plus a versions file."""
    root = tmp_path / "pasteup"
    write_file(root / "docs" / "index.html", "<h1>pasteup</h1>")
    write_file(root / "docs" / "guide" / "typography.html", "<p>type</p>")
    write_file(root / "docs" / "build" / "deploy.py", "# build script")
    write_file(root / "docs" / "static" / "css" / "pasteup.css", "body {}")
    write_file(root / "docs" / "static" / "js" / "pasteup.js", "var a;")
    write_file(root / "docs" / "static" / "js" / "lib" / "bonzo.js", "var b;")
    write_file(root / "versions", json.dumps({"versions": ["1.0", "1.1", "2.0"]}))
    return root


@pytest.fixture
def config(site):
    return DeployConfig(project_root=site)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


class RecordingRunner:
    """Stands in for CommandRunner; records commands instead of running them."""

    def __init__(self, fail_on=None, error=None, **kwargs):
        self.commands = []
        self.jobs = []
        self.staging_seen = []
        self.fail_on = fail_on
        self.error = error

    async def run(self, command, job=None, callback=None):
        self.commands.append(command)
        self.jobs.append(job)
        self.staging_seen.append(Path(command.source.rstrip("/")).exists())

        if self.fail_on and job is not None and job.name == self.fail_on:
            raise self.error

        result = JobResult(job=job, returncode=0)
        if callback:
            callback(result)
        return result


@pytest.fixture
def recording_runner():
    return RecordingRunner()
