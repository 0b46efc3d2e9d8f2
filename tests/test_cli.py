"""Tests for the pasteup-deploy command line"""

import json

import pytest
from click.testing import CliRunner

from pasteup_deploy.cli.main import cli
from pasteup_deploy.services import deploy_service

from conftest import RecordingRunner


@pytest.fixture
def runners(monkeypatch):
    """Replace the real sync runner; collects every runner the CLI builds."""
    created = []

    def factory(**kwargs):
        runner = RecordingRunner(**kwargs)
        created.append(runner)
        return runner

    monkeypatch.setattr(deploy_service, "CommandRunner", factory)
    monkeypatch.delenv("PASTEUP_DEPLOY_CONFIG", raising=False)
    monkeypatch.delenv("PASTEUP_DEPLOY_BUCKET", raising=False)
    monkeypatch.delenv("PASTEUP_DEPLOY_TOOL", raising=False)
    return created


def invoke(args, input=None):
    return CliRunner().invoke(cli, args, input=input)


def sync_count(runners):
    return sum(len(r.commands) for r in runners)


def test_requires_mode(site, runners):
    result = invoke(["--project-root", str(site)])

    assert result.exit_code == 2
    assert "Choose full or version deploy with --full, or --version argument." in result.output
    assert sync_count(runners) == 0


def test_unknown_flag_is_rejected(site, runners):
    result = invoke(["--everything", "--project-root", str(site)])

    assert result.exit_code == 2
    assert sync_count(runners) == 0


def test_confirmed_version_deploy(site, runners):
    result = invoke(["--version", "--project-root", str(site)], input="y\n")

    assert result.exit_code == 0, result.output
    assert "You are deploying version: 2.0" in result.output
    assert "Is this the correct version number? (y/n)" in result.output
    assert sync_count(runners) == 3
    assert not (site / "deploy_tmp").exists()


def test_confirmation_is_trimmed(site, runners):
    result = invoke(["--full", "--project-root", str(site)], input="  y  \n")

    assert result.exit_code == 0, result.output
    assert sync_count(runners) == 6


@pytest.mark.parametrize("answer", ["n\n", "\n", "", "yes\n", "Y\n"])
def test_declined_deploy_runs_nothing(site, runners, answer):
    result = invoke(["--full", "--project-root", str(site)], input=answer)

    assert result.exit_code == 0
    assert "So update the version number in versions" in result.output
    assert sync_count(runners) == 0
    assert not (site / "deploy_tmp").exists()


def test_yes_skips_prompt(site, runners):
    result = invoke(["--full", "--yes", "--project-root", str(site)])

    assert result.exit_code == 0, result.output
    assert "You are deploying version" not in result.output
    assert sync_count(runners) == 6


def test_bucket_and_tool_overrides(site, runners):
    result = invoke(["--version", "-y", "--project-root", str(site),
                     "--bucket", "pasteup-test", "--tool", "s4cmd"])

    assert result.exit_code == 0, result.output
    commands = runners[0].commands
    assert {cmd.tool for cmd in commands} == {"s4cmd"}
    assert all(cmd.destination.startswith("s3://pasteup-test/") for cmd in commands)


def test_dry_run(site, runners):
    result = invoke(["--full", "-y", "--dry-run", "--project-root", str(site)])

    assert result.exit_code == 0, result.output
    assert "Dry run" in result.output
    assert sync_count(runners) == 0


def test_malformed_versions_file(site, runners):
    (site / "versions").write_text("{broken")

    result = invoke(["--full", "--project-root", str(site)], input="y\n")

    assert result.exit_code == 1
    assert "Malformed version file" in result.output
    assert sync_count(runners) == 0


def test_fatal_sync_error_exits_non_zero(site, monkeypatch):
    from pasteup_deploy.api.exceptions import ExternalToolError

    def factory(**kwargs):
        return RecordingRunner(fail_on="js", error=ExternalToolError(
            "s3cmd exited with status 1", returncode=1, stdout="partial\n"))

    monkeypatch.setattr(deploy_service, "CommandRunner", factory)

    result = invoke(["--version", "-y", "--project-root", str(site)])

    assert result.exit_code == 1
    assert "s3cmd exited with status 1" in result.output
    assert not (site / "deploy_tmp").exists()


def test_config_file(site, runners):
    (site / ".pasteup-deploy.yaml").write_text("bucket: from-config\n")

    result = invoke(["--version", "-y", "--project-root", str(site)])

    assert result.exit_code == 0, result.output
    assert runners[0].commands[0].destination.startswith("s3://from-config/")


def test_both_modes_is_a_usage_error(site, runners):
    result = invoke(["--full", "--version", "--project-root", str(site)])

    assert result.exit_code == 2
    assert sync_count(runners) == 0


def test_quiet_does_not_leak_into_later_runs(site, runners):
    import logging

    result = invoke(["--version", "-y", "-q", "--project-root", str(site)])
    assert result.exit_code == 0, result.output
    assert logging.root.manager.disable == logging.CRITICAL

    result = invoke(["--version", "-y", "--project-root", str(site)])
    assert result.exit_code == 0, result.output
    assert logging.root.manager.disable == logging.NOTSET
