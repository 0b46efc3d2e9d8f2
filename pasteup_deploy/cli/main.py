# pasteup_deploy/cli/main.py
"""Main CLI entry point for pasteup-deploy"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler

from ..api.exceptions import DeployToolError, ExternalToolError
from ..constants import APP_NAME, LOG_FORMAT, DeployMode, MSG_CHOOSE_MODE, MSG_UPDATE_VERSION
from ..services import ConfigService, DeployService
from .utils import confirm_version, format_dry_run, print_error

console = Console()
err_console = Console(stderr=True)


def setup_logging(verbose: bool = False, debug: bool = False) -> None:
    """Setup logging configuration

    Args:
        verbose: Enable verbose output (INFO level)
        debug: Enable debug output (DEBUG level)
    """
    if debug:
        level = logging.DEBUG
    elif verbose:
        level = logging.INFO
    else:
        level = logging.WARNING

    # Log to stderr; stdout carries the sync tool's own output
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[
            RichHandler(
                console=err_console,
                show_time=debug,
                show_path=debug,
                rich_tracebacks=True,
                tracebacks_suppress=[click]
            )
        ],
        force=True,
    )

    # Adjust third-party loggers
    logging.getLogger("asyncio").setLevel(logging.WARNING)


@click.command(name=APP_NAME)
@click.option('--full', 'full', is_flag=True,
              help='Publish the version-pinned copy and the latest copy')
@click.option('--version', 'version_only', is_flag=True,
              help='Publish only the version-pinned copy and the version file')
@click.option('-c', '--config', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Configuration file (default: .pasteup-deploy.yaml)')
@click.option('--project-root', type=click.Path(file_okay=False, path_type=Path),
              help='Directory the configured paths are relative to (default: cwd)')
@click.option('--bucket', help='Destination bucket')
@click.option('--tool', help='Sync tool executable')
@click.option('--timeout', type=click.FloatRange(min=0, min_open=True),
              help='Kill a sync job after this many seconds')
@click.option('--dry-run', is_flag=True, help='Show the sync commands without running them')
@click.option('-y', '--yes', is_flag=True, help='Skip the version confirmation prompt')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose output')
@click.option('-d', '--debug', is_flag=True, help='Enable debug output')
@click.option('-q', '--quiet', is_flag=True, help='Suppress log output')
@click.pass_context
def cli(ctx, full: bool, version_only: bool, config_path: Optional[Path], project_root: Optional[Path],
        bucket: Optional[str], tool: Optional[str], timeout: Optional[float],
        dry_run: bool, yes: bool, verbose: bool, debug: bool, quiet: bool):
    """Deploy pasteup assets to S3

    Copies the css, js and docs trees to a staging directory and syncs
    them to the bucket with s3cmd. Every deploy publishes js and css
    under /<version>/ with far-future expiry, plus the versions file.
    A --full deploy also republishes docs, js and css at the bucket
    root with a one-minute expiry.

    Examples:

        # Publish a new version and make it the latest
        pasteup-deploy --full

        # Publish only the version-pinned assets
        pasteup-deploy --version
    """
    # Setup logging
    if quiet:
        logging.disable(logging.CRITICAL)
    else:
        logging.disable(logging.NOTSET)
        setup_logging(verbose=verbose, debug=debug)

    if full == version_only:
        raise click.UsageError(MSG_CHOOSE_MODE, ctx=ctx)
    mode = DeployMode.FULL if full else DeployMode.VERSION_ONLY

    try:
        config = ConfigService(project_root=project_root, config_path=config_path).load(
            bucket=bucket,
            tool=tool,
            timeout=timeout,
            dry_run=True if dry_run else None,
        )
        service = DeployService(config)

        if not yes:
            version = service.current_version()
            if not confirm_version(console, version):
                console.print()
                console.print(MSG_UPDATE_VERSION.format(path=config.versions_file),
                              markup=False, highlight=False)
                console.print()
                return

        result = service.run(mode)

        if result.dry_run:
            format_dry_run(result, service)

    except ExternalToolError as e:
        print_error(str(e))
        if e.stdout:
            sys.stdout.write(e.stdout)
        if e.stderr:
            sys.stderr.write(e.stderr)
        sys.exit(1)
    except DeployToolError as e:
        print_error(str(e))
        sys.exit(1)


def main():
    """Main entry point for the CLI application

    This function handles:
    - Keyboard interrupts
    - Unexpected exceptions with proper error display
    """
    try:
        cli(prog_name=APP_NAME)

    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)

    except Exception as e:
        print_error("Unexpected error", e)
        if '--debug' in sys.argv or '-d' in sys.argv:
            console.print_exception()
        sys.exit(1)


if __name__ == "__main__":
    main()
