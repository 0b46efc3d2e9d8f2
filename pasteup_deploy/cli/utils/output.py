# pasteup_deploy/cli/utils/output.py
"""Output formatting utilities"""

from typing import Optional

from rich.console import Console
from rich.table import Table
from rich import box
from rich.markup import escape

from ...models import DeployResult
from ...services.deploy_service import DeployService

console = Console()


def format_dry_run(result: DeployResult, service: DeployService) -> None:
    """Show the sync commands a dry run would have executed"""
    table = Table(title=f"Dry run: {result.mode} deploy of {result.version}", box=box.SIMPLE)
    table.add_column("Job", style="cyan")
    table.add_column("Destination", style="green")
    table.add_column("Command", overflow="fold")

    for job in result.jobs:
        command = service.command_for(job)
        table.add_row(job.name, command.destination, str(command))

    console.print(table)


def print_error(message: str, error: Optional[Exception] = None) -> None:
    """Print error message"""
    if error:
        console.print(f"[red]Error:[/red] {escape(message)}: {escape(str(error))}", highlight=False)
    else:
        console.print(f"[red]Error:[/red] {escape(message)}", highlight=False)