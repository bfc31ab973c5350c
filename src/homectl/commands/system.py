"""
System management commands
Host-wide operations: setup, cleanup, groups, version
"""

import json as json_lib
import logging
from typing import Optional

import docker
import typer

from .. import __version__
from ..core.bootstrap import run_setup
from ..core.docker_ops import prune_resources
from ..core.errors import HomectlError
from ..core.groups import GROUPS
from ..utils.display import (
    console, create_groups_table, create_prune_table,
    format_presence, format_size, show_next_steps
)
from ..utils.logger import log_exception
from .common import fail, get_settings

logger = logging.getLogger(__name__)

app = typer.Typer()


@app.command()
def setup(
    ctx: typer.Context,
    service: Optional[str] = typer.Argument(None, hidden=True)
):
    """🛠 Initial setup (create network and directories)"""
    settings = get_settings(ctx)
    if service:
        logger.debug("setup covers every group, ignoring service %s", service)
    console.print("[green]Setting up home server environment...[/green]")

    try:
        report = run_setup(settings)
    except HomectlError as e:
        fail(ctx, e, "Setup failed")
    except docker.errors.DockerException as e:
        log_exception(e, "Setup failed")
        raise typer.Exit(1) from e

    if report.network_created:
        console.print(f"[green]✓ Created network: {report.network}[/green]")
    else:
        console.print(f"[yellow]⚠ Network already exists: {report.network}[/yellow]")

    console.print(f"[green]✓ Directories created: {len(report.created_directories)}[/green]")

    if report.permissions is not None and not report.permissions.applied:
        console.print(f"[yellow]⚠ Permissions left unchanged (mode {report.permissions.mode:o} not applied): {report.permissions.path}[/yellow]")

    if report.ownership is not None and not report.ownership.applied:
        uid, gid = report.ownership.owner
        console.print(f"[yellow]⚠ Ownership left unchanged ({uid}:{gid} not applied): {report.ownership.path}[/yellow]")

    console.print("[green]Setup completed![/green]")
    show_next_steps(ctx.find_root().info_name or "homectl")


@app.command()
def cleanup(ctx: typer.Context):
    """🧹 Remove stopped containers, unused images, volumes and networks"""
    console.print("[yellow]Cleaning up Docker resources...[/yellow]")

    try:
        reports = prune_resources()
    except HomectlError as e:
        fail(ctx, e, "Cleanup failed")

    table = create_prune_table()
    for report in reports:
        if report.failed:
            table.add_row(report.resource, "[red]failed[/red]", "-")
        else:
            table.add_row(report.resource, str(report.removed), format_size(report.space_reclaimed))
    console.print(table)

    failed = [r for r in reports if r.failed]
    if failed:
        for report in failed:
            console.print(f"[red]❌ Failed to prune {report.resource}: {report.error}[/red]")
        raise typer.Exit(1)

    console.print("[green]Cleanup completed[/green]")


@app.command()
def groups(
    ctx: typer.Context,
    json: bool = typer.Option(False, "--json", help="Output as JSON")
):
    """📚 List service groups"""
    settings = get_settings(ctx)

    rows = []
    for group in GROUPS:
        directory = group.directory(settings.root)
        rows.append({
            "name": group.value,
            "description": group.description,
            "directory": str(directory),
            "present": directory.is_dir()
        })

    if json:
        console.print_json(json_lib.dumps(rows))
        return

    table = create_groups_table()
    for row in rows:
        table.add_row(row["name"], row["description"], row["directory"], format_presence(row["present"]))
    console.print(table)


@app.command()
def version(ctx: typer.Context):
    """🔖 Show version information"""
    settings = get_settings(ctx)

    console.print("[cyan bold]Home Server CLI[/cyan bold]")
    console.print(f"Version: {__version__}")
    console.print(f"Compose command: {settings.compose_command}")
    console.print(f"Project root: {settings.root}")
