"""
Lifecycle commands
Compose-backed operations on service groups: start, stop, restart, logs, status, update
"""

import typer
from typing import List, Optional, Tuple

from ..core.commands import Command, compose_steps
from ..core.compose import aggregate_exit_code, run_steps
from ..core.errors import HomectlError, MissingServiceError
from ..core.groups import ALL_SERVICES, GROUPS, resolve_targets
from ..utils.display import console, show_operation_summary
from .common import fail, get_settings

SERVICE_HELP = "Service group: all, infrastructure, media or productivity"
EXTRA_HELP = "Extra arguments passed to the compose tool (after --)"

app = typer.Typer()


def split_extra_args(
    service: Optional[str],
    extra_args: Optional[List[str]]
) -> Tuple[Optional[str], List[str]]:
    """
    Separate the service from compose arguments

    click binds the first token after -- to the service argument, so
    `start -- --build` arrives as service="--build". Option-like tokens
    are never service names.
    """
    extra = list(extra_args or [])
    if service is not None and service.startswith("-"):
        return None, [service] + extra
    return service, extra


def run_command(
    ctx: typer.Context,
    command: Command,
    service: Optional[str],
    extra_args: Optional[List[str]] = None
):
    """Resolve the service, run the command's compose steps and exit with their status"""
    settings = get_settings(ctx)
    service, extra_args = split_extra_args(service, extra_args)

    try:
        targets = resolve_targets(service, settings.root, GROUPS)
        results = run_steps(
            targets,
            compose_steps(command),
            extra_args,
            settings.compose_command
        )
    except HomectlError as e:
        fail(ctx, e)
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted[/yellow]")
        raise typer.Exit(130)

    show_operation_summary(results)

    exit_code = aggregate_exit_code(results)
    if exit_code:
        raise typer.Exit(exit_code)


@app.command()
def start(
    ctx: typer.Context,
    service: str = typer.Argument(ALL_SERVICES, help=SERVICE_HELP),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """▶ Start services (up -d)"""
    run_command(ctx, Command.START, service, extra_args)


@app.command()
def stop(
    ctx: typer.Context,
    service: str = typer.Argument(ALL_SERVICES, help=SERVICE_HELP),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """⏹ Stop services (down)"""
    run_command(ctx, Command.STOP, service, extra_args)


@app.command()
def restart(
    ctx: typer.Context,
    service: str = typer.Argument(ALL_SERVICES, help=SERVICE_HELP),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """🔄 Restart services"""
    run_command(ctx, Command.RESTART, service, extra_args)


@app.command()
def logs(
    ctx: typer.Context,
    service: Optional[str] = typer.Argument(None, help="Service group to follow (required)"),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """📜 Follow logs of one service group"""
    service, extra_args = split_extra_args(service, extra_args)
    if not service or service == ALL_SERVICES:
        fail(ctx, MissingServiceError("Please specify a service for logs"))

    run_command(ctx, Command.LOGS, service, extra_args)


@app.command()
def status(
    ctx: typer.Context,
    service: str = typer.Argument(ALL_SERVICES, help=SERVICE_HELP),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """📊 Show service status (ps)"""
    run_command(ctx, Command.STATUS, service, extra_args)


@app.command()
def update(
    ctx: typer.Context,
    service: str = typer.Argument(ALL_SERVICES, help=SERVICE_HELP),
    extra_args: Optional[List[str]] = typer.Argument(None, help=EXTRA_HELP)
):
    """⬆ Pull latest images and recreate services"""
    console.print("[green]Updating services...[/green]")
    run_command(ctx, Command.UPDATE, service, extra_args)
