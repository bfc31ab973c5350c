"""
Home Server CLI - Main Entry Point
Dispatches lifecycle commands to docker-compose per service group
"""

import typer
from pathlib import Path
from typing import Optional

from .commands import lifecycle, system
from .commands.common import fail
from .core.commands import Command
from .core.config import load_settings
from .core.errors import ConfigError
from .utils.display import show_usage
from .utils.logger import debug_print, setup_logging

# Main app
app = typer.Typer(
    name="homectl",
    help="🏠 Home Server CLI - Manage infrastructure, media and productivity services",
    add_completion=True,
    no_args_is_help=False
)

# Register every command in the command table
COMMAND_HANDLERS = {
    Command.SETUP: system.setup,
    Command.START: lifecycle.start,
    Command.STOP: lifecycle.stop,
    Command.RESTART: lifecycle.restart,
    Command.LOGS: lifecycle.logs,
    Command.STATUS: lifecycle.status,
    Command.UPDATE: lifecycle.update,
    Command.CLEANUP: system.cleanup,
}
for command, handler in COMMAND_HANDLERS.items():
    app.command(name=command.value)(handler)

# Informational commands
app.command(name="groups")(system.groups)
app.command(name="version")(system.version)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Verbose logging with stack traces"),
    root: Path = typer.Option(
        Path("."), "--root", "-r",
        help="Directory containing the service group directories",
        exists=True, file_okay=False, dir_okay=True, resolve_path=True
    ),
    config: Optional[Path] = typer.Option(
        None, "--config", "-c",
        help="Settings file (default: <root>/homectl.yml)",
        dir_okay=False
    )
):
    """
    Home Server CLI

    Start, stop and update the compose stacks of every service group.
    """
    setup_logging(debug)

    if ctx.invoked_subcommand is None:
        # No command specified, show usage and fail
        show_usage(ctx.info_name or "homectl", err=True)
        raise typer.Exit(1)

    try:
        ctx.obj = load_settings(root, config)
    except ConfigError as e:
        fail(ctx, e, "Invalid configuration")

    debug_print(f"Settings: {ctx.obj}")
