"""
Shared helpers for command modules
"""

import typer

from ..core.config import Settings
from ..core.errors import HomectlError
from ..utils.display import show_usage
from ..utils.logger import log_exception


def get_settings(ctx: typer.Context) -> Settings:
    """Settings stored on the context by the main callback"""
    root = ctx.find_root()
    if not isinstance(root.obj, Settings):
        root.obj = Settings()
    return root.obj


def fail(ctx: typer.Context, error: HomectlError, context: str = ""):
    """Report a user-facing error and exit with status 1"""
    log_exception(error, context)
    if error.show_usage:
        show_usage(ctx.find_root().info_name or "homectl", err=True)
    raise typer.Exit(1) from error
