"""
Logging utilities for CLI debugging
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.traceback import Traceback

console = Console(stderr=True)

# Global debug flag
_DEBUG_MODE = False


def set_debug_mode(debug: bool):
    """Enable or disable debug mode globally"""
    global _DEBUG_MODE
    _DEBUG_MODE = debug

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    else:
        logging.getLogger().setLevel(logging.INFO)


def setup_logging(debug: bool = False):
    """Setup logging configuration"""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=console,
                rich_tracebacks=True,
                tracebacks_show_locals=debug,
                show_time=debug,
                show_path=debug
            )
        ],
        force=True
    )
    set_debug_mode(debug)

    # docker SDK and urllib3 are noisy at DEBUG
    logging.getLogger("urllib3").setLevel(logging.WARNING)
    logging.getLogger("docker").setLevel(logging.INFO)


def log_exception(e: Exception, context: str = ""):
    """Log an exception with context, and its stack trace in debug mode"""
    if context:
        console.print(f"[red]❌ {context}[/red]")

    console.print(f"[red]Error: {e}[/red]")

    if _DEBUG_MODE:
        console.print(Traceback.from_exception(type(e), e, e.__traceback__, show_locals=True))
    elif not getattr(e, "show_usage", False):
        console.print("[yellow]💡 Tip: Run with --debug flag for detailed stack trace[/yellow]")


def debug_print(message: str):
    """Print debug message only in debug mode"""
    if _DEBUG_MODE:
        console.print(f"[dim cyan]DEBUG: {message}[/dim cyan]")
