"""
Display utilities for CLI
Handles usage text, tables and operation summaries
"""

from typing import List, Sequence

from rich.console import Console
from rich.table import Table

from ..core.groups import GROUPS, ServiceGroup

console = Console()
err_console = Console(stderr=True)


def show_usage(prog: str = "homectl", err: bool = False):
    """Show command and service reference"""
    services = "\n".join(
        f"  {group.value:<15} {group.description}" for group in GROUPS
    )
    (err_console if err else console).print(f"""
[cyan]Usage:[/cyan] {prog} [COMMAND] [SERVICE]

[cyan]Commands:[/cyan]
  setup     Initial setup (create network and directories)
  start     Start services
  stop      Stop services
  restart   Restart services
  logs      Follow logs of one service group
  status    Show status
  update    Pull latest images and restart
  cleanup   Remove stopped containers and unused images
  groups    List service groups

[cyan]Services:[/cyan]
  all             All services
{services}

[cyan]Examples:[/cyan]
  {prog} setup
  {prog} start all
  {prog} start media
  {prog} logs productivity
""", highlight=False)


def create_groups_table(title: str = "🏠 Service Groups") -> Table:
    """Create a table for groups listing"""
    table = Table(title=title)
    table.add_column("Name", style="cyan", no_wrap=True)
    table.add_column("Description", style="white")
    table.add_column("Directory", style="blue")
    table.add_column("Present", style="green")
    return table


def create_prune_table(title: str = "🧹 Cleanup") -> Table:
    """Create a table for prune results"""
    table = Table(title=title)
    table.add_column("Resource", style="cyan")
    table.add_column("Removed", style="green", justify="right")
    table.add_column("Reclaimed", style="magenta", justify="right")
    return table


def format_presence(present: bool) -> str:
    return "[green]✓[/green]" if present else "[red]✗ missing[/red]"


def format_size(size: int) -> str:
    """Format a byte count for display"""
    size_mb = size / (1024 * 1024)
    if size_mb >= 1024:
        return f"{size_mb / 1024:.2f} GB"
    return f"{size_mb:.2f} MB"


def show_operation_summary(results: Sequence) -> None:
    """Show per-group outcome of a compose command"""
    success = [r for r in results if not r.skipped and not r.failed]
    failed = [r for r in results if r.failed]
    skipped = [r for r in results if r.skipped]

    # A single successful step needs no summary
    if len(results) <= 1 and not failed and not skipped:
        return

    console.print()
    if success:
        console.print(f"[green]✓ Successfully completed: {len(success)}[/green]")
    if skipped:
        names = ", ".join(sorted({r.group for r in skipped}))
        console.print(f"[yellow]⚠ Skipped (no directory): {names}[/yellow]")
    if failed:
        console.print(f"[red]❌ Failed: {len(failed)}[/red]")
        for result in failed:
            console.print(f"[red]   {result.group}: {' '.join(result.args)} exited with {result.returncode}[/red]")


def show_next_steps(prog: str = "homectl", groups: Sequence[ServiceGroup] = GROUPS):
    """Show what to do after setup"""
    steps: List[str] = [
        "Copy your existing config files to the new structure",
        "Update IP addresses in configs if needed",
    ]
    steps.extend(f"Run: {prog} start {group.value}" for group in groups)

    console.print("\n[cyan]Next steps:[/cyan]")
    for i, step in enumerate(steps, 1):
        console.print(f"  {i}. {step}")
