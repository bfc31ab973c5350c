"""
Compose operations for CLI
Runs the compose tool inside each group directory and collects results
"""

import logging
import shlex
import subprocess
from dataclasses import dataclass
from typing import List, Optional, Sequence

from rich.console import Console

from .commands import step_label
from .errors import ComposeError
from .groups import Target

logger = logging.getLogger(__name__)
console = Console()


@dataclass
class GroupResult:
    """Outcome of one compose step on one group"""

    group: str
    args: List[str]
    returncode: Optional[int] = None
    skipped: bool = False

    @property
    def failed(self) -> bool:
        return not self.skipped and self.returncode != 0


def build_command(compose_command: str, args: Sequence[str], extra_args: Sequence[str] = ()) -> List[str]:
    """Full argv for one compose invocation"""
    return shlex.split(compose_command) + list(args) + list(extra_args)


def run_compose(
    target: Target,
    args: Sequence[str],
    extra_args: Sequence[str] = (),
    compose_command: str = "docker-compose"
) -> int:
    """
    Run the compose tool in the target directory
    Output is streamed to the caller's terminal; returns the exit code
    """
    cmd = build_command(compose_command, args, extra_args)
    logger.debug("Running %s in %s", cmd, target.directory)

    try:
        result = subprocess.run(cmd, cwd=str(target.directory))
    except FileNotFoundError:
        raise ComposeError(f"Compose command not found: {cmd[0]}")

    return result.returncode


def run_step(
    targets: Sequence[Target],
    args: Sequence[str],
    extra_args: Sequence[str] = (),
    compose_command: str = "docker-compose"
) -> List[GroupResult]:
    """Run one compose step over every target, in order"""
    results = []

    for target in targets:
        if not target.directory.is_dir():
            logger.warning("Skipping %s: directory %s not found", target.name, target.directory)
            results.append(GroupResult(target.name, list(args), skipped=True))
            continue

        console.print(f"[blue]{step_label(list(args))} {target.name}...[/blue]")
        returncode = run_compose(target, args, extra_args, compose_command)

        if returncode != 0:
            logger.error("%s failed for %s (exit code %d)", " ".join(args), target.name, returncode)

        results.append(GroupResult(target.name, list(args), returncode))

    return results


def run_steps(
    targets: Sequence[Target],
    steps: Sequence[Sequence[str]],
    extra_args: Sequence[str] = (),
    compose_command: str = "docker-compose"
) -> List[GroupResult]:
    """Run each step over all targets before moving to the next step"""
    results = []
    for args in steps:
        results.extend(run_step(targets, args, extra_args, compose_command))
    return results


def aggregate_exit_code(results: Sequence[GroupResult]) -> int:
    """First non-zero exit code among results, or 0"""
    for result in results:
        if result.failed:
            # Killed by a signal
            if result.returncode < 0:
                return 128 - result.returncode
            return result.returncode
    return 0
