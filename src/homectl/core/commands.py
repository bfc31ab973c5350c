"""
Command table
Fixed compose argument lists for every lifecycle command
"""

from enum import Enum
from typing import Dict, List, Tuple


class Command(str, Enum):
    SETUP = "setup"
    START = "start"
    STOP = "stop"
    RESTART = "restart"
    LOGS = "logs"
    STATUS = "status"
    UPDATE = "update"
    CLEANUP = "cleanup"


# Each step is run over every resolved group before the next step starts
COMPOSE_STEPS: Dict[Command, Tuple[Tuple[str, ...], ...]] = {
    Command.START: (("up", "-d"),),
    Command.STOP: (("down",),),
    Command.RESTART: (("restart",),),
    Command.LOGS: (("logs", "-f"),),
    Command.STATUS: (("ps",),),
    Command.UPDATE: (("pull",), ("up", "-d")),
}

# Verb shown while a step runs, keyed by the compose subcommand
STEP_LABELS = {
    "up": "Starting",
    "down": "Stopping",
    "restart": "Restarting",
    "logs": "Following logs of",
    "ps": "Status of",
    "pull": "Pulling",
}


def compose_steps(command: Command) -> List[List[str]]:
    """Compose argument lists for a command, in execution order"""
    try:
        steps = COMPOSE_STEPS[command]
    except KeyError:
        raise ValueError(f"{command.value} does not run the compose tool")
    return [list(step) for step in steps]


def step_label(args: List[str]) -> str:
    return STEP_LABELS.get(args[0], args[0].capitalize())
