"""
CLI Core Package
Group resolution, compose invocation, Docker operations and setup
"""

from .bootstrap import OwnershipResult, PermissionResult, SetupReport, run_setup
from .commands import Command, compose_steps
from .compose import GroupResult, aggregate_exit_code, run_compose, run_steps
from .config import Settings, load_settings
from .docker_ops import PruneReport, ensure_network, get_docker_client, prune_resources
from .errors import (
    ComposeError,
    ConfigError,
    DockerUnavailableError,
    HomectlError,
    MissingDirectoryError,
    MissingServiceError,
    SetupError,
    UnknownServiceError
)
from .groups import ALL_SERVICES, GROUPS, ServiceGroup, Target, resolve_groups, resolve_targets

__all__ = [
    # Groups
    'ALL_SERVICES',
    'GROUPS',
    'ServiceGroup',
    'Target',
    'resolve_groups',
    'resolve_targets',

    # Commands and compose
    'Command',
    'compose_steps',
    'GroupResult',
    'aggregate_exit_code',
    'run_compose',
    'run_steps',

    # Docker and setup
    'PruneReport',
    'ensure_network',
    'get_docker_client',
    'prune_resources',
    'OwnershipResult',
    'PermissionResult',
    'SetupReport',
    'run_setup',

    # Config
    'Settings',
    'load_settings',

    # Errors
    'HomectlError',
    'UnknownServiceError',
    'MissingServiceError',
    'MissingDirectoryError',
    'ComposeError',
    'DockerUnavailableError',
    'ConfigError',
    'SetupError'
]
