"""
CLI Utils Package
Display and logging utilities
"""

from .display import (
    console,
    err_console,
    show_usage,
    create_groups_table,
    create_prune_table,
    format_presence,
    format_size,
    show_operation_summary,
    show_next_steps
)
from .logger import setup_logging, log_exception, debug_print

__all__ = [
    'console',
    'err_console',
    'show_usage',
    'create_groups_table',
    'create_prune_table',
    'format_presence',
    'format_size',
    'show_operation_summary',
    'show_next_steps',
    'setup_logging',
    'log_exception',
    'debug_print'
]
