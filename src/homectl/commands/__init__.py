"""
CLI Commands Package
Lifecycle and system management commands
"""

from . import lifecycle
from . import system

__all__ = ['lifecycle', 'system']
