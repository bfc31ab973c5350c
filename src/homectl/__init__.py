"""
Home Server CLI Package
Lifecycle management for grouped docker-compose services
"""

__version__ = "1.0.0"
__author__ = "Home Server Team"
__description__ = "CLI for managing infrastructure, media and productivity compose stacks"

__all__ = [
    '__version__',
    '__author__',
    '__description__'
]
