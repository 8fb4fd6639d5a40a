"""
tinysh Process Module

Child process management for external commands.
"""

from .launcher import ProcessLauncher

__all__ = [
    'ProcessLauncher',
]
