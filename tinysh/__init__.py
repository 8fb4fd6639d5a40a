"""
tinysh - A minimal interactive command interpreter

Reads lines, runs a handful of builtins in-process, launches everything
else from the search path, and replays command files.
"""

__version__ = "1.0.0"
__author__ = "tinysh contributors"

# Import main components for convenience
from .shell.parser import CommandParser, tokenize
from .shell.executor import CommandExecutor
from .shell.shell import Shell

__all__ = [
    'CommandParser',
    'tokenize',
    'CommandExecutor',
    'Shell',
]
