"""
tinysh Shell Module

Provides the command interpreter:
- Tokenizing and parsing
- Command variants
- Built-in commands
- Command execution and script replay
- The interactive loop
"""

from .commands import (
    BUILTIN_NAMES,
    Command,
    Exit,
    Echo,
    Type,
    ChangeDirectory,
    ShellLocation,
    RunScript,
    External,
    is_builtin,
)
from .parser import CommandParser, tokenize
from .builtins import BuiltinCommands, shell_directory
from .executor import CommandExecutor
from .shell import Shell

__all__ = [
    'BUILTIN_NAMES',
    'Command',
    'Exit',
    'Echo',
    'Type',
    'ChangeDirectory',
    'ShellLocation',
    'RunScript',
    'External',
    'is_builtin',
    'CommandParser',
    'tokenize',
    'BuiltinCommands',
    'shell_directory',
    'CommandExecutor',
    'Shell',
]
