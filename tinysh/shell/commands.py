"""
Command Types Module

The closed set of commands a single input line can turn into.

Author: tinysh contributors
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Tuple


EXIT = 'exit'
ECHO = 'echo'
TYPE = 'type'
CD = 'cd'
SHELL = 'shell'
EXEC = 'exec'

# Consulted by both the parser and the ``type`` builtin
BUILTIN_NAMES = frozenset({EXIT, ECHO, TYPE, CD, SHELL, EXEC})


def is_builtin(name: str) -> bool:
    """Check if a command name is implemented by the interpreter itself."""
    return name in BUILTIN_NAMES


class Command:
    """
    Base class for parsed commands.

    Each subclass is one variant. Instances are created by the parser
    from exactly one line, executed once and discarded.
    """

    __slots__ = ()

    @property
    def name(self) -> str:
        raise NotImplementedError


@dataclass(frozen=True)
class Exit(Command):
    """Terminate the interpreter with a status code."""
    code: int = 0

    @property
    def name(self) -> str:
        return EXIT


@dataclass(frozen=True)
class Echo(Command):
    """Print the arguments joined by single spaces."""
    args: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return ECHO


@dataclass(frozen=True)
class Type(Command):
    """Report how a command name would be interpreted."""
    target: str = ""

    @property
    def name(self) -> str:
        return TYPE


@dataclass(frozen=True)
class ChangeDirectory(Command):
    """Change the working directory; an empty path means home."""
    path: str = ""

    @property
    def name(self) -> str:
        return CD


@dataclass(frozen=True)
class ShellLocation(Command):
    """Report the directory holding the interpreter's own program."""

    @property
    def name(self) -> str:
        return SHELL


@dataclass(frozen=True)
class RunScript(Command):
    """Replay the lines of a file as commands."""
    path: str = ""
    args: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return EXEC


@dataclass(frozen=True)
class External(Command):
    """Run a program found on the search path."""
    program: str
    args: Tuple[str, ...] = ()

    @property
    def name(self) -> str:
        return self.program
