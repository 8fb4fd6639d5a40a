"""
Command Parser Module

Splits raw input lines into tokens and turns tokens into commands.

Author: tinysh contributors
Version: 1.0.0
"""

from typing import Callable, List, Optional

from .commands import (
    CD,
    ECHO,
    EXEC,
    EXIT,
    SHELL,
    TYPE,
    ChangeDirectory,
    Command,
    Echo,
    Exit,
    External,
    RunScript,
    ShellLocation,
    Type,
)
from tinysh.exceptions import EmptyCommandError
from tinysh.logger import get_logger


def tokenize(line: str) -> List[str]:
    """
    Split a line into whitespace-trimmed, non-empty tokens.

    Only the space character separates tokens. Runs of spaces collapse,
    leading and trailing whitespace is dropped, and there is no quoting
    or escaping.

    Args:
        line: Raw input line

    Returns:
        Tokens in order; empty for a blank line
    """
    return [
        token
        for token in (piece.strip() for piece in line.strip().split(' '))
        if token
    ]


def _arg(tokens: List[str], index: int) -> str:
    return tokens[index] if len(tokens) > index else ""


class CommandParser:
    """
    Parses input lines into Command values.

    Dispatch is on the first token: a builtin name selects its variant,
    anything else becomes an External command.

    Example:
        >>> parser = CommandParser()
        >>> parser.parse("echo  a   b")
        Echo(args=('a', 'b'))
    """

    def __init__(self):
        self._logger = get_logger('parser')
        self._builders: dict[str, Callable[[List[str]], Command]] = {
            EXIT: lambda tokens: Exit(0),
            ECHO: lambda tokens: Echo(tuple(tokens[1:])),
            TYPE: lambda tokens: Type(_arg(tokens, 1)),
            CD: lambda tokens: ChangeDirectory(_arg(tokens, 1)),
            SHELL: lambda tokens: ShellLocation(),
            EXEC: lambda tokens: RunScript(_arg(tokens, 1), tuple(tokens[2:])),
        }

    def parse(self, line: str) -> Optional[Command]:
        """
        Parse a command line.

        Args:
            line: Command line string

        Returns:
            The command, or None if the line is blank
        """
        tokens = tokenize(line)

        if not tokens:
            return None

        return self.parse_tokens(tokens)

    def parse_tokens(self, tokens: List[str]) -> Command:
        """
        Build a command from an already tokenized line.

        Raises:
            EmptyCommandError: If there are no tokens
        """
        if not tokens:
            raise EmptyCommandError()

        builder = self._builders.get(tokens[0])
        if builder is not None:
            command = builder(tokens)
        else:
            command = External(tokens[0], tuple(tokens[1:]))

        self._logger.debug(f"Parsed {command!r}")
        return command
