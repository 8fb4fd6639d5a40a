"""
Command Executor Module

Performs the effect of a parsed command: builtins run in-process,
anything else is resolved on the search path and run as a child.
Script replay feeds each line of a file back through the parser and
this executor.

Errors are reported on stdout and never stop the interpreter. The only
way out is an ``exit`` typed at the top level, which raises SystemExit.

Author: tinysh contributors
Version: 1.0.0
"""

import os
import sys
from typing import Optional

from .builtins import BuiltinCommands
from .commands import Command, Exit, External
from .parser import CommandParser
from tinysh.core.config_loader import get_config
from tinysh.exceptions import (
    CommandNotFoundError,
    NoSuchFileError,
    PermissionDeniedError,
    ScriptReadError,
    ShellException,
)
from tinysh.filesystem.path_resolver import SearchPathResolver, has_execute_bit
from tinysh.logger import get_logger
from tinysh.process.launcher import ProcessLauncher


STATUS_OK = 0
STATUS_ERROR = 1
STATUS_NOT_FOUND = 127


class CommandExecutor:
    """
    Executes Command values.

    Example:
        >>> executor = CommandExecutor()
        >>> executor.execute(Echo(('a', 'b')))
        a b
        0
    """

    def __init__(
        self,
        resolver: Optional[SearchPathResolver] = None,
        launcher: Optional[ProcessLauncher] = None,
        parser: Optional[CommandParser] = None,
        skip_comments: Optional[bool] = None
    ):
        config = get_config()

        self._resolver = resolver or SearchPathResolver(config.shell.search_path_variable)
        self._launcher = launcher or ProcessLauncher()
        self._parser = parser or CommandParser()
        self._builtins = BuiltinCommands(self)
        self._skip_comments = (
            config.shell.skip_comments if skip_comments is None else skip_comments
        )
        self._logger = get_logger('executor')

    @property
    def resolver(self) -> SearchPathResolver:
        return self._resolver

    def execute(self, command: Command) -> int:
        """
        Execute a command and report any error it raises.

        Args:
            command: Parsed command

        Returns:
            Exit code
        """
        try:
            if self._builtins.handles(command):
                return self._builtins.execute(command)
            return self._execute_external(command)
        except ShellException as e:
            self._logger.warning(
                e.message,
                context={'command': command.name, 'error_code': e.error_code}
            )
            print(e.report())
            if isinstance(e, CommandNotFoundError):
                return STATUS_NOT_FOUND
            return STATUS_ERROR

    def execute_line(self, line: str) -> int:
        """Parse and execute one line; blank lines do nothing."""
        command = self._parser.parse(line)

        if command is None:
            return STATUS_OK

        return self.execute(command)

    def _execute_external(self, command: External) -> int:
        """Resolve and run an external program."""
        path = self._resolver.resolve(command.program)

        if path is None:
            raise CommandNotFoundError(command.program)

        return self._launcher.run(path, command.program, command.args)

    def run_script(self, path: str) -> int:
        """
        Replay a file line by line.

        Each line is parsed and executed independently; a failing line is
        reported and the next one runs. An ``exit`` line ends the replay
        without ending the interpreter.

        Args:
            path: Script file

        Returns:
            Exit code of the last executed line

        Raises:
            NoSuchFileError: If the file does not exist
            PermissionDeniedError: If no execute bit is set
            ScriptReadError: If the file cannot be read as UTF-8 text
        """
        if not os.path.exists(path):
            raise NoSuchFileError(path)

        if not has_execute_bit(path):
            raise PermissionDeniedError(path)

        try:
            with open(path, 'r', encoding='utf-8', newline='') as f:
                contents = f.read()
        except UnicodeDecodeError as e:
            raise ScriptReadError(path, "cannot decode file as UTF-8 text") from e
        except OSError as e:
            raise ScriptReadError(path, e.strerror or str(e)) from e

        self._logger.info("Replaying script", context={'path': path})

        status = STATUS_OK

        # Only \n and \r\n end a line
        for number, line in enumerate(contents.split('\n'), start=1):
            if line.endswith('\r'):
                line = line[:-1]

            if self._skip_comments and line.lstrip().startswith('#'):
                continue

            command = self._parser.parse(line)

            if command is None:
                continue

            if isinstance(command, Exit):
                self._logger.debug(
                    "Script replay stopped by exit",
                    context={'path': path, 'line': number}
                )
                break

            try:
                status = self.execute(command)
            except Exception as e:
                self._logger.error(
                    f"Script line failed: {e}",
                    context={'path': path, 'line': number}
                )
                print(f"tinysh: error: {e}")
                status = STATUS_ERROR

            sys.stdout.flush()

        return status
