"""
Shell Built-in Commands

Implements built-in shell commands.

Author: tinysh contributors
Version: 1.0.0
"""

import os
import sys
from pathlib import Path
from typing import Callable

from .commands import (
    is_builtin,
    ChangeDirectory,
    Command,
    Echo,
    Exit,
    RunScript,
    ShellLocation,
    Type,
)
from tinysh.exceptions import DirectoryChangeError, NoSuchFileError
from tinysh.logger import get_logger


def shell_directory() -> Path:
    """
    Directory containing the program this interpreter was started from.

    That is the ``tinysh`` console script or ``__main__`` module when
    ``sys.argv[0]`` names a file, otherwise the Python executable.
    """
    program = sys.argv[0] if sys.argv else ''
    if program and os.path.isfile(program):
        return Path(program).resolve().parent
    return Path(sys.executable).resolve().parent


class BuiltinCommands:
    """
    Built-in shell commands.

    These commands are executed directly by the interpreter without
    creating a new process. Each handler returns an exit code; errors
    the user should see are raised as ShellException subclasses and
    reported by the executor.
    """

    def __init__(self, executor):
        """
        Initialize built-in commands.

        Args:
            executor: The CommandExecutor, used for path lookups and
                script replay
        """
        self._executor = executor
        self._logger = get_logger('executor')
        self._commands: dict[type, Callable[..., int]] = {
            Exit: self.cmd_exit,
            Echo: self.cmd_echo,
            Type: self.cmd_type,
            ChangeDirectory: self.cmd_cd,
            ShellLocation: self.cmd_shell,
            RunScript: self.cmd_exec,
        }

    def handles(self, command: Command) -> bool:
        """Check if a command is handled in-process."""
        return type(command) in self._commands

    def execute(self, command: Command) -> int:
        """
        Execute a built-in command.

        Args:
            command: A builtin command variant

        Returns:
            Exit code
        """
        handler = self._commands.get(type(command))
        if handler is None:
            raise TypeError(f"not a builtin command: {command!r}")
        return handler(command)

    # Command implementations

    def cmd_exit(self, command: Exit) -> int:
        """Exit the interpreter."""
        self._logger.info("Exit requested", context={'code': command.code})
        raise SystemExit(command.code)

    def cmd_echo(self, command: Echo) -> int:
        """Echo arguments."""
        print(' '.join(command.args))
        return 0

    def cmd_type(self, command: Type) -> int:
        """Describe how a name would be interpreted."""
        name = command.target
        if not name:
            print("type: not enough arguments")
            return 1

        if is_builtin(name):
            print(f"{name} is a shell builtin")
            return 0

        path = self._executor.resolver.resolve(name)
        if path is None:
            print(f"{name} not found")
            return 1

        print(f"{name} is {path}")
        return 0

    def cmd_cd(self, command: ChangeDirectory) -> int:
        """Change directory."""
        if command.path:
            directory = command.path
        else:
            try:
                directory = str(Path.home())
            except (RuntimeError, KeyError):
                print("cd: home directory not available")
                return 1

        if not os.path.exists(directory):
            raise NoSuchFileError(command.path or directory)

        try:
            os.chdir(directory)
        except OSError as e:
            raise DirectoryChangeError(command.path or directory, e.strerror or str(e)) from e

        self._logger.debug("Changed directory", context={'cwd': os.getcwd()})
        return 0

    def cmd_shell(self, command: ShellLocation) -> int:
        """Print the interpreter's own directory."""
        print(shell_directory())
        return 0

    def cmd_exec(self, command: RunScript) -> int:
        """Replay a script file."""
        if command.args:
            self._logger.debug(
                "Ignoring script arguments",
                context={'path': command.path, 'argc': len(command.args)}
            )
        return self._executor.run_script(command.path)
