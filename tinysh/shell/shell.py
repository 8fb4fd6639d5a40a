"""
tinysh Shell Module

The interactive read-parse-execute loop.

Author: tinysh contributors
Version: 1.0.0
"""

import os
import sys
from typing import Optional

from .executor import CommandExecutor, STATUS_OK
from tinysh.core.config_loader import get_config
from tinysh.logger import get_logger


class Shell:
    """
    tinysh Interactive Shell.

    Prints a prompt showing the working directory, reads one line,
    executes it, and repeats until end of input or ``exit``.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(self, executor: Optional[CommandExecutor] = None):
        self._logger = get_logger('shell')
        self._executor = executor or CommandExecutor()

    def run(self) -> int:
        """
        Run the interactive shell.

        This is the main REPL loop. An ``exit`` command raises SystemExit,
        which is left to propagate to the caller.

        Returns:
            Exit code when input ends
        """
        config = get_config()

        if config.shell.welcome_message:
            print(config.shell.welcome_message)

        self._logger.info("Shell started", context={'cwd': os.getcwd()})

        while True:
            try:
                prompt = self.get_prompt()

                try:
                    line = input(prompt)
                except EOFError:
                    print()
                    break
                except KeyboardInterrupt:
                    print("^C")
                    continue

                self.execute_line(line)

            except Exception as e:
                self._logger.exception(f"Shell error: {e}", exc=e)
                print(f"tinysh: error: {e}")

            sys.stdout.flush()

        return STATUS_OK

    def get_prompt(self) -> str:
        """Generate the shell prompt."""
        config = get_config()

        try:
            cwd = os.getcwd()
        except OSError:
            # Working directory was removed underneath us
            cwd = os.environ.get('PWD', '?')

        return f"{cwd}{config.shell.prompt_suffix}"

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code
        """
        return self._executor.execute_line(line)
