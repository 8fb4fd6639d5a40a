"""
Process Launcher Module

Starts external programs as child processes and waits for them.

The child inherits the interpreter's standard streams. The interpreter
is blocked for the child's whole lifetime; there is no timeout and no
cancellation.

Author: tinysh contributors
Version: 1.0.0
"""

import subprocess
import sys
from pathlib import Path
from typing import Sequence, Union

from tinysh.exceptions import SpawnError
from tinysh.logger import get_logger


class ProcessLauncher:
    """
    Runs a resolved program to completion.
    
    Example:
        >>> launcher = ProcessLauncher()
        >>> launcher.run('/bin/true', 'true', [])
        0
    """
    
    def __init__(self):
        self._logger = get_logger('process')
    
    def run(
        self,
        executable: Union[str, Path],
        name: str,
        args: Sequence[str]
    ) -> int:
        """
        Spawn a child and block until it exits.
        
        Args:
            executable: Resolved path of the program
            name: Command name as typed, passed as argv[0]
            args: Remaining arguments
        
        Returns:
            The child's exit status (negative if killed by a signal)
        
        Raises:
            SpawnError: If the child cannot be started or waited on
        """
        executable = str(executable)
        
        # Anything we printed must reach the terminal before the child writes
        sys.stdout.flush()
        sys.stderr.flush()
        
        self._logger.debug(
            f"Spawning {name}",
            context={'executable': executable, 'argc': len(args)}
        )
        
        try:
            completed = subprocess.run([name, *args], executable=executable)
        except (OSError, subprocess.SubprocessError) as e:
            reason = getattr(e, 'strerror', None) or str(e)
            raise SpawnError(name, executable, reason) from e
        
        self._logger.debug(
            f"{name} exited",
            context={'status': completed.returncode}
        )
        return completed.returncode
