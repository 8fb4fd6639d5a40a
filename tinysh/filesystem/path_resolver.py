"""
Path Resolver Module

Resolves bare program names against the search path and inspects file
permission bits.

Author: tinysh contributors
Version: 1.0.0
"""

import os
import stat
from pathlib import Path
from typing import Optional, List

from tinysh.logger import get_logger


EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


class SearchPathResolver:
    """
    Finds programs on a colon-separated search path.
    
    The environment variable is read on every lookup, so changes made to
    ``os.environ`` take effect immediately. Only existence is checked;
    whether the match can actually be executed is decided when it is
    spawned.
    
    Example:
        >>> resolver = SearchPathResolver()
        >>> resolver.resolve('sh')
        PosixPath('/bin/sh')
    """
    
    def __init__(self, variable: str = 'PATH'):
        self._variable = variable
        self._logger = get_logger('path')
    
    @property
    def variable(self) -> str:
        return self._variable
    
    def directories(self) -> List[str]:
        """
        Get the search path directories in lookup order.
        
        Returns:
            Directories as listed, or an empty list if the variable is unset
        """
        value = os.environ.get(self._variable)
        
        if value is None:
            self._logger.debug(
                "Search path variable is not set",
                context={'variable': self._variable}
            )
            return []
        
        return value.split(':')
    
    def resolve(self, name: str) -> Optional[Path]:
        """
        Resolve a program name to the first matching path.
        
        Args:
            name: Program name as typed
        
        Returns:
            Path of the first existing ``directory/name``, or None
        """
        if not name:
            return None
        
        for directory in self.directories():
            candidate = Path(directory) / name
            try:
                found = candidate.exists()
            except OSError as e:
                # Name too long, unreadable directory and the like
                self._logger.debug(
                    f"Skipping search path entry for {name}",
                    context={'directory': directory, 'error': e.strerror}
                )
                continue
            if found:
                self._logger.debug(
                    f"Resolved {name}",
                    context={'path': str(candidate)}
                )
                return candidate
        
        return None


def has_execute_bit(path: str) -> bool:
    """
    Check whether any of the owner/group/other execute bits is set.
    
    Args:
        path: File to inspect
    
    Returns:
        True if at least one execute bit is set
    """
    return bool(os.stat(path).st_mode & EXECUTE_BITS)
