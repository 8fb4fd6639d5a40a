"""
tinysh Exception Hierarchy

All custom exceptions inherit from ShellException, with sub-categories for
the filesystem and for child processes.

Architecture:
    ShellException (Base)
    ├── EmptyCommandError
    ├── CommandNotFoundError
    ├── ConfigLoadError
    ├── ConfigValidationError
    ├── FileSystemException
    │   ├── NoSuchFileError
    │   ├── PermissionDeniedError
    │   ├── DirectoryChangeError
    │   └── ScriptReadError
    └── ProcessException
        └── SpawnError
"""

from .shell_exceptions import (
    ShellException,
    EmptyCommandError,
    CommandNotFoundError,
    ConfigLoadError,
    ConfigValidationError,
)

from .fs_exceptions import (
    FileSystemException,
    NoSuchFileError,
    PermissionDeniedError,
    DirectoryChangeError,
    ScriptReadError,
)

from .process_exceptions import (
    ProcessException,
    SpawnError,
)

__all__ = [
    # Shell exceptions
    "ShellException",
    "EmptyCommandError",
    "CommandNotFoundError",
    "ConfigLoadError",
    "ConfigValidationError",
    # Filesystem exceptions
    "FileSystemException",
    "NoSuchFileError",
    "PermissionDeniedError",
    "DirectoryChangeError",
    "ScriptReadError",
    # Process exceptions
    "ProcessException",
    "SpawnError",
]
