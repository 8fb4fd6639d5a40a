"""
Filesystem Exceptions

Exceptions related to the real filesystem: missing paths, permission
bits, directory changes and script files.

Author: tinysh contributors
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class FileSystemException(ShellException):
    """
    Base exception for all filesystem-related errors.
    
    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 4000, context=context)
        self.path = path
        if path is not None:
            self.context["path"] = path
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path is not None:
            base = f"{base} (path={self.path})"
        return base


class NoSuchFileError(FileSystemException):
    """
    The specified file or directory does not exist.
    
    Example:
        >>> raise NoSuchFileError("/path/to/script")
    """
    
    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{path}: No such file or directory",
            path=path,
            error_code=4001,
            context=context
        )


class PermissionDeniedError(FileSystemException):
    """
    The file exists but has none of its execute bits set.
    
    Example:
        >>> raise PermissionDeniedError("notes.txt")
    """
    
    def __init__(
        self,
        path: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{path}: Permission denied",
            path=path,
            error_code=4002,
            context=context
        )


class DirectoryChangeError(FileSystemException):
    """
    The target exists but the working directory could not be changed to it.
    
    Typical causes are a regular file given as target or a directory
    without search permission.
    """
    
    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"cd: {path}: {reason}",
            path=path,
            error_code=4003,
            context=context
        )
        self.reason = reason


class ScriptReadError(FileSystemException):
    """A script file exists and is executable but could not be read as text."""
    
    def __init__(
        self,
        path: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{path}: {reason}",
            path=path,
            error_code=4004,
            context=context
        )
        self.reason = reason
