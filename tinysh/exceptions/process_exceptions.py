"""
Process Exceptions

Exceptions related to launching and waiting on child processes.

Author: tinysh contributors
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessException(ShellException):
    """
    Base exception for all process-related errors.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 2000, context=context)


class SpawnError(ProcessException):
    """
    A resolved program could not be started or waited on.
    
    This covers a resolved path that is a directory, a file without
    execute permission, a bad interpreter line and similar exec failures.
    
    Example:
        >>> raise SpawnError("ls", "/usr/bin/ls", "Exec format error")
    """
    
    def __init__(
        self,
        name: str,
        executable: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{name}: {reason}",
            error_code=2001,
            context=context
        )
        self.name = name
        self.executable = executable
        self.reason = reason
        self.context["executable"] = executable
