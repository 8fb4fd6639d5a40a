"""
Shell Exceptions

Base exception for the interpreter and the errors raised while turning a
line of input into a command.

Author: tinysh contributors
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all interpreter errors.
    
    Every error the interpreter can report to the user derives from this
    class. The executor catches it, prints ``report()`` and keeps the
    interactive loop running.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    
    Example:
        >>> raise ShellException("something went wrong", error_code=1000)
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.context = context or {}
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code})"
        )
    
    def report(self) -> str:
        """Line printed to the user's terminal."""
        return self.message


class EmptyCommandError(ShellException):
    """
    A command was requested from an empty token sequence.
    
    Blank input lines are filtered out before parsing; reaching this
    error means a caller skipped that guard.
    """
    
    def __init__(self, context: Optional[dict[str, Any]] = None) -> None:
        super().__init__(
            message="empty command line",
            error_code=1001,
            context=context
        )


class CommandNotFoundError(ShellException):
    """
    The command name is neither a builtin nor present on the search path.
    
    Example:
        >>> raise CommandNotFoundError("frobnicate")
    """
    
    def __init__(
        self,
        name: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            message=f"{name}: command not found",
            error_code=1002,
            context=context
        )
        self.name = name
        self.context["name"] = name


class ConfigLoadError(ShellException):
    """The configuration file could not be read or parsed."""
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message=message, error_code=1003, context=context)
        self.path = path
        if path:
            self.context["path"] = path


class ConfigValidationError(ShellException):
    """Raised when a configuration key or value is invalid."""
    
    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message=message, error_code=1004, context=context)
