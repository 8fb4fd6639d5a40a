"""
tinysh Logger Module

Logging for the interpreter:
- Subsystem-specific loggers (shell, parser, executor, path, process, config)
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Optional file output
- In-memory session buffer for inspection
- Thread-safe setup

Console output goes to stderr. Standard output belongs to the commands
the user runs.

Author: tinysh contributors
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any, List


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50

    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """
        Look up a level by name, case-insensitively.

        Raises:
            ValueError: If the name is not a known level
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Custom log formatter for tinysh.

    Provides formatted output with:
    - Timestamp with millisecond precision
    - Log level with color coding (if the stream is a terminal)
    - Subsystem identification
    - Structured context
    """

    # ANSI color codes for terminal output
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'

    def __init__(self, use_colors: bool = True, stream: Any = None):
        super().__init__()
        self.use_colors = use_colors and self._supports_color(stream or sys.stderr)

    @staticmethod
    def _supports_color(stream: Any) -> bool:
        """Check if the stream is a terminal."""
        if not hasattr(stream, 'isatty'):
            return False
        return bool(stream.isatty())

    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]

        level = record.levelname

        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"

        components = [f"[{timestamp}]", level_display]

        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")

        components.append(str(record.getMessage()))

        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")

        message = " ".join(components)

        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)

        return message


class SessionLogHandler(logging.Handler):
    """
    Keeps the most recent log records of this session in memory.

    Used by tests and by anything that wants to inspect what the
    interpreter did without parsing a log file.
    """

    def __init__(self, max_entries: int = 1000):
        super().__init__()
        self.max_entries = max_entries
        self._log_buffer: List[dict[str, Any]] = []
        self._lock = threading.Lock()

    def emit(self, record: logging.LogRecord) -> None:
        """Store log record in buffer."""
        log_entry = {
            'timestamp': record.created,
            'level': record.levelname,
            'message': record.getMessage(),
            'subsystem': getattr(record, 'subsystem', None),
            'context': getattr(record, 'context', {}),
        }

        with self._lock:
            self._log_buffer.append(log_entry)
            if len(self._log_buffer) > self.max_entries:
                self._log_buffer = self._log_buffer[-self.max_entries:]

    def get_logs(
        self,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Retrieve logs with optional filtering."""
        with self._lock:
            logs = self._log_buffer.copy()

        if level:
            logs = [l for l in logs if l['level'] == level]

        if subsystem:
            logs = [l for l in logs if l['subsystem'] == subsystem]

        return logs[-limit:]

    def clear(self) -> None:
        """Clear the log buffer."""
        with self._lock:
            self._log_buffer.clear()


class Logger:
    """
    Main logging class for tinysh.

    One instance per subsystem, backed by the standard ``logging`` logger
    ``tinysh.<subsystem>``. Handlers live on the ``tinysh`` parent logger
    and are installed once by ``initialize``.

    Example:
        >>> log = Logger('executor')
        >>> log.info("Spawning child", context={'name': 'ls'})
        >>> log.warning("cd: no such directory", context={'path': '/nope'})
    """

    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _session_handler: Optional[SessionLogHandler] = None
    _global_level: int = LogLevel.WARNING

    def __new__(cls, subsystem: str = 'shell') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'tinysh.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]

    @property
    def subsystem(self) -> str:
        return self._subsystem

    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        console_output: bool = True,
        use_colors: bool = True
    ) -> None:
        """
        Initialize the logging system.

        Calling it again after a successful setup only adjusts the level.

        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            console_output: Whether to log to stderr
            use_colors: Whether to use ANSI colors in console output
        """
        with cls._lock:
            root_logger = logging.getLogger('tinysh')
            cls._global_level = level
            root_logger.setLevel(level)

            if cls._initialized:
                for handler in root_logger.handlers:
                    handler.setLevel(level)
                return

            # Records stop at the tinysh logger
            root_logger.propagate = False

            cls._session_handler = SessionLogHandler()
            cls._session_handler.setLevel(level)
            root_logger.addHandler(cls._session_handler)

            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(
                    LogFormatter(use_colors=use_colors, stream=sys.stderr)
                )
                root_logger.addHandler(console_handler)

            if log_file:
                file_path = Path(log_file).expanduser()
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(file_path, encoding='utf-8')
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                root_logger.addHandler(file_handler)

            cls._initialized = True

    @classmethod
    def get_session_logs(
        cls,
        level: Optional[str] = None,
        subsystem: Optional[str] = None,
        limit: int = 100
    ) -> List[dict[str, Any]]:
        """Get logs from the in-memory session buffer."""
        if cls._session_handler is None:
            return []
        return cls._session_handler.get_logs(level=level, subsystem=subsystem, limit=limit)

    @classmethod
    def clear_session_logs(cls) -> None:
        if cls._session_handler is not None:
            cls._session_handler.clear()

    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Internal logging method."""
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)

    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)

    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)

    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)

    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an exception with stack trace."""
        self._logger.error(
            message,
            exc_info=exc if exc is not None else True,
            extra={
                'subsystem': self._subsystem,
                'context': context or {},
            }
        )


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.

    Args:
        subsystem: Name of the subsystem (e.g., 'shell', 'executor', 'path')

    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
