"""
tinysh Configuration Loader

Configuration management for the interpreter:
- JSON configuration file loading
- Default value handling
- Type checking of configured values

Author: tinysh contributors
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from tinysh.exceptions import ConfigLoadError, ConfigValidationError


@dataclass
class ShellConfig:
    """Interactive loop and command resolution settings."""
    prompt_suffix: str = " $ "
    search_path_variable: str = "PATH"
    skip_comments: bool = False
    welcome_message: str = ""


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for the interpreter.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files and providing
    runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.shell.prompt_suffix)
         $
    """

    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()

    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
            return cls._instance

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            ConfigLoadError: If the file cannot be loaded or parsed
            ConfigValidationError: If a setting has the wrong shape
        """
        path = Path(config_path)

        if not path.exists():
            raise ConfigLoadError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigLoadError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            )
        except OSError as e:
            raise ConfigLoadError(
                f"Cannot read configuration file: {e}",
                path=config_path
            )

        if not isinstance(data, dict):
            raise ConfigLoadError(
                "Configuration file must contain a JSON object",
                path=config_path
            )

        self._config = self._parse_config(data)
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """
        Parse configuration data into Config object.

        Raises:
            ConfigValidationError: If a section is not an object or a
                value has the wrong type
        """
        config = Config()

        # Parse shell config
        if 'shell' in data:
            shell_data = _section(data, 'shell')
            config.shell = ShellConfig(
                prompt_suffix=_value(shell_data, 'shell.prompt_suffix', config.shell.prompt_suffix, str),
                search_path_variable=_value(shell_data, 'shell.search_path_variable', config.shell.search_path_variable, str),
                skip_comments=_value(shell_data, 'shell.skip_comments', config.shell.skip_comments, bool),
                welcome_message=_value(shell_data, 'shell.welcome_message', config.shell.welcome_message, str),
            )

        # Parse logging config
        if 'logging' in data:
            log_data = _section(data, 'logging')
            config.logging = LoggingConfig(
                level=_value(log_data, 'logging.level', config.logging.level, str),
                log_file=_value(log_data, 'logging.log_file', config.logging.log_file, (str, type(None))),
                console_output=_value(log_data, 'logging.console_output', config.logging.console_output, bool),
            )

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    def reset(self) -> None:
        """Drop any loaded file and go back to defaults."""
        self._config = Config()


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data[name]
    if not isinstance(section, dict):
        raise ConfigValidationError(
            f"Configuration section '{name}' must be an object",
            context={'section': name}
        )
    return section


def _value(section: dict[str, Any], key: str, default: Any, expected: Any) -> Any:
    value = section.get(key.rsplit('.', 1)[1], default)
    if not isinstance(value, expected):
        raise ConfigValidationError(
            f"Invalid value for {key}: {value!r}",
            context={'key': key}
        )
    return value


def get_config() -> Config:
    """
    Get the global configuration instance.

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
