"""
tinysh Core Module

Core components:
- Configuration Loader
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'LoggingConfig',
    'get_config',
]
