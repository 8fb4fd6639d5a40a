#!/usr/bin/env python3
"""
tinysh - A minimal interactive command interpreter

This is the command-line entry point.

Usage:
    tinysh                       interactive prompt
    tinysh script.sh             replay a script file and exit
    tinysh --config tinysh.json  load settings from a JSON file

Author: tinysh contributors
Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from tinysh import __version__
from tinysh.core.config_loader import ConfigLoader
from tinysh.exceptions import ConfigLoadError, ConfigValidationError
from tinysh.logger import Logger, LogLevel, get_logger
from tinysh.shell.commands import RunScript
from tinysh.shell.executor import CommandExecutor
from tinysh.shell.shell import Shell


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='tinysh',
        description='A minimal interactive command interpreter.'
    )
    parser.add_argument(
        'script',
        nargs='?',
        help='replay this file instead of reading commands interactively'
    )
    parser.add_argument(
        '-c', '--config',
        metavar='PATH',
        help='JSON configuration file'
    )
    parser.add_argument(
        '--log-level',
        metavar='LEVEL',
        help='override the configured log level (DEBUG, INFO, WARNING, ERROR)'
    )
    parser.add_argument(
        '--version',
        action='version',
        version=f'%(prog)s {__version__}'
    )
    return parser


def setup_logging(level_name: str, log_file: Optional[str], console_output: bool) -> None:
    """Initialize logging from configuration values."""
    unknown_level = False
    try:
        level = LogLevel.from_name(level_name)
    except ValueError:
        level = LogLevel.WARNING
        unknown_level = True

    Logger.initialize(level=level, log_file=log_file, console_output=console_output)

    if unknown_level:
        get_logger('config').warning(f"Unknown log level {level_name!r}, using WARNING")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for tinysh.

    Startup sequence:
    1. Parse command-line arguments
    2. Load configuration
    3. Initialize logging
    4. Run the script or start the interactive shell

    Returns:
        Exit code for the interpreter process
    """
    args = build_arg_parser().parse_args(argv)

    loader = ConfigLoader()
    loader.reset()
    if args.config:
        try:
            loader.load(args.config)
        except (ConfigLoadError, ConfigValidationError) as e:
            print(f"tinysh: {e.message}", file=sys.stderr)
            return 2

    config = loader.config
    setup_logging(
        args.log_level or config.logging.level,
        config.logging.log_file,
        config.logging.console_output,
    )

    logger = get_logger('shell')
    executor = CommandExecutor()

    if args.script is not None:
        logger.info("Script mode", context={'path': args.script})
        try:
            status = executor.execute(RunScript(args.script))
        except Exception as e:
            logger.exception(f"Script error: {e}", exc=e)
            print(f"tinysh: error: {e}")
            status = 1
        sys.stdout.flush()
        return status

    shell = Shell(executor)

    try:
        return shell.run()
    except KeyboardInterrupt:
        print()
        return 130


if __name__ == '__main__':
    sys.exit(main())
