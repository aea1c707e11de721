"""
Command Line Interface for file-utils.

Provides CLI commands for archive extraction, permission mask conversion
and jar directory listing.
"""

import argparse
import sys
from typing import List, Optional

from file_utils.cli_commands import COMMANDS
from file_utils.common.config import FileUtilsSettings
from file_utils.common.constants import ExitCodes
from file_utils.common.logging_config import configure_logging, get_logger


def create_parser() -> argparse.ArgumentParser:
    """Create the main argument parser."""
    parser = argparse.ArgumentParser(
        prog='file-utils',
        description='Tarball extraction with POSIX permission restoration'
    )
    parser.add_argument('--log-level', default=None,
                        help='Logging level (defaults to FILE_UTILS_LOG_LEVEL or INFO)')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')
    for command in COMMANDS:
        command.add_parser(subparsers)

    return parser


def main(args: Optional[List[str]] = None) -> None:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (uses sys.argv if None)
    """
    parser = create_parser()

    if args is None:
        args = sys.argv[1:]

    if not args:
        parser.print_help()
        sys.exit(ExitCodes.OK)

    parsed_args = parser.parse_args(args)
    configure_logging(parsed_args.log_level or FileUtilsSettings.from_env().log_level)
    logger = get_logger(__name__)
    logger.debug("Running command %s", parsed_args.command)

    if hasattr(parsed_args, 'func'):
        parsed_args.func(parsed_args)
    else:
        parser.print_help()
        sys.exit(ExitCodes.OK)


if __name__ == '__main__':
    main()
