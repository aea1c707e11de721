"""Shared CLI helpers for file-utils commands."""

import sys
from typing import Optional

from file_utils.common.constants import ExitCodes
from file_utils.common.errors import (
    ArchiveFormatError,
    ArchiveIOError,
    DestinationExistsError,
    DirectoryCreationError,
    InputNotFoundError,
    TargetNotADirectoryError,
    UnsafeEntryPathError,
)


def exit_with_error(message: str, exit_code: int) -> None:
    """Print an error message and exit with the specified code."""
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(exit_code)


def map_exception_to_exit_code(exc: Exception) -> Optional[int]:
    """Translate known exceptions to file-utils exit codes."""
    if isinstance(exc, InputNotFoundError):
        return ExitCodes.INPUT_NOT_FOUND
    if isinstance(exc, TargetNotADirectoryError):
        return ExitCodes.NOT_A_DIRECTORY
    # Checked before its ArchiveFormatError parent.
    if isinstance(exc, UnsafeEntryPathError):
        return ExitCodes.UNSAFE_PATH
    if isinstance(exc, ArchiveFormatError):
        return ExitCodes.ARCHIVE_FORMAT_ERROR
    if isinstance(exc, ArchiveIOError):
        return ExitCodes.IO_ERROR
    if isinstance(exc, DirectoryCreationError):
        return ExitCodes.DIRECTORY_CREATION_FAILED
    if isinstance(exc, DestinationExistsError):
        return ExitCodes.DESTINATION_EXISTS
    if isinstance(exc, ValueError):
        return ExitCodes.INVALID_ARGUMENT
    return None
