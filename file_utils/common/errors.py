"""
Custom exception classes for file-utils.

Every failure is terminal for the call that raised it. Nothing is retried
and partially written output is left on disk for the caller to deal with.
"""


class FileUtilsError(Exception):
    """Base exception class for file-utils errors."""
    pass


class InputNotFoundError(FileUtilsError):
    """Raised when a source file or directory does not exist."""
    pass


class TargetNotADirectoryError(FileUtilsError):
    """Raised when a path expected to be a directory is something else."""
    pass


class ArchiveFormatError(FileUtilsError):
    """Raised when a stream does not parse as a tar archive."""
    pass


class ArchiveIOError(FileUtilsError):
    """Raised when reading, writing, copying or decompressing fails."""
    pass


class DirectoryCreationError(FileUtilsError):
    """Raised when a directory entry cannot be materialized."""
    pass


class DestinationExistsError(FileUtilsError):
    """Raised when the archive copy would overwrite an existing file."""
    pass


class UnsafeEntryPathError(ArchiveFormatError):
    """Raised when an archive entry resolves outside the output directory."""
    pass
