"""
Filesystem primitives used by the extraction pipeline.

Handles:
* Input validation (missing paths, non-directories)
* Directory creation and no-overwrite copies
* Applying symbolic permissions to extracted files
* Listing files by extension (e.g. jar directories)
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import List, Union

from file_utils.common.constants import DEFAULT_COPY_BUFFER_SIZE, JAR_SUFFIX
from file_utils.common.errors import (
    ArchiveIOError,
    DestinationExistsError,
    DirectoryCreationError,
    InputNotFoundError,
    TargetNotADirectoryError,
)
from file_utils.common.logging_config import get_logger

from .permissions import from_symbolic_permission

PathLike = Union[str, "os.PathLike[str]"]


def require_file(path: PathLike) -> Path:
    """Return `path` as a Path, raising if it is not an existing regular file."""
    path = Path(path)
    if not path.exists():
        raise InputNotFoundError(f"Path {path} does not exist")
    if not path.is_file():
        raise InputNotFoundError(f"Path {path} is not a regular file")
    return path


def require_directory(path: PathLike) -> Path:
    """Return `path` as a Path, raising if it is not an existing directory."""
    path = Path(path)
    if not path.exists():
        raise InputNotFoundError(f"Path {path} does not exist")
    if not path.is_dir():
        raise TargetNotADirectoryError(f"Path {path} is not a directory")
    return path


def make_directories(path: Path) -> None:
    """Create `path` and any missing ancestors."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreationError(f"Couldn't create directory {path}: {exc}") from exc


def set_posix_permissions(path: Path, symbolic: str) -> None:
    """Apply a `rwxrwxrwx` style permission string to `path`."""
    mode = from_symbolic_permission(symbolic)
    try:
        os.chmod(path, mode)
    except OSError as exc:
        raise ArchiveIOError(f"Failed to set permissions {symbolic} on {path}: {exc}") from exc


def copy_file_no_overwrite(
    source: Path,
    destination: Path,
    buffer_size: int = DEFAULT_COPY_BUFFER_SIZE,
) -> Path:
    """
    Copy the bytes of `source` to `destination`, refusing to replace a file.

    Args:
        source: File to copy
        destination: Full path of the new file
        buffer_size: Chunk size used while streaming

    Returns:
        The destination path
    """
    try:
        with source.open("rb") as src, destination.open("xb") as dst:
            shutil.copyfileobj(src, dst, buffer_size)
    except FileExistsError as exc:
        raise DestinationExistsError(f"File {destination} already exists") from exc
    except OSError as exc:
        raise ArchiveIOError(f"Failed to copy {source} to {destination}: {exc}") from exc
    return destination


def list_files_with_extension(directory: PathLike, extension: str) -> List[Path]:
    """List regular files directly inside `directory` ending in `extension` (any case)."""
    dir_path = require_directory(directory)
    suffix = extension.lower()
    try:
        matches = [
            entry for entry in dir_path.iterdir()
            if entry.is_file() and entry.name.lower().endswith(suffix)
        ]
    except OSError as exc:
        raise ArchiveIOError(
            f"Failed to traverse directory {directory} for {extension} files: {exc}"
        ) from exc
    return sorted(matches, key=lambda entry: entry.name)


def get_jar_urls_in_directory(directory: PathLike) -> List[str]:
    """Return `file:` URLs for every jar file directly inside `directory`."""
    logger = get_logger(__name__)
    jars = list_files_with_extension(directory, JAR_SUFFIX)
    logger.debug("Found %d jar file(s) in %s", len(jars), directory)
    return [jar.absolute().as_uri() for jar in jars]
