"""
Tarball extraction with permission restoration.

Handles:
* Decompressing a single gzip layer (`un_gzip`)
* Streaming a tar archive entry by entry (`un_tar`)
* Copying an archive into a directory and extracting it there
  (`copy_and_extract_archive_to_directory`)

Extraction is best-effort and non-transactional: the first failure aborts
the walk and anything written before it stays on disk.
"""

from __future__ import annotations

import gzip
import shutil
import tarfile
import zlib
from pathlib import Path
from typing import List, Optional

from file_utils.common.config import FileUtilsSettings
from file_utils.common.constants import FILE_PERM_MASK, GZIP_SUFFIX
from file_utils.common.errors import (
    ArchiveFormatError,
    ArchiveIOError,
    UnsafeEntryPathError,
)
from file_utils.common.logging_config import get_logger

from .files import (
    PathLike,
    copy_file_no_overwrite,
    make_directories,
    require_directory,
    require_file,
    set_posix_permissions,
)
from .permissions import to_symbolic_permission


def _ensure_contained(output_root: Path, output_path: Path, entry_name: str) -> None:
    target = output_path.resolve()
    if target != output_root and output_root not in target.parents:
        raise UnsafeEntryPathError(f"Unsafe tar entry path detected: {entry_name!r}")


def _write_file_entry(
    tar: tarfile.TarFile,
    entry: tarfile.TarInfo,
    output_path: Path,
    buffer_size: int,
) -> None:
    source = tar.extractfile(entry)
    if source is None:
        raise ArchiveFormatError(f"Tar entry {entry.name!r} has no readable content")
    with source, output_path.open("wb") as out:
        shutil.copyfileobj(source, out, buffer_size)
    mode = entry.mode & FILE_PERM_MASK
    get_logger(__name__).debug("Restoring mode %03o on %s.", mode, output_path)
    set_posix_permissions(output_path, to_symbolic_permission(mode))


def un_tar(
    input_file: PathLike,
    output_dir: PathLike,
    *,
    allow_unsafe_paths: Optional[bool] = None,
    settings: Optional[FileUtilsSettings] = None,
) -> List[Path]:
    """
    Untar `input_file` into `output_dir`.

    Directory entries are created when missing and keep the default
    permissions of the creating process. Regular file entries are written
    and then get the permission bits recorded in the archive.

    Args:
        input_file: An uncompressed tar archive
        output_dir: Directory the entries are resolved against
        allow_unsafe_paths: Skip the check that every entry stays inside
            `output_dir` (defaults to the settings value)
        settings: Overrides the environment-derived settings

    Returns:
        Absolute output paths, one per directory or file entry, in archive order

    Raises:
        InputNotFoundError: `input_file` does not exist
        TargetNotADirectoryError: `output_dir` is not a directory
        ArchiveFormatError: The stream is not a tar archive
        UnsafeEntryPathError: An entry escapes `output_dir`
        DirectoryCreationError: A directory entry could not be created
        ArchiveIOError: Reading the archive or writing an entry failed
    """
    settings = settings or FileUtilsSettings.from_env()
    if allow_unsafe_paths is None:
        allow_unsafe_paths = settings.allow_unsafe_paths

    logger = get_logger(__name__)
    input_path = require_file(input_file)
    output_root = require_directory(output_dir).absolute()
    resolved_root = output_root.resolve()

    logger.info("Untarring %s to dir %s.", input_path.absolute(), output_root)

    untarred: List[Path] = []
    try:
        if input_path.stat().st_size == 0:
            logger.info("Archive %s is empty, nothing to extract.", input_path)
            return untarred
        with input_path.open("rb") as stream, tarfile.open(fileobj=stream, mode="r|") as tar:
            for entry in tar:
                # Absolute member names are resolved against the output directory too.
                output_path = output_root / entry.name.lstrip("/")
                if not allow_unsafe_paths:
                    _ensure_contained(resolved_root, output_path, entry.name)

                if entry.isdir():
                    logger.info("Attempting to write output directory %s.", output_path)
                    if not output_path.exists():
                        logger.info("Attempting to create output directory %s.", output_path)
                        make_directories(output_path)
                elif entry.isfile():
                    logger.info("Creating output file %s.", output_path)
                    _write_file_entry(tar, entry, output_path, settings.copy_buffer_size)
                else:
                    logger.warning(
                        "Skipping unsupported tar entry %r (type %r).", entry.name, entry.type
                    )
                    continue
                untarred.append(output_path)
    except tarfile.TarError as exc:
        raise ArchiveFormatError(f"Failed to read tar archive {input_path}: {exc}") from exc
    except OSError as exc:
        raise ArchiveIOError(f"Failed to untar {input_path} to {output_root}: {exc}") from exc

    return untarred


def un_gzip(
    input_file: PathLike,
    output_dir: PathLike,
    *,
    settings: Optional[FileUtilsSettings] = None,
) -> Path:
    """
    Ungzip `input_file` into `output_dir`.

    The output file takes the input file name minus its last three
    characters (the `.gz` suffix). The suffix itself is not checked.

    Raises:
        InputNotFoundError: `input_file` does not exist
        TargetNotADirectoryError: `output_dir` is not a directory
        ValueError: The file name is too short to strip a suffix from
        ArchiveIOError: The gzip stream is corrupt or truncated, or writing failed
    """
    settings = settings or FileUtilsSettings.from_env()
    logger = get_logger(__name__)
    input_path = require_file(input_file)
    output_root = require_directory(output_dir)

    if len(input_path.name) <= len(GZIP_SUFFIX):
        raise ValueError(f"Cannot derive an output name from {input_path.name!r}")

    logger.info("Ungzipping %s to dir %s.", input_path.absolute(), output_root.absolute())
    output_path = output_root / input_path.name[:-len(GZIP_SUFFIX)]

    try:
        with gzip.open(input_path, "rb") as src, output_path.open("wb") as dst:
            shutil.copyfileobj(src, dst, settings.copy_buffer_size)
    except (OSError, EOFError, zlib.error) as exc:
        raise ArchiveIOError(f"Failed to ungzip {input_path}: {exc}") from exc

    return output_path


def copy_and_extract_archive_to_directory(
    archive_file: PathLike,
    target_dir: PathLike,
    *,
    allow_unsafe_paths: Optional[bool] = None,
    settings: Optional[FileUtilsSettings] = None,
) -> List[Path]:
    """
    Copy a tarball, gzipped or not, into `target_dir` and extract the copy there.

    Both paths are validated before anything is written. The copy never
    replaces an existing file of the same name.

    Returns:
        The paths produced by `un_tar`
    """
    settings = settings or FileUtilsSettings.from_env()
    logger = get_logger(__name__)
    archive_path = require_file(archive_file)
    target_path = require_directory(target_dir)

    new_archive = copy_file_no_overwrite(
        archive_path,
        target_path / archive_path.name,
        settings.copy_buffer_size,
    )
    logger.debug("Copied data file %s to directory %s", archive_path, target_path)

    if new_archive.name.lower().endswith(GZIP_SUFFIX):
        new_archive = un_gzip(new_archive, target_path, settings=settings)
        logger.debug("Unzipped gzip archive file (%s) in directory (%s)", new_archive, target_path)

    # At this point the archive is not gzipped, or it is not an archive at all.
    return un_tar(
        new_archive,
        target_path,
        allow_unsafe_paths=allow_unsafe_paths,
        settings=settings,
    )
