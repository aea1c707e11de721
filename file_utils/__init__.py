"""file-utils - tarball extraction with POSIX permission restoration.

Provides:
* A permission codec translating 9-bit masks to `rwxrwxrwx` strings
* Gzip/tar extraction that restores each file's recorded permissions
* A helper listing jar files in a directory
* Thin CLI wrapper (`file-utils`)

Public helpers exported here are the programmatic API; the CLI wraps them.
"""

from .common.config import FileUtilsSettings  # noqa: F401
from .common.errors import (  # noqa: F401
    ArchiveFormatError,
    ArchiveIOError,
    DestinationExistsError,
    DirectoryCreationError,
    FileUtilsError,
    InputNotFoundError,
    TargetNotADirectoryError,
    UnsafeEntryPathError,
)
from .common.logging_config import configure_logging, get_logger  # noqa: F401
from .core.files import get_jar_urls_in_directory, list_files_with_extension  # noqa: F401
from .core.permissions import (  # noqa: F401
    Access,
    Tier,
    from_symbolic_permission,
    g_can_exec,
    g_can_read,
    g_can_write,
    has_permission,
    o_can_exec,
    o_can_read,
    o_can_write,
    to_symbolic_permission,
    u_can_exec,
    u_can_read,
    u_can_write,
)
from .core.tarball import copy_and_extract_archive_to_directory, un_gzip, un_tar  # noqa: F401

__version__ = "1.0.0"

__all__ = [
	"__version__",
	"configure_logging",
	"get_logger",
	"FileUtilsSettings",
	"FileUtilsError",
	"InputNotFoundError",
	"TargetNotADirectoryError",
	"ArchiveFormatError",
	"ArchiveIOError",
	"DirectoryCreationError",
	"DestinationExistsError",
	"UnsafeEntryPathError",
	"Tier",
	"Access",
	"has_permission",
	"u_can_read",
	"u_can_write",
	"u_can_exec",
	"g_can_read",
	"g_can_write",
	"g_can_exec",
	"o_can_read",
	"o_can_write",
	"o_can_exec",
	"to_symbolic_permission",
	"from_symbolic_permission",
	"un_gzip",
	"un_tar",
	"copy_and_extract_archive_to_directory",
	"list_files_with_extension",
	"get_jar_urls_in_directory",
]
