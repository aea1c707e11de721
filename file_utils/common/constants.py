"""
Constants and exit codes for file-utils.
"""

# Permission bits, owner/group/other x read/write/execute.
FILE_PERM_UREAD = 0o400
FILE_PERM_UWRITE = 0o200
FILE_PERM_UEXEC = 0o100
FILE_PERM_GREAD = 0o040
FILE_PERM_GWRITE = 0o020
FILE_PERM_GEXEC = 0o010
FILE_PERM_OREAD = 0o004
FILE_PERM_OWRITE = 0o002
FILE_PERM_OEXEC = 0o001

FILE_PERM_MASK = 0o777

GZIP_SUFFIX = '.gz'
JAR_SUFFIX = '.jar'

DEFAULT_COPY_BUFFER_SIZE = 64 * 1024


class ExitCodes:
    """Exit codes for different error conditions."""
    OK = 0
    INPUT_NOT_FOUND = 1
    NOT_A_DIRECTORY = 2
    ARCHIVE_FORMAT_ERROR = 3
    IO_ERROR = 4
    DIRECTORY_CREATION_FAILED = 5
    DESTINATION_EXISTS = 6
    UNSAFE_PATH = 7
    INVALID_ARGUMENT = 8
