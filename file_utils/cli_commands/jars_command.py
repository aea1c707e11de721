"""Jar directory listing command for the file-utils CLI."""

from file_utils.cli_helpers import exit_with_error, map_exception_to_exit_code
from file_utils.common.constants import ExitCodes
from file_utils.common.errors import FileUtilsError
from file_utils.core.files import get_jar_urls_in_directory


class JarsCommand:
    """Lists jar files in a directory as file URLs."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('jars', help='List the jar files in a directory as file: URLs')
        parser.add_argument('directory', help='Directory to scan (not recursive)')
        parser.set_defaults(func=JarsCommand.execute)

    @staticmethod
    def execute(args) -> None:
        try:
            urls = get_jar_urls_in_directory(args.directory)
        except FileUtilsError as exc:
            exit_code = map_exception_to_exit_code(exc) or ExitCodes.IO_ERROR
            exit_with_error(str(exc), exit_code)
            return

        for url in urls:
            print(url)
