"""Archive extraction command handling for the file-utils CLI."""

from file_utils.cli_helpers import exit_with_error, map_exception_to_exit_code
from file_utils.common.constants import ExitCodes
from file_utils.common.errors import FileUtilsError
from file_utils.core.tarball import copy_and_extract_archive_to_directory


class ExtractCommand:
    """Copies a tarball into a directory and extracts it there."""

    @staticmethod
    def add_parser(subparsers) -> None:
        """Add extract command parser to subparsers."""
        parser = subparsers.add_parser(
            'extract',
            help='Copy a .tar or .tar.gz archive into a directory and extract it there',
        )
        parser.add_argument('archive', help='The tarball to extract')
        parser.add_argument('target_dir', help='Existing directory to extract into')
        parser.add_argument('--allow-unsafe-paths', action='store_true', default=None,
                            help='Allow entries that resolve outside the target directory')
        parser.set_defaults(func=ExtractCommand.execute)

    @staticmethod
    def execute(args) -> None:
        """Run the extraction and print one extracted path per line."""
        try:
            paths = copy_and_extract_archive_to_directory(
                args.archive,
                args.target_dir,
                allow_unsafe_paths=args.allow_unsafe_paths,
            )
        except (FileUtilsError, ValueError) as exc:
            exit_code = map_exception_to_exit_code(exc)
            if exit_code is None:
                exit_code = ExitCodes.IO_ERROR
            exit_with_error(str(exc), exit_code)
            return

        for path in paths:
            print(path)
