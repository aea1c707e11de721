"""Permission mask conversion command for the file-utils CLI."""

from file_utils.cli_helpers import exit_with_error
from file_utils.common.constants import ExitCodes
from file_utils.core.permissions import to_symbolic_permission


def parse_mask(text: str, decimal: bool = False) -> int:
    """Parse a mask given as octal (`644`, `0644`, `0o644`) or decimal."""
    return int(text.strip(), 10 if decimal else 8)


class PermsCommand:
    """Prints the symbolic form of a permission mask."""

    @staticmethod
    def add_parser(subparsers) -> None:
        parser = subparsers.add_parser('perms', help='Show the rwxrwxrwx form of a permission mask')
        parser.add_argument('mask', help='Permission mask, octal unless --decimal is given')
        parser.add_argument('--decimal', action='store_true', help='Read the mask as a decimal number')
        parser.set_defaults(func=PermsCommand.execute)

    @staticmethod
    def execute(args) -> None:
        try:
            mask = parse_mask(args.mask, args.decimal)
        except ValueError:
            exit_with_error(f"Invalid permission mask: {args.mask!r}", ExitCodes.INVALID_ARGUMENT)
            return
        print(to_symbolic_permission(mask))
