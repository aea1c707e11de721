"""Registry for CLI subcommands."""

from .extract_command import ExtractCommand
from .jars_command import JarsCommand
from .perms_command import PermsCommand

COMMANDS = (
    ExtractCommand,
    PermsCommand,
    JarsCommand,
)

__all__ = ["COMMANDS", "ExtractCommand", "PermsCommand", "JarsCommand"]
