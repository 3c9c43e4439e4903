"""Built-in command tree"""

from ..command import Command, CommandResult
from .base import ExitCommand, InfoCommand
from .calc import AddCommand, CalcCommand, SubtractCommand
from .edit import AxisCommand, EditCommand, ShowCommand, ViewCommand
from .file import FileCommand, LoadCommand, SaveCommand, VersCommand
from .hello import HelloCommand
from .help import HelpCommand
from .quit import QuitCommand


class RootCommand(Command):
    """Top of the menu tree; never shown, never left"""

    name = "root"
    description = "Main menu"

    def __init__(self, display=None):
        self.display = display

    def execute(self, args):
        return CommandResult.CONTINUE

    def subcommands(self):
        return [
            FileCommand(),
            EditCommand(),
            ViewCommand(),
            HelpCommand(self, display=self.display),
            HelloCommand(),
            CalcCommand(),
            QuitCommand(),
            InfoCommand("main"),
        ]


__all__ = [
    "RootCommand", "FileCommand", "LoadCommand", "SaveCommand", "VersCommand",
    "EditCommand", "ViewCommand", "AxisCommand", "ShowCommand", "HelpCommand",
    "HelloCommand", "CalcCommand", "AddCommand", "SubtractCommand",
    "QuitCommand", "InfoCommand", "ExitCommand",
]
