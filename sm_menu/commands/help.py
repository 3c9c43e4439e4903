#!/usr/bin/env python3
"""Help command for whichever menu it is attached to"""

from ..command import Command, CommandCategory, CommandResult
from ..exceptions import InvalidInputError
from ..ui.display import DisplayManager, console


class HelpCommand(Command):
    name = "help"
    aliases = ("h",)
    description = "Help information for the available commands"
    category = CommandCategory.GENERAL

    def __init__(self, menu: Command, display: DisplayManager = None):
        self.menu = menu
        self.display = display or DisplayManager()

    def usage(self):
        return "help [command]"

    def execute(self, args):
        self.validate_arg_range(args, 0, 1)
        siblings = self.menu.subcommands()

        if not args:
            console.print("[bold]sm-menu Help[/bold]")
            console.print("============")
            console.print("Available commands:")
            self.display.display_available_commands([self.menu])
            console.print()
            console.print("Type a command name to enter its submenu or see its options.")
            console.print("Use 'help <command>' for specific command help.")
            return CommandResult.CONTINUE

        wanted = args[0]
        for command in siblings:
            if command.matches(wanted):
                self.display.display_help(command)
                return CommandResult.CONTINUE

        raise InvalidInputError(f"No help available for command: {wanted}")
