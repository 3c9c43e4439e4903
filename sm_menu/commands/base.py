#!/usr/bin/env python3
"""Commands shared by every submenu"""

from ..command import Command, CommandCategory, CommandResult
from ..ui.display import console


class InfoCommand(Command):
    """Hidden per-menu information command"""

    name = "info"
    aliases = ("i",)
    description = "Display information about the current menu"
    category = CommandCategory.SYSTEM
    hidden = True

    def __init__(self, menu_name: str):
        self.menu_name = menu_name

    def usage(self):
        return "info"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        console.print(f"{self.menu_name} menu information:")
        console.print("Available commands in this menu:")
        console.print("  Type any command name to execute it")
        console.print("  Use 'exit' (or 'e') to return to parent menu")
        return CommandResult.success_silent()


class ExitCommand(Command):
    name = "exit"
    aliases = ("e",)
    description = "Exit to the parent menu"
    category = CommandCategory.SYSTEM

    def usage(self):
        return "exit"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        return CommandResult.GO_UP
