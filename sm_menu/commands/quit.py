#!/usr/bin/env python3
"""Quit command"""

from ..command import Command, CommandCategory, CommandResult
from ..ui.display import console


class QuitCommand(Command):
    name = "quit"
    aliases = ("q",)
    description = "Exit the program"
    category = CommandCategory.SYSTEM

    def usage(self):
        return "quit"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        console.print("Goodbye!")
        return CommandResult.QUIT
