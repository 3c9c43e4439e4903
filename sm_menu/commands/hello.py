#!/usr/bin/env python3
"""Greeting command"""

from ..command import Command, CommandResult


class HelloCommand(Command):
    name = "hello"
    aliases = ("hi", "greet")
    description = "Say hello to someone"

    def usage(self):
        return "hello [name]"

    def execute(self, args):
        self.validate_arg_range(args, 0, 1)
        who = args[0] if args else "World"
        return CommandResult.success(f"Hello, {who}!")
