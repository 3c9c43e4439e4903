#!/usr/bin/env python3
"""
File menu
load, save and vers, plus a nested copy of the file menu itself
"""

from ..command import Command, CommandCategory, CommandResult
from ..exceptions import MissingFileError, from_os_error
from ..security import sanitize_for_display, validate_file_path, validate_file_size
from ..ui.display import console
from ..version import __app_name__, __version__
from .base import ExitCommand, InfoCommand

DEFAULT_SAVE_NAME = "untitled.txt"


class LoadCommand(Command):
    name = "load"
    aliases = ("l",)
    description = "Load a file from the working directory"
    category = CommandCategory.FILE

    def usage(self):
        return "load <filename>"

    def execute(self, args):
        self.validate_arg_count(args, 1)
        filename = args[0]
        console.print(f"Loading file: {sanitize_for_display(filename)}", markup=False)

        path = validate_file_path(filename)
        try:
            validate_file_size(path.stat().st_size)
            data = path.read_bytes()
        except OSError as e:
            raise from_os_error(e) from e

        return CommandResult.success(f"Loaded {len(data)} bytes from {filename}")


class SaveCommand(Command):
    name = "save"
    aliases = ("s",)
    description = f"Save a file (default: {DEFAULT_SAVE_NAME})"
    category = CommandCategory.FILE

    def usage(self):
        return "save [filename]"

    def execute(self, args):
        self.validate_arg_range(args, 0, 1)
        filename = args[0] if args else DEFAULT_SAVE_NAME

        try:
            validate_file_path(filename)
        except MissingFileError:
            pass  # new file

        # Simulated: nothing is written
        console.print(f"Saving file: {filename}", markup=False)
        return CommandResult.CONTINUE


class VersCommand(Command):
    name = "vers"
    aliases = ("v",)
    description = "Show version information about the application"
    category = CommandCategory.SYSTEM

    def usage(self):
        return "vers"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        console.print(f"{__app_name__} > version {__version__}", markup=False)
        return CommandResult.CONTINUE


class FileCommand(Command):
    name = "file"
    aliases = ("f",)
    description = "File operations: Load, Save, Version, Info, Exit"
    category = CommandCategory.FILE

    def usage(self):
        return "file"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        return CommandResult.CONTINUE

    def subcommands(self):
        return [
            LoadCommand(),
            SaveCommand(),
            VersCommand(),
            FileCommand(),
            InfoCommand(self.name),
            ExitCommand(),
        ]
