#!/usr/bin/env python3
"""
Edit and view menus
Both share the axis and show commands, which word their output after the
menu they were opened from.
"""

import re

from ..command import Command, CommandCategory, CommandResult
from ..exceptions import InvalidInputError
from ..ui.display import console
from .base import ExitCommand, InfoCommand

AXIS_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

AXIS_DESCRIPTIONS = {
    "edit": "Configure axis properties for the editing environment",
    "view": "Configure axis properties for the viewing environment",
}

AXIS_MESSAGES = {
    "edit": "Configuring axis properties for editing: {}",
    "view": "Configuring axis properties for viewing: {}",
}

SHOW_DESCRIPTIONS = {
    "edit": "Display current edit state and configuration",
    "view": "Display current view state and configuration",
}

SHOW_STATE = {
    "edit": ["Displaying current edit state...", "Edit mode: Active", "Current selection: None"],
    "view": ["Displaying current view state...", "View mode: Active", "Current perspective: Default"],
}


class AxisCommand(Command):
    name = "axis"
    aliases = ("a",)

    def __init__(self, menu: str):
        self.menu = menu
        self.category = CommandCategory.VIEW if menu == "view" else CommandCategory.EDIT
        self.description = AXIS_DESCRIPTIONS.get(menu, "Configure axis properties")

    def usage(self):
        return "axis [name]"

    def execute(self, args):
        self.validate_arg_range(args, 0, 1)
        axis_name = self.validate_not_empty(args[0], "Axis name") if args else "default"

        if not AXIS_NAME_PATTERN.match(axis_name):
            raise InvalidInputError(
                "Axis name can only contain alphanumeric characters, underscores, and hyphens"
            )

        template = AXIS_MESSAGES.get(self.menu, "Configuring axis properties: {}")
        console.print(template.format(axis_name), markup=False)
        return CommandResult.CONTINUE


class ShowCommand(Command):
    name = "show"
    aliases = ("sh",)

    def __init__(self, menu: str):
        self.menu = menu
        self.category = CommandCategory.VIEW if menu == "view" else CommandCategory.EDIT
        self.description = SHOW_DESCRIPTIONS.get(menu, "Display current state")

    def usage(self):
        return "show"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        for line in SHOW_STATE.get(self.menu, ["Displaying current state...", "Status: Active"]):
            console.print(line)
        return CommandResult.CONTINUE


class _WorkspaceMenu(Command):
    """Submenu holding axis/show for one workspace"""

    def usage(self):
        return self.name

    def execute(self, args):
        self.validate_arg_count(args, 0)
        return CommandResult.CONTINUE

    def subcommands(self):
        return [
            AxisCommand(self.name),
            ShowCommand(self.name),
            InfoCommand(self.name),
            ExitCommand(),
        ]


class EditCommand(_WorkspaceMenu):
    name = "edit"
    aliases = ("e",)
    description = "Edit operations: Axis, Show, Info, Exit"
    category = CommandCategory.EDIT


class ViewCommand(_WorkspaceMenu):
    name = "view"
    aliases = ("v",)
    description = "View operations: Axis, Show, Info, Exit"
    category = CommandCategory.VIEW
