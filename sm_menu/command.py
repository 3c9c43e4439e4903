#!/usr/bin/env python3
"""
sm-menu Command Abstraction
Base class for every menu entry, the result protocol that tells the
dispatch loop what to do next, and a small registry.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .exceptions import InvalidInputError, TooFewArgumentsError, TooManyArgumentsError


class ResultKind(Enum):
    SUCCESS = "success"
    CONTINUE = "continue"
    GO_UP = "go_up"
    QUIT = "quit"


@dataclass(frozen=True)
class CommandResult:
    """
    Outcome of a command execution.

    SUCCESS shows its message (if any), CONTINUE enters the command when it
    has subcommands, GO_UP leaves the current menu, QUIT ends the session.
    """
    kind: ResultKind
    message: str = ""

    @classmethod
    def success(cls, message: str) -> "CommandResult":
        return cls(ResultKind.SUCCESS, message)

    @classmethod
    def success_silent(cls) -> "CommandResult":
        return cls(ResultKind.SUCCESS, "")


CommandResult.CONTINUE = CommandResult(ResultKind.CONTINUE)
CommandResult.GO_UP = CommandResult(ResultKind.GO_UP)
CommandResult.QUIT = CommandResult(ResultKind.QUIT)


class CommandCategory(Enum):
    GENERAL = "general"
    FILE = "file"
    EDIT = "edit"
    VIEW = "view"
    SYSTEM = "system"

    @property
    def display_name(self) -> str:
        return self.value.capitalize()


class Command(ABC):
    """
    A node of the menu tree.

    Subclasses set name/aliases/description as class attributes, implement
    execute(), and override subcommands() when they open a submenu. The
    children are built fresh on every call so no state leaks between visits.
    """

    name: str = ""
    aliases: Sequence[str] = ()
    description: str = ""
    category: CommandCategory = CommandCategory.GENERAL
    hidden: bool = False

    @abstractmethod
    def execute(self, args: List[str]) -> CommandResult:
        """Run the command; raise a CliError on failure"""

    def subcommands(self) -> List["Command"]:
        return []

    def has_subcommands(self) -> bool:
        return len(self.subcommands()) > 0

    def matches(self, text: str) -> bool:
        """Case-insensitive match against the name or any alias"""
        lowered = text.lower()
        if self.name.lower() == lowered:
            return True
        return any(alias.lower() == lowered for alias in self.aliases)

    def usage(self) -> str:
        return f"{self.name} [OPTIONS]"

    def help(self) -> str:
        if self.aliases:
            return f"{self.name} ({', '.join(self.aliases)}) - {self.description}"
        return f"{self.name} - {self.description}"

    # -- argument validation ----------------------------------------------

    @staticmethod
    def validate_arg_count(args: Sequence[str], expected: int):
        """
        Require exactly `expected` arguments

        Raises:
            TooFewArgumentsError: fewer than expected
            TooManyArgumentsError: more than expected
        """
        found = len(args)
        if found < expected:
            raise TooFewArgumentsError(expected, found)
        if found > expected:
            raise TooManyArgumentsError(expected, found)

    @staticmethod
    def validate_arg_range(args: Sequence[str], minimum: int, maximum: int):
        """
        Require between `minimum` and `maximum` arguments (inclusive)

        Raises:
            TooFewArgumentsError: fewer than minimum
            TooManyArgumentsError: more than maximum
        """
        found = len(args)
        if found < minimum:
            raise TooFewArgumentsError(minimum, found)
        if found > maximum:
            raise TooManyArgumentsError(maximum, found)

    @staticmethod
    def validate_not_empty(value: str, field_name: str = "value") -> str:
        if value is None or not value.strip():
            raise InvalidInputError(f"{field_name} cannot be empty")
        return value.strip()

    def __repr__(self):
        return f"<{self.__class__.__name__} {self.name!r}>"


class CommandRegistry:
    """Flat lookup table of commands, keyed by name"""

    def __init__(self):
        self._commands: Dict[str, Command] = {}

    def register(self, command: Command):
        self._commands[command.name] = command

    def find_command(self, text: str) -> Optional[Command]:
        for command in self._commands.values():
            if command.matches(text):
                return command
        return None

    def commands(self) -> List[Command]:
        return list(self._commands.values())

    def commands_by_category(self) -> Dict[CommandCategory, List[Command]]:
        grouped: Dict[CommandCategory, List[Command]] = {}
        for command in self._commands.values():
            grouped.setdefault(command.category, []).append(command)
        return grouped
