#!/usr/bin/env python3
"""
Calculator menu
Two-operand arithmetic: add and subtract.
"""

from ..command import Command, CommandResult
from ..exceptions import InvalidInputError
from .base import ExitCommand, InfoCommand


def parse_number(value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise InvalidInputError(f"'{value}' is not a number") from None


def format_number(value: float) -> str:
    return f"{value:g}"


class _BinaryOperation(Command):
    symbol = ""

    def usage(self):
        return f"{self.name} <a> <b>"

    def apply(self, a: float, b: float) -> float:
        raise NotImplementedError

    def execute(self, args):
        self.validate_arg_count(args, 2)
        a, b = parse_number(args[0]), parse_number(args[1])
        result = self.apply(a, b)
        return CommandResult.success(
            f"{format_number(a)} {self.symbol} {format_number(b)} = {format_number(result)}"
        )


class AddCommand(_BinaryOperation):
    name = "add"
    aliases = ("+",)
    description = "Add two numbers"
    symbol = "+"

    def apply(self, a, b):
        return a + b


class SubtractCommand(_BinaryOperation):
    name = "subtract"
    aliases = ("-", "sub")
    description = "Subtract the second number from the first"
    symbol = "-"

    def apply(self, a, b):
        return a - b


class CalcCommand(Command):
    name = "calc"
    aliases = ("calculator",)
    description = "Calculator operations: Add, Subtract"

    def usage(self):
        return "calc"

    def execute(self, args):
        self.validate_arg_count(args, 0)
        return CommandResult.CONTINUE

    def subcommands(self):
        return [AddCommand(), SubtractCommand(), InfoCommand(self.name), ExitCommand()]
