#!/usr/bin/env python3
"""
sm-menu Interactive Shell
Reads a line, resolves it against the menu on top of the stack, runs the
command and turns its result into a move on the stack.
"""

from typing import List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import ANSI
from prompt_toolkit.history import InMemoryHistory
from rich.markup import escape

from ..command import Command, CommandResult, ResultKind
from ..commands import RootCommand
from ..config import config
from ..context import CliContext
from ..error_reporter import report_fatal_error
from ..exceptions import CliError, InvalidCommandError
from ..logger import logger
from ..ui.display import DisplayManager, console
from ..version import __app_name__
from .prompt_completer import MenuCompleter

log = logger.get_logger("cli")

INTERRUPT_NOTICE = "Operation interrupted. Type 'quit' to exit."
ROOT_NOTICE = "Already at root level."


class InteractiveCLI:
    """
    Stack-driven menu shell.

    The stack always holds at least the root command; context.current_path
    mirrors every entry above it by name.
    """

    def __init__(self, root: Optional[Command] = None, context: Optional[CliContext] = None,
                 session=None, display: Optional[DisplayManager] = None):
        self.context = context or CliContext(
            app_name=config.get("app.name", __app_name__),
            preferences=config.preferences(),
        )
        self.display = display or DisplayManager(preferences=self.context.preferences)
        self.stack: List[Command] = [root or RootCommand(display=self.display)]

        if session is None:
            session = PromptSession(
                history=InMemoryHistory(),
                completer=MenuCompleter(self.context, lambda: self.stack[-1]),
            )
        self.session = session

    @property
    def current(self) -> Command:
        return self.stack[-1]

    def get_prompt(self):
        return ANSI(self.context.get_prompt() + "? ")

    def read_line(self) -> Optional[str]:
        """
        Read one line of input

        Returns:
            The line, or None when nothing usable was read
        """
        try:
            return self.session.prompt(self.get_prompt())
        except KeyboardInterrupt:
            self.display.display_warning(INTERRUPT_NOTICE)
        except EOFError:
            log.debug("End of input, leaving the shell")
            self.context.quit()
        except (OSError, RuntimeError) as e:
            log.error(f"Failed to read input: {e}")
        return None

    def resolve(self, token: str) -> Command:
        for command in self.current.subcommands():
            if command.matches(token):
                return command
        raise InvalidCommandError(token)

    def handle_line(self, line: str):
        """Dispatch one line of user input; CliErrors are shown, never raised"""
        if not line.strip():
            self.display.display_available_commands(self.stack)
            return

        self.context.add_to_history(line)
        tokens = line.split()
        name, args = tokens[0], tokens[1:]

        try:
            command = self.resolve(name)
            log.debug(f"Dispatching '{command.name}' with args {args}")
            result = command.execute(args)
        except CliError as e:
            log.info(f"Command '{name}' failed: {e}")
            self.display.display_error(e, self.stack)
            return

        self.apply_result(command, result)

    def apply_result(self, command: Command, result: CommandResult):
        if result.kind is ResultKind.SUCCESS:
            self.display.display_success(result.message)
        elif result.kind is ResultKind.CONTINUE:
            if command.has_subcommands():
                self.stack.append(command)
                self.context.push_context(command.name)
        elif result.kind is ResultKind.GO_UP:
            if len(self.stack) > 1:
                self.stack.pop()
                self.context.pop_context()
            else:
                self.display.display_info(ROOT_NOTICE)
        elif result.kind is ResultKind.QUIT:
            self.context.quit()

    def run(self) -> int:
        """Main loop; returns the process exit code"""
        log.debug("Interactive shell started")
        self.display.display_welcome(self.context.app_name)
        while self.context.running:
            line = self.read_line()
            if line is None:
                continue
            self.handle_line(line)

        console.print(f"Thank you for using {self.context.app_name}!", markup=False)
        return 0


def run_interactive_cli(**kwargs) -> int:
    """Main function to run the interactive CLI"""
    try:
        return InteractiveCLI(**kwargs).run()
    except Exception as e:
        log.critical(f"Fatal error in interactive CLI: {e}", exc_info=True)
        report_fatal_error(e, module="interactive_cli", console=console)
        console.print(f"[red]Fatal error in interactive CLI: {escape(str(e))}[/red]")
        return 1
