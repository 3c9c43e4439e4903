#!/usr/bin/env python3
"""
sm-menu Prompt-Toolkit Completer
Completes command names and aliases of the current menu, plus matching
history lines, from the session context.
"""

from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document
from typing import Callable, Iterable

from ..context import CliContext


class MenuCompleter(Completer):
    """
    A prompt-toolkit completer bound to the live session.

    current_menu is called on every keypress so the candidates always come
    from whatever menu is on top of the stack.
    """

    def __init__(self, context: CliContext, current_menu: Callable):
        self.context = context
        self.current_menu = current_menu

    def get_completions(self, document: Document, complete_event) -> Iterable[Completion]:
        prefix = document.text_before_cursor.lstrip()
        commands = self.current_menu().subcommands()
        visible = [c for c in commands if not c.hidden]

        for candidate in self.context.get_completions(prefix, visible):
            yield Completion(
                candidate,
                start_position=-len(prefix),
                display_meta=self._get_completion_meta(candidate, visible)
            )

    @staticmethod
    def _get_completion_meta(candidate: str, commands) -> str:
        for command in commands:
            if command.matches(candidate):
                return command.description
        return "history"
