#!/usr/bin/env python3
"""
sm-menu Session Context
Tracks the navigation path, the running flag, command history and user
preferences for one interactive session.
"""

from collections import deque
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

MAX_HISTORY_SIZE = 100
DEFAULT_APP_NAME = "sm-menu"

PROMPT_GREEN = "\x1b[38;2;0;215;135m"
PROMPT_RESET = "\x1b[0m"


@dataclass
class CliPreferences:
    """User-facing switches for the interactive session"""
    colored_prompt: bool = True
    show_suggestions: bool = True
    confirm_destructive: bool = True
    max_list_items: int = 50


class CliContext:
    """
    Mutable state of one interactive session.

    The dispatch loop owns the command stack; this object only mirrors it as
    a list of menu names and must be kept in step by the caller.
    """

    def __init__(self, app_name: str = DEFAULT_APP_NAME, preferences: Optional[CliPreferences] = None):
        self.app_name = app_name
        self.preferences = preferences or CliPreferences()
        self.running = True
        self._path: List[str] = []
        self._history = deque(maxlen=MAX_HISTORY_SIZE)
        self.history_position = 0

    @property
    def current_path(self) -> List[str]:
        return list(self._path)

    @property
    def history(self) -> Tuple[str, ...]:
        return tuple(self._history)

    # -- navigation -------------------------------------------------------

    def push_context(self, name: str):
        """Record entry into the submenu called name"""
        self._path.append(name)

    def pop_context(self) -> Optional[str]:
        """Leave the innermost submenu; None when already at root"""
        if not self._path:
            return None
        return self._path.pop()

    def depth(self) -> int:
        return len(self._path)

    def is_root(self) -> bool:
        return not self._path

    def quit(self):
        self.running = False

    def get_prompt(self) -> str:
        """
        Render the prompt prefix for the current location

        Returns:
            "app > " at root, "app ~ a > b > " inside submenus
        """
        app = self.app_name
        if self.preferences.colored_prompt:
            app = f"{PROMPT_GREEN}{app}{PROMPT_RESET}"

        if self.is_root():
            return f"{app} > "
        return f"{app} ~ {' > '.join(self._path)} > "

    # -- history ----------------------------------------------------------

    def add_to_history(self, line: str):
        """Append a trimmed input line, skipping blanks and repeats"""
        entry = line.strip()
        if entry and (not self._history or self._history[-1] != entry):
            # deque(maxlen) drops the oldest entry on overflow
            self._history.append(entry)
        self.history_position = len(self._history)

    def previous_command(self) -> Optional[str]:
        if self.history_position == 0:
            return None
        self.history_position -= 1
        return self._history[self.history_position]

    def next_command(self) -> Optional[str]:
        if self.history_position + 1 >= len(self._history):
            return None
        self.history_position += 1
        return self._history[self.history_position]

    def get_completions(self, prefix: str, commands: Iterable) -> List[str]:
        """
        Collect completion candidates for a partial input

        Args:
            prefix: Text typed so far
            commands: Commands available at the current menu

        Returns:
            Sorted, de-duplicated names, aliases and history entries
            starting with prefix
        """
        candidates = set()
        for command in commands:
            for word in (command.name, *command.aliases):
                if word.startswith(prefix):
                    candidates.add(word)

        for entry in self._history:
            if entry.startswith(prefix):
                candidates.add(entry)

        return sorted(candidates)

    def reset(self):
        """Return to root and resume running; history is kept"""
        self._path.clear()
        self.running = True
        self.history_position = len(self._history)


class NavigationHelper:
    """Stateless helpers for reasoning about menu paths"""

    @staticmethod
    def validate_transition(current_depth: int, target_depth: int) -> bool:
        """Ascending or staying level is always allowed; descending one level at a time"""
        return target_depth <= current_depth or target_depth == current_depth + 1

    @staticmethod
    def get_relative_path(from_path: List[str], to_path: List[str]) -> List[str]:
        """
        Express to_path relative to from_path

        Example:
            get_relative_path(["a", "b", "c"], ["a", "d"]) -> ["..", "..", "d"]
        """
        common = 0
        for left, right in zip(from_path, to_path):
            if left != right:
                break
            common += 1

        return [".."] * (len(from_path) - common) + list(to_path[common:])
