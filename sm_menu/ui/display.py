#!/usr/bin/env python3
"""
sm-menu Display Layer
Rich-based rendering of errors, command listings, help and status lines
"""

from typing import List, Optional, Sequence
from rich.console import Console
from rich.text import Text

from ..context import CliPreferences
from ..exceptions import CliError, ErrorSeverity, InvalidCommandError
from ..security import sanitize_for_display

console = Console()
error_console = Console(stderr=True)


SEVERITY_STYLES = {
    ErrorSeverity.WARNING: "bold yellow",
    ErrorSeverity.ERROR: "bold red",
    ErrorSeverity.CRITICAL: "bold magenta",
}


class StatusIndicator:
    STATUS_SYMBOLS = {
        "success": "✓",
        "warning": "⚠",
        "info": "ℹ",
    }

    STATUS_COLORS = {
        "success": "bold green",
        "warning": "bold yellow",
        "info": "bold blue",
    }

    @staticmethod
    def format_status_message(status: str, message: str) -> Text:
        symbol = StatusIndicator.STATUS_SYMBOLS.get(status, "?")
        color = StatusIndicator.STATUS_COLORS.get(status, "white")
        return Text(f"{symbol} {message}", style=color)


class DisplayManager:
    """Renders everything the dispatch loop shows to the user"""

    def __init__(self, out: Optional[Console] = None, err: Optional[Console] = None,
                 preferences: Optional[CliPreferences] = None):
        self.console = out or console
        self.error_console = err or error_console
        self.preferences = preferences or CliPreferences()

    @staticmethod
    def format_command_name(command) -> Text:
        """Command name in cyan, first letter bold when an alias starts with it"""
        name = command.name
        text = Text(style="cyan")
        if name and any(alias.lower().startswith(name[0].lower()) for alias in command.aliases):
            text.append(name[0].upper(), style="bold cyan")
            text.append(name[1:])
        else:
            text.append(name)
        return text

    def _command_line(self, command) -> Text:
        line = Text("  ")
        line.append_text(self.format_command_name(command))
        if command.aliases:
            line.append(f" ({', '.join(a.upper() for a in command.aliases)})")
        line.append(f" - {command.description}")
        return line

    def _listing(self, commands: Sequence) -> List[Text]:
        visible = [c for c in commands if not c.hidden]
        limit = self.preferences.max_list_items
        lines = [self._command_line(c) for c in visible[:limit]]
        if len(visible) > limit:
            lines.append(Text(f"  ... and {len(visible) - limit} more", style="dim"))
        return lines

    def display_error(self, error: CliError, stack: Sequence):
        """Show an error by severity; invalid commands also list what is available"""
        style = SEVERITY_STYLES.get(error.severity, "bold red")
        self.error_console.print(Text(f"{error.icon} {sanitize_for_display(str(error))}", style=style))

        if isinstance(error, InvalidCommandError):
            self.display_available_commands(stack)

    def display_available_commands(self, stack: Sequence):
        if not stack:
            return
        for line in self._listing(stack[-1].subcommands()):
            self.console.print(line)

    def display_help(self, command):
        name = command.name
        self.console.print(Text(name.upper(), style="bold green"))
        self.console.print("=" * len(name))
        self.console.print(Text(command.description))

        if command.aliases:
            self.console.print(Text(f"\nAliases: {', '.join(command.aliases)}"))

        self.console.print(Text(f"\nUsage: {command.usage()}"))

        lines = self._listing(command.subcommands())
        if lines:
            self.console.print("\nSubcommands:")
            for line in lines:
                self.console.print(line)

    def display_success(self, message: str):
        if message:
            self.console.print(StatusIndicator.format_status_message("success", sanitize_for_display(message)))

    def display_warning(self, message: str):
        self.console.print(StatusIndicator.format_status_message("warning", sanitize_for_display(message)))

    def display_info(self, message: str):
        self.console.print(StatusIndicator.format_status_message("info", sanitize_for_display(message)))

    def clear_screen(self):
        self.console.clear()

    def display_welcome(self, app_name: str):
        """Clear the terminal and greet the user"""
        self.clear_screen()
        self.console.print(Text(f"\n\tWelcome to {app_name}!\n", style="bold green"))
