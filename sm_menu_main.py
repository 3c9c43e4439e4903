#!/usr/bin/env python3
"""
sm-menu - Interactive Hierarchical Command Menu
Main entry point using Typer
"""

import sys

import typer
from rich.console import Console

from sm_menu.cli import run_interactive_cli
from sm_menu.config import config
from sm_menu.context import CliContext
from sm_menu.exceptions import CliError
from sm_menu.logger import logger
from sm_menu.version import __app_name__, __status__, __version__

console = Console()

app = typer.Typer(
    name="sm-menu",
    help="sm-menu - Interactive hierarchical command menu",
    add_completion=False
)


def show_version():
    """Show version information"""
    console.print(f"[bold cyan]{__app_name__}[/bold cyan] v{__version__} ({__status__})")
    console.print("[dim]Interactive hierarchical command menu[/dim]")


def start_shell(no_color: bool = False):
    """Build the session context from configuration and run the shell"""
    preferences = config.preferences()
    if no_color:
        preferences.colored_prompt = False

    context = CliContext(app_name=config.get("app.name", __app_name__), preferences=preferences)
    code = run_interactive_cli(context=context)
    raise typer.Exit(code=code)


@app.command("version", help="Show version information")
def version():
    """Show version information"""
    show_version()


@app.command("interactive", help="Start the interactive menu")
def interactive_cmd(ctx: typer.Context):
    """Start the interactive menu"""
    start_shell(no_color=ctx.obj.get("no_color", False))


@app.command("i", help="Start the interactive menu (shorthand)")
def interactive_shortcut(ctx: typer.Context):
    """Start the interactive menu (shorthand)"""
    start_shell(no_color=ctx.obj.get("no_color", False))


@app.callback(invoke_without_command=True, help="sm-menu - Interactive hierarchical command menu")
def callback(
    ctx: typer.Context,
    no_color: bool = typer.Option(False, "--no-color", help="Disable the colored prompt"),
):
    """Start the menu when no command is provided"""
    ctx.obj = {"no_color": no_color}
    if ctx.invoked_subcommand is None:
        start_shell(no_color=no_color)


def main():
    """
    Main entry point for sm-menu.
    Parses arguments using Typer and routes to the shell or the version screen.
    """
    try:
        config.validate()
        logger.info(f"{__app_name__} started")

        app()

    except CliError as e:
        console.print(f"\n[bold red]Error: {e.message}[/bold red]")
        if e.details:
            console.print(f"[dim]Details: {e.details}[/dim]")
        logger.error(f"{e.code}: {e.message}")
        sys.exit(1)

    except KeyboardInterrupt:
        console.print("\n[bold yellow]Operation cancelled by user[/bold yellow]")
        logger.info("User interrupted operation (Ctrl+C)")
        sys.exit(0)


if __name__ == "__main__":
    main()
