"""
Tests for the interactive dispatch loop, driven by a scripted session
"""

from unittest.mock import MagicMock, patch

import pytest
from prompt_toolkit.formatted_text import ANSI
from sm_menu.cli import interactive_cli
from sm_menu.cli.interactive_cli import InteractiveCLI, run_interactive_cli
from sm_menu.command import Command, CommandResult
from sm_menu.commands import RootCommand
from sm_menu.context import CliContext, CliPreferences
from sm_menu.exceptions import InternalError, InvalidCommandError


def make_cli(context, session, display=None):
    return InteractiveCLI(context=context, session=session, display=display)


class TestEndToEnd:
    def test_file_load_exit_quit(self, in_tmp_cwd, plain_context, scripted_session, capsys):
        (in_tmp_cwd / "readme.txt").write_text("read me")
        session = scripted_session(["file", "load readme.txt", "exit", "quit"])
        cli = make_cli(plain_context, session)

        depths = []
        original = cli.handle_line

        def tracking(line):
            original(line)
            depths.append(plain_context.depth())

        cli.handle_line = tracking
        assert cli.run() == 0

        assert depths == [1, 1, 0, 0]
        out = capsys.readouterr().out
        assert "Loading file: readme.txt" in out
        assert "Goodbye!" in out
        assert "Thank you for using sm-menu!" in out
        assert not plain_context.running

    def test_prompts_follow_navigation(self, plain_context, scripted_session):
        session = scripted_session(["f", "f", "quit"])
        make_cli(plain_context, session).run()
        prompts = [p.value if isinstance(p, ANSI) else p for p in session.prompts]
        assert prompts[0] == "sm-menu > ? "
        assert prompts[1] == "sm-menu ~ file > ? "
        assert prompts[2] == "sm-menu ~ file > file > ? "

    def test_stack_mirrors_path(self, plain_context, scripted_session):
        cli = make_cli(plain_context, scripted_session(["edit", "EXIT", "view"]))
        cli.run()
        assert [c.name for c in cli.stack] == ["root", "view"]
        assert plain_context.current_path == ["view"]


class TestDispatch:
    def test_invalid_command_keeps_depth(self, plain_context, scripted_session, capsys):
        cli = make_cli(plain_context, scripted_session(["file", "bogus"]))
        cli.run()
        assert plain_context.current_path == ["file"]
        assert len(cli.stack) == 2
        err = capsys.readouterr().err
        assert "Invalid command: 'bogus'" in err

    def test_invalid_command_shows_listing(self, plain_context):
        display = MagicMock()
        cli = make_cli(plain_context, MagicMock(), display=display)
        cli.handle_line("nope")
        error, stack = display.display_error.call_args[0]
        assert isinstance(error, InvalidCommandError)
        assert stack is cli.stack

    def test_go_up_at_root(self, plain_context):
        display = MagicMock()
        cli = make_cli(plain_context, MagicMock(), display=display)
        cli.apply_result(RootCommand(), CommandResult.GO_UP)
        cli.apply_result(RootCommand(), CommandResult.GO_UP)
        assert len(cli.stack) == 1
        assert plain_context.depth() == 0
        display.display_info.assert_called_with("Already at root level.")
        display.display_error.assert_not_called()

    def test_continue_on_leaf_does_not_descend(self, plain_context, scripted_session):
        cli = make_cli(plain_context, scripted_session(["file", "vers"]))
        cli.run()
        assert plain_context.current_path == ["file"]

    def test_blank_line_lists_commands(self, plain_context):
        display = MagicMock()
        cli = make_cli(plain_context, MagicMock(), display=display)
        cli.handle_line("   ")
        display.display_available_commands.assert_called_once_with(cli.stack)
        assert plain_context.history == ()

    def test_history_recorded(self, plain_context, scripted_session):
        make_cli(plain_context, scripted_session(["  hello  ", "hello", "calc"])).run()
        assert plain_context.history == ("hello", "calc")

    def test_success_message_displayed(self, plain_context, scripted_session, capsys):
        make_cli(plain_context, scripted_session(["calc", "add 2 2"])).run()
        assert "2 + 2 = 4" in capsys.readouterr().out

    def test_argument_error_rendered(self, plain_context, scripted_session, capsys):
        make_cli(plain_context, scripted_session(["hello a b"])).run()
        assert "Too many arguments: expected 1, found 2" in capsys.readouterr().err

    def test_internal_error_keeps_running(self, plain_context, scripted_session, capsys):
        class Broken(Command):
            name = "broken"

            def execute(self, args):
                raise InternalError("stack empty")

        class Root(Command):
            name = "root"

            def execute(self, args):
                return CommandResult.CONTINUE

            def subcommands(self):
                return [Broken()]

        cli = InteractiveCLI(root=Root(), context=plain_context,
                             session=scripted_session(["broken", "broken"]))
        assert cli.run() == 0
        assert capsys.readouterr().err.count("Internal error: stack empty") == 2


class TestReadFailures:
    def test_keyboard_interrupt(self, plain_context, scripted_session, capsys):
        cli = make_cli(plain_context, scripted_session([KeyboardInterrupt, "quit"]))
        assert cli.run() == 0
        assert "Operation interrupted. Type 'quit' to exit." in capsys.readouterr().out

    def test_eof_ends_session(self, plain_context, scripted_session, capsys):
        cli = make_cli(plain_context, scripted_session(["file"]))
        assert cli.run() == 0
        assert not plain_context.running
        assert "Thank you for using sm-menu!" in capsys.readouterr().out

    def test_os_error_is_logged_and_loop_continues(self, plain_context, scripted_session):
        session = scripted_session([OSError("tty gone"), "quit"])
        with patch.object(interactive_cli.log, "error") as log_error:
            assert make_cli(plain_context, session).run() == 0
        log_error.assert_called_once()
        assert session.lines == []


class TestFatalGuard:
    def test_unexpected_exception_returns_one(self, plain_context, scripted_session, capsys):
        class Exploding(Command):
            name = "root"

            def execute(self, args):
                return CommandResult.CONTINUE

            def subcommands(self):
                raise ValueError("tree is broken")

        with patch.object(interactive_cli, "report_fatal_error") as report:
            code = run_interactive_cli(root=Exploding(), context=plain_context,
                                       session=scripted_session(["anything"]))

        assert code == 1
        report.assert_called_once()
        assert isinstance(report.call_args[0][0], ValueError)
        assert "Fatal error in interactive CLI" in capsys.readouterr().out

    def test_clean_run_returns_zero(self, plain_context, scripted_session):
        assert run_interactive_cli(context=plain_context, session=scripted_session(["q"])) == 0

    def test_bracketed_message_still_exits_cleanly(self, plain_context, scripted_session,
                                                   capsys, monkeypatch, tmp_path):
        monkeypatch.setattr("sm_menu.error_reporter.DEFAULT_REPORT_DIR", tmp_path)

        class Exploding(Command):
            name = "root"

            def execute(self, args):
                return CommandResult.CONTINUE

            def subcommands(self):
                raise ValueError("bad index [/tmp]")

        code = run_interactive_cli(root=Exploding(), context=plain_context,
                                   session=scripted_session(["anything"]))

        assert code == 1
        out = capsys.readouterr().out
        assert "Fatal error in interactive CLI: bad index [/tmp]" in out
        assert list(tmp_path.glob("error_*.log"))


class TestSessionDetails:
    def test_null_byte_argument_is_reported(self, plain_context, scripted_session, capsys):
        code = run_interactive_cli(context=plain_context,
                                   session=scripted_session(["file", "load a\x00b", "exit", "quit"]))
        assert code == 0
        assert plain_context.is_root()
        assert "Invalid input: Path contains a null byte" in capsys.readouterr().err

    def test_null_byte_keeps_depth(self, plain_context, scripted_session):
        cli = make_cli(plain_context, scripted_session(["file", "load a\x00b"]))
        cli.run()
        assert plain_context.current_path == ["file"]
        assert len(cli.stack) == 2

    def test_welcome_banner(self, plain_context, scripted_session, capsys):
        make_cli(plain_context, scripted_session(["quit"])).run()
        out = capsys.readouterr().out
        assert "Welcome to sm-menu!" in out
        assert out.index("Welcome to sm-menu!") < out.index("Goodbye!")

    def test_help_uses_session_list_limit(self, scripted_session, capsys):
        context = CliContext(preferences=CliPreferences(colored_prompt=False, max_list_items=2))
        make_cli(context, scripted_session(["help", "quit"])).run()
        out = capsys.readouterr().out
        assert "... and 5 more" in out
