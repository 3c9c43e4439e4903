"""
Shared fixtures for the sm-menu test suite
"""

import pytest

from sm_menu.context import CliContext, CliPreferences


class ScriptedSession:
    """Stands in for a PromptSession: returns queued lines, raises queued exceptions"""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def prompt(self, message):
        self.prompts.append(message)
        if not self.lines:
            raise EOFError
        item = self.lines.pop(0)
        if isinstance(item, BaseException) or (isinstance(item, type) and issubclass(item, BaseException)):
            raise item
        return item


@pytest.fixture
def plain_context():
    """Context with the colored prompt switched off"""
    return CliContext(preferences=CliPreferences(colored_prompt=False))


@pytest.fixture
def scripted_session():
    return ScriptedSession


@pytest.fixture
def in_tmp_cwd(tmp_path, monkeypatch):
    """Run the test with an empty temporary directory as cwd"""
    monkeypatch.chdir(tmp_path)
    return tmp_path
