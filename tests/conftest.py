"""Shared pytest fixtures for jira tests."""

import pytest


@pytest.fixture
def db_path(tmp_path, monkeypatch):
    """Path to a database file inside a temporary data directory.

    JIRA_DB_PATH points at it so nothing touches ./data/db.json.
    The file itself is not created.
    """
    path = tmp_path / "data" / "db.json"
    monkeypatch.setenv("JIRA_DB_PATH", str(path))
    return path


@pytest.fixture
def db(db_path):
    """Freshly initialized, empty database handle."""
    from jira_core import init_database

    return init_database(db_path)


class FakePrompts:
    """Deterministic stand-in for Prompts.

    Records every call in ``calls`` and answers from fixed values.
    """

    def __init__(self, epic=None, story=None, confirm=True, status=None):
        self.epic = epic or {"name": "Epic", "description": "Epic description"}
        self.story = story or {"name": "Story", "description": "Story description"}
        self.confirm_answer = confirm
        self.status = status
        self.calls = []

    def build_epic(self):
        self.calls.append("build_epic")
        return dict(self.epic)

    def build_story(self):
        self.calls.append("build_story")
        return dict(self.story)

    def confirm(self, question):
        self.calls.append("confirm")
        return self.confirm_answer

    def choose_status(self):
        self.calls.append("choose_status")
        return self.status


@pytest.fixture
def fake_prompts():
    """Prompts that accept everything and pick no status."""
    return FakePrompts()


@pytest.fixture
def make_prompts():
    """Factory for FakePrompts with custom answers."""
    return FakePrompts


@pytest.fixture
def scripted_input():
    """Factory for a read_line callable that replays the given lines.

    Raises EOFError once the lines run out.
    """

    def factory(*lines):
        remaining = list(lines)

        def read_line():
            if not remaining:
                raise EOFError
            return remaining.pop(0)

        return read_line

    return factory
