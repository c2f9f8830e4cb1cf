from unittest.mock import MagicMock

import pytest

from goweek.commit import COMMIT_MESSAGE, commit_reports
from goweek.config import GoWeekConfig
from goweek.exceptions import CommandError

CONFIG = GoWeekConfig(docs_dir="/reports", typora_path="/bin/typora")


class FakeGit:
    """Records git calls instead of running them."""

    def __init__(self, status_output="", fail_on=None):
        self.status_output = status_output
        self.fail_on = fail_on
        self.calls = []

    def _call(self, name, *args):
        self.calls.append((name,) + args)
        if name == self.fail_on:
            raise CommandError(["git", name], 1, f"{name} rejected")

    def status(self):
        self._call("status")
        return self.status_output

    def add_all(self):
        self._call("add_all")

    def commit(self, message):
        self._call("commit", message)

    def push(self):
        self._call("push")


def test_clean_tree_skips_add_commit_push():
    git = FakeGit(status_output="")
    echo = MagicMock()

    assert commit_reports(CONFIG, git=git, echo=echo) is False
    assert git.calls == [("status",)]
    echo.assert_called_once_with("No changes to commit")


def test_dirty_tree_runs_full_sequence():
    git = FakeGit(status_output="?? 2024-05/weekly-report-20.md\n")
    lines = []

    assert commit_reports(CONFIG, git=git, echo=lines.append) is True
    assert git.calls == [("status",), ("add_all",), ("commit", COMMIT_MESSAGE), ("push",)]
    assert lines == ["Add files to git...", "Commit files to git...", "Push files to git!"]


def test_first_failure_aborts_sequence():
    git = FakeGit(status_output=" M a.md\n", fail_on="commit")

    with pytest.raises(CommandError, match="commit rejected"):
        commit_reports(CONFIG, git=git, echo=lambda _: None)
    assert ("push",) not in git.calls


def test_default_git_client_targets_docs_dir(monkeypatch):
    import goweek.commit as commit_mod

    created = {}

    def fake_client(repo_dir):
        created["repo_dir"] = repo_dir
        return FakeGit()

    monkeypatch.setattr(commit_mod, "GitClient", fake_client)

    commit_reports(CONFIG, echo=lambda _: None)

    assert created["repo_dir"] == "/reports"
