import subprocess
from unittest.mock import MagicMock

import pytest

import goweek.clients.editor as editor_mod
import goweek.clients.git as git_mod
from goweek.clients.editor import EditorLauncher
from goweek.clients.git import GitClient, run_cmd
from goweek.exceptions import CommandError


def _completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=stdout, stderr=stderr)


def test_git_client_runs_commands_in_repo_dir(monkeypatch):
    fake_run = MagicMock(return_value=_completed(stdout=b" M a.md\n"))
    monkeypatch.setattr(git_mod.subprocess, "run", fake_run)

    client = GitClient("/reports")
    assert client.status() == " M a.md\n"
    client.add_all()
    client.commit("update weekly report")
    client.push()

    cmds = [c.args[0] for c in fake_run.call_args_list]
    assert cmds == [
        ["git", "status", "--porcelain"],
        ["git", "add", "."],
        ["git", "commit", "-m", "update weekly report"],
        ["git", "push"],
    ]
    assert all(c.kwargs["cwd"] == "/reports" for c in fake_run.call_args_list)


def test_run_cmd_raises_with_stderr_on_failure(monkeypatch):
    monkeypatch.setattr(
        git_mod.subprocess,
        "run",
        MagicMock(return_value=_completed(returncode=128, stderr=b"fatal: not a git repository")),
    )

    with pytest.raises(CommandError) as excinfo:
        run_cmd(["git", "status", "--porcelain"], cwd="/tmp")

    assert excinfo.value.returncode == 128
    assert excinfo.value.stderr == "fatal: not a git repository"
    assert "fatal: not a git repository" in str(excinfo.value)


def test_run_cmd_raises_when_binary_missing(monkeypatch):
    monkeypatch.setattr(git_mod.subprocess, "run", MagicMock(side_effect=FileNotFoundError("git")))

    with pytest.raises(CommandError) as excinfo:
        run_cmd(["git", "push"])

    assert excinfo.value.returncode is None


def test_editor_launch_is_fullscreen_and_not_waited(monkeypatch):
    proc = MagicMock()
    fake_popen = MagicMock(return_value=proc)
    monkeypatch.setattr(editor_mod.subprocess, "Popen", fake_popen)

    assert EditorLauncher("/bin/typora").open("/reports/2024-05/weekly-report-20.md") is proc

    assert fake_popen.call_args.args[0] == [
        "/bin/typora",
        "--fullscreen",
        "/reports/2024-05/weekly-report-20.md",
    ]
    proc.wait.assert_not_called()


def test_editor_start_failure_raises(monkeypatch):
    monkeypatch.setattr(
        editor_mod.subprocess, "Popen", MagicMock(side_effect=FileNotFoundError("typora"))
    )

    with pytest.raises(CommandError, match="Unable to launch editor"):
        EditorLauncher("/missing/typora").open("report.md")
