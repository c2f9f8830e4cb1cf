"""
Thin wrapper over the ``git`` command line scoped to one working tree.

Each method is a fresh blocking ``git`` invocation run inside the
repository directory; failures raise CommandError carrying git's stderr.
"""

from typing import List, Optional
import subprocess

from ..exceptions import CommandError
from ..utils.utils import get_logger

logger = get_logger(__name__)


def run_cmd(cmd: List[str], cwd: Optional[str] = None) -> str:
    """Run a command and return stdout, raise on error.

    Args:
        cmd : Argument vector to execute.
        cwd : Working directory for the command.

    Returns:
        The decoded standard output.

    Raises:
        CommandError: when the command cannot be started or exits non-zero.

    """
    logger.debug("Running %s in %s", " ".join(cmd), cwd)
    try:
        proc = subprocess.run(cmd, cwd=cwd, capture_output=True)
    except OSError as e:
        raise CommandError(cmd, message=f"Unable to run {cmd[0]}: {e}")
    if proc.returncode != 0:
        raise CommandError(cmd, proc.returncode, proc.stderr.decode("utf-8", errors="replace"))
    return proc.stdout.decode("utf-8", errors="replace")


class GitClient:
    """
    Run git status/add/commit/push against a single repository directory.

    Parameters
    ----------
    repo_dir : str
        Working tree every command runs in.
    executable : str
        Name or path of the git binary.

    """

    def __init__(self, repo_dir: str, executable: str = "git"):
        self.repo_dir = repo_dir
        self.executable = executable

    def _git(self, *args: str) -> str:
        return run_cmd([self.executable, *args], cwd=self.repo_dir)

    def status(self) -> str:
        """Return ``git status --porcelain`` output; empty when the tree is clean."""
        return self._git("status", "--porcelain")

    def add_all(self) -> None:
        self._git("add", ".")

    def commit(self, message: str) -> None:
        self._git("commit", "-m", message)

    def push(self) -> None:
        self._git("push")
