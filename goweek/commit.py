"""
commit.py
Commit and push pending report changes in the reports repository.
"""

from typing import Optional

from .clients.git import GitClient
from .config import GoWeekConfig
from .utils.utils import get_logger

logger = get_logger(__name__)

COMMIT_MESSAGE = "update weekly report"


def commit_reports(config: GoWeekConfig, git: Optional[GitClient] = None, echo=print) -> bool:
    """
    Stage, commit and push every change in the reports repository.

    Args:
        config (GoWeekConfig): Loaded configuration; ``docs_dir`` is the repository.
        git (Optional[GitClient]): Git capability to use (default: a GitClient on ``docs_dir``).
        echo (Callable[[str], None]): Sink for user-facing progress lines.

    Returns:
        bool: False when the working tree was already clean, True once pushed.
    """
    git = git or GitClient(config.docs_dir)

    # Step 1: Nothing to do on a clean tree
    if not git.status():
        logger.info("Working tree %s is clean", config.docs_dir)
        echo("No changes to commit")
        return False

    # Step 2: Stage, commit and push; the first failure aborts the sequence
    git.add_all()
    echo("Add files to git...")

    git.commit(COMMIT_MESSAGE)
    echo("Commit files to git...")

    git.push()
    echo("Push files to git!")
    return True
