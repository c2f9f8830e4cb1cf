"""Launch the configured Markdown editor on a report file."""

import subprocess

from ..exceptions import CommandError
from ..utils.utils import get_logger

logger = get_logger(__name__)

FULLSCREEN_FLAG = "--fullscreen"


class EditorLauncher:
    """
    Open files in an external editor without waiting for it to exit.

    Parameters
    ----------
    executable : str
        Path to the editor binary (``typora_path`` from the config).

    """

    def __init__(self, executable: str):
        self.executable = executable

    def open(self, path: str) -> subprocess.Popen:
        """Start the editor in fullscreen mode on ``path``.

        Args:
            path : File to open.

        Returns:
            The started process handle. It is never waited on.

        Raises:
            CommandError: when the editor process cannot be started.

        """
        cmd = [self.executable, FULLSCREEN_FLAG, path]
        logger.debug("Launching %s", " ".join(cmd))
        try:
            return subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
        except OSError as e:
            raise CommandError(cmd, message=f"Unable to launch editor {self.executable}: {e}")
