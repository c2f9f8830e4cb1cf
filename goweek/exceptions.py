"""Exception types raised by goweek."""

from typing import Optional, Sequence


class GoWeekError(Exception):
    """Base class for every error goweek reports to the user."""


class ConfigError(GoWeekError):
    """The profile config or template is missing or malformed."""


class TimezoneError(GoWeekError):
    """The fixed timezone could not be loaded from the tz database."""


class CommandError(GoWeekError):
    """An external command failed to start or exited with a non-zero status.

    Attributes
    ----------
    cmd : Sequence[str]
        The argument vector that was run.
    returncode : Optional[int]
        Exit status, or None when the process never started.
    stderr : str
        Captured standard error, verbatim.

    """

    def __init__(
        self,
        cmd: Sequence[str],
        returncode: Optional[int] = None,
        stderr: str = "",
        message: Optional[str] = None,
    ):
        self.cmd = list(cmd)
        self.returncode = returncode
        self.stderr = stderr
        if message is None:
            message = f"Command failed ({returncode}): {' '.join(self.cmd)}"
            if stderr:
                message = f"{message}: {stderr.strip()}"
        super().__init__(message)
