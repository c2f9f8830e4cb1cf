"""
writer.py
Persist a filled weekly report under its month folder without ever
overwriting an existing report.
"""

from dataclasses import dataclass
import os

from .dates import DateInfo
from .utils.utils import get_logger

logger = get_logger(__name__)

REPORT_FILE_PATTERN = "weekly-report-{week}.md"


@dataclass(frozen=True)
class WriteResult:
    """Outcome of ``write_report``: the report path and whether it was written now."""

    path: str
    created: bool


def report_path(date_info: DateInfo, docs_dir: str) -> str:
    """Return ``<docs_dir>/<month>/weekly-report-<week>.md`` for the given week."""
    month_dir = os.path.join(docs_dir, date_info.month)
    return os.path.join(month_dir, REPORT_FILE_PATTERN.format(week=date_info.week))


def write_report(content: str, date_info: DateInfo, docs_dir: str) -> WriteResult:
    """Write the report for ``date_info`` unless it already exists.

    The month folder is created when missing, but ``docs_dir`` itself must
    already exist.

    Args:
        content : Filled report text.
        date_info : Week the report belongs to.
        docs_dir : Reports root directory.

    Returns:
        A WriteResult with the report path; ``created`` is False when an
        existing file was left untouched.

    Raises:
        OSError: when the month folder cannot be created or the file written.

    """
    path = report_path(date_info, docs_dir)
    month_dir = os.path.dirname(path)
    if not os.path.isdir(month_dir):
        logger.debug("Creating month directory %s", month_dir)
        os.mkdir(month_dir, 0o755)

    if os.path.exists(path):
        logger.debug('file "%s" already exists', path)
        return WriteResult(path=path, created=False)

    with open(path, "x", encoding="utf-8") as f:
        f.write(content)
    logger.debug('Weekly report saved to "%s" successfully', path)
    return WriteResult(path=path, created=True)
