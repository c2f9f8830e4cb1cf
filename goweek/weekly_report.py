"""
weekly_report.py
Module for creating this week's (or last week's) report from the profile
template and opening it in the configured editor.
"""

from datetime import datetime
from typing import Optional

from .clients.editor import EditorLauncher
from .config import load_config, read_template
from .dates import DEFAULT_TIMEZONE, get_date_info
from .template import fill_template
from .utils.utils import get_logger
from .writer import WriteResult, write_report

logger = get_logger(__name__)


def create_weekly_report(
    profile_dir: str,
    last_week: bool = False,
    now: Optional[datetime] = None,
    launcher: Optional[EditorLauncher] = None,
    tz_name: str = DEFAULT_TIMEZONE,
    echo=print,
) -> WriteResult:
    """
    Create the weekly report from the template and open it in the editor.

    Args:
        profile_dir (str): Directory holding ``config.json`` and ``template.md``.
        last_week (bool): Target the week seven days before ``now``.
        now (Optional[datetime]): Reference instant (default: current time).
        launcher (Optional[EditorLauncher]): Editor to open the report with
            (default: the configured ``typora_path``).
        tz_name (str): Timezone used to resolve the week.
        echo (Callable[[str], None]): Sink for user-facing status lines.

    Returns:
        WriteResult: Path of the report and whether it was created by this call.
    """
    # Step 1: Read the template and config
    template = read_template(profile_dir)
    config = load_config(profile_dir)

    # Step 2: Determine the week and fill the template
    date_info = get_date_info(last_week, now=now, tz_name=tz_name)
    logger.info(
        "Resolved week %s (%s - %s)", date_info.week, date_info.week_start, date_info.week_end
    )
    content = fill_template(template, date_info)

    # Step 3: Write the report unless it already exists
    result = write_report(content, date_info, config.docs_dir)
    if result.created:
        echo(f'Weekly report saved to "{result.path}" successfully')
    else:
        echo(f'file "{result.path}" already exists')

    # Step 4: Open it; a launch failure leaves the written report in place
    launcher = launcher or EditorLauncher(config.typora_path)
    launcher.open(result.path)
    return result
