"""
template.py
Fill the weekly report template with the resolved week dates.
"""

from .dates import DateInfo

WEEK_PLACEHOLDER = "{{.Week}}"
WEEK_START_PLACEHOLDER = "{{.WeekStart}}"
WEEK_END_PLACEHOLDER = "{{.WeekEnd}}"


def fill_template(template: str, date_info: DateInfo) -> str:
    """
    Replace every week placeholder in the template with its date value.

    Args:
        template (str): Raw template text.
        date_info (DateInfo): Resolved week dates.

    Returns:
        str: The template with all placeholders substituted.
    """
    content = template.replace(WEEK_PLACEHOLDER, date_info.week)
    content = content.replace(WEEK_START_PLACEHOLDER, date_info.week_start)
    content = content.replace(WEEK_END_PLACEHOLDER, date_info.week_end)
    return content
